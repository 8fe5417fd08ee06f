from __future__ import annotations

import argparse

from ..config import DeployConfig
from ..engine import DockerEngine
from ..inventory import ImageInventory


def config_of(args: argparse.Namespace) -> DeployConfig:
    return args.config


def make_engine(config: DeployConfig) -> DockerEngine:
    return DockerEngine(workdir=config.workdir, compose_file=config.compose_file)


def make_inventory(engine: DockerEngine) -> ImageInventory:
    return ImageInventory(engine)
