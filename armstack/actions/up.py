from __future__ import annotations

import argparse

from .. import arch, maven, render, source, toolcheck, workspace
from ..colors import ok, step, warn
from ..config import APP_PORT
from ..engine import DockerEngine
from ..inventory import ImageInventory
from ..selection import ImageSelection, missing_images, select_images
from .common import config_of, make_engine, make_inventory


ACCESS_PATH = "/jmreport/list"
DEFAULT_LOGIN = ("admin", "123456")


def ensure_images(
    selection: ImageSelection, inventory: ImageInventory, engine: DockerEngine
) -> list[str]:
    """Pull every selected image that is not present locally."""
    warn("🐳 Checking images ...")
    pulled = []
    for ref in missing_images(selection, inventory):
        warn(f"📥 Pulling image: {ref}")
        engine.pull(ref)
        pulled.append(ref)
    return pulled


def _print_summary(engine: DockerEngine) -> None:
    ok("🎉 JimuReport is up!")
    print("")
    ok(f"URL:   http://localhost:{APP_PORT}{ACCESS_PATH}")
    ok(f"Login: {DEFAULT_LOGIN[0]}   password: {DEFAULT_LOGIN[1]}")
    print("")
    ok("Containers:")
    engine.compose_ps()


def handler(args: argparse.Namespace) -> int:
    config = config_of(args)

    step("Checking required tools")
    toolcheck.check_env()

    step(f"Preparing workspace {config.workdir}")
    workspace.ensure_structure(config)

    source.clone(config.git_url, config.src_root)

    jar = maven.build(config.example_dir)
    maven.deploy_artifact(jar, config.app_jar)

    engine = make_engine(config)
    inventory = make_inventory(engine)
    selection = select_images(arch.detect(), inventory)

    render.write_files(config, selection)

    ensure_images(selection, inventory, engine)
    engine.compose_build(no_pull=True)
    engine.compose_up()

    _print_summary(engine)
    return 0
