from __future__ import annotations

import argparse

from ..colors import warn
from ..errors import EngineError
from .common import config_of, make_engine, make_inventory


IMAGE_KEYWORDS = ("mysql", "openjdk", "temurin")
IMAGE_LIMIT = 10


def handler(args: argparse.Namespace) -> int:
    config = config_of(args)
    engine = make_engine(config)

    if config.compose_file.exists():
        try:
            engine.compose_ps()
        except EngineError as exc:
            warn(f"⚠ Could not query services: {exc}")
    else:
        print(f"No compose file at {config.compose_file} (stack never started)")

    print("")
    print("Local images:")
    for ref in make_inventory(engine).matching_any(IMAGE_KEYWORDS, limit=IMAGE_LIMIT):
        print(f"  {ref}")
    return 0
