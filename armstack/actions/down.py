from __future__ import annotations

import argparse

from .common import config_of, make_engine


def handler(args: argparse.Namespace) -> int:
    rc = make_engine(config_of(args)).compose_down()
    return 0 if rc == 0 else 1
