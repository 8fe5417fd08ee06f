from __future__ import annotations

import argparse

from ..colors import warn
from .down import handler as down_handler
from .up import handler as up_handler


def handler(args: argparse.Namespace) -> int:
    # 1) down (best-effort)
    down_rc = down_handler(args)
    if down_rc != 0:
        warn(f">>> WARNING: down returned rc={down_rc}, continuing with up")

    # 2) up
    return int(up_handler(args))
