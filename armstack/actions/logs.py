from __future__ import annotations

import argparse

from .common import config_of, make_engine


def handler(args: argparse.Namespace) -> int:
    engine = make_engine(config_of(args))
    try:
        rc = engine.compose_logs(follow=True)
    except KeyboardInterrupt:
        # Following logs only ends on Ctrl-C.
        print("")
        return 0
    return 0 if rc == 0 else 1
