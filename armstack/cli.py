from __future__ import annotations

import argparse
import importlib
import sys
from typing import Callable, Dict

from .actions import ACTION_NAMES
from .colors import fail
from .config import load_config
from .errors import DeployError


Handler = Callable[[argparse.Namespace], int]

USAGE = """\
usage: armstack [--workdir DIR] [--git-url URL] {up|down|restart|logs|status|clean}

  up       build and start the stack (default)
  down     stop the stack
  restart  down, then up
  logs     follow service logs
  status   show services and local base images
  clean    remove source checkout, jar and generated files
"""


def _load_handlers(base_pkg: str) -> Dict[str, Handler]:
    """
    Import ``<base_pkg>.actions.<name>`` for every known action.
    """
    handlers: Dict[str, Handler] = {}
    for name in ACTION_NAMES:
        mod = importlib.import_module(f"{base_pkg}.actions.{name}")
        handlers[name] = mod.handler
    return handlers


class UsageError(Exception):
    """Raised instead of argparse's exit status 2 on bad command lines."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="armstack",
        description="JimuReport + MySQL docker compose helper for ARM hosts.",
        usage="%(prog)s [--workdir DIR] [--git-url URL] {" + "|".join(ACTION_NAMES) + "}",
        add_help=True,
    )
    p.add_argument(
        "action",
        nargs="?",
        default="up",
        help="Lifecycle action (default: up).",
    )
    p.add_argument(
        "--workdir",
        help="Deployment workspace (default: $ARMSTACK_WORKDIR or cwd).",
    )
    p.add_argument(
        "--git-url",
        help="Repository to clone the application from (default: $ARMSTACK_GIT_URL).",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        print(f"armstack: {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    handlers = _load_handlers(__package__ or "armstack")
    handler = handlers.get(args.action)
    if handler is None:
        print(USAGE, file=sys.stderr)
        return 1

    args.config = load_config(workdir=args.workdir, git_url=args.git_url)

    try:
        return int(handler(args))
    except DeployError as exc:
        fail(str(exc))
        return 1
