from __future__ import annotations

import argparse
import re
from typing import Callable

from ..colors import ok, warn
from ..workspace import clean_targets, remove_paths
from .common import config_of


PROMPT = "Remove all generated files (source checkout, jar, Dockerfiles, compose file)? [y/N]: "
YES_RE = re.compile(r"^[Yy]$")


def confirmed(ask: Callable[[str], str] = input) -> bool:
    try:
        answer = ask(PROMPT)
    except EOFError:
        return False
    return bool(YES_RE.match(answer.strip()))


def handler(args: argparse.Namespace, ask: Callable[[str], str] = input) -> int:
    warn("🧹 Cleaning build files ...")
    if not confirmed(ask):
        print("Nothing removed.")
        return 0

    for path in remove_paths(clean_targets(config_of(args))):
        print(f"  removed {path}")
    ok("✅ Cleaned")
    return 0
