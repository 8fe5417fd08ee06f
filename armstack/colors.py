from __future__ import annotations

import sys


class Style:  # type: ignore
    RESET_ALL = "\033[0m"
    BRIGHT = "\033[1m"


class Fore:  # type: ignore
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"


def color_text(text: str, color: str) -> str:
    return f"{color}{text}{Style.RESET_ALL}"


def ok(msg: str) -> None:
    print(color_text(msg, Fore.GREEN))


def warn(msg: str) -> None:
    print(color_text(msg, Fore.YELLOW))


def fail(msg: str) -> None:
    print(color_text(msg, Fore.RED), file=sys.stderr)


def step(msg: str) -> None:
    print(f">>> {msg}")
