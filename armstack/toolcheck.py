from __future__ import annotations

import shutil
import subprocess

from .colors import warn
from .errors import ToolMissingError
from .proc import run


REQUIRED_TOOLS = ("docker", "git")


def require(tool: str) -> str:
    path = shutil.which(tool)
    if not path:
        raise ToolMissingError(f"❌ {tool} is not installed")
    return path


def ensure_maven() -> None:
    """
    Make sure ``mvn`` is available, installing it through Homebrew when
    possible (macOS hosts).
    """
    if shutil.which("mvn"):
        return

    warn("⚠ Maven not found, installing it with brew...")
    if not shutil.which("brew"):
        raise ToolMissingError("❌ brew not found, please install Maven manually")

    try:
        run(["brew", "install", "maven"], check=True)
    except (subprocess.CalledProcessError, OSError) as exc:
        raise ToolMissingError("❌ brew install maven failed") from exc


def check_env() -> None:
    for tool in REQUIRED_TOOLS:
        require(tool)
    ensure_maven()
