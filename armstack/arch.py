from __future__ import annotations

import platform
from enum import Enum

from .colors import warn


class ArchClass(str, Enum):
    ARM = "arm"
    OTHER = "other"


ARM64_NAMES = frozenset({"arm64", "aarch64"})


def classify(raw: str) -> ArchClass:
    """Map a machine name (``uname -m``) onto ARM or OTHER. Never fails."""
    return ArchClass.ARM if raw in ARM64_NAMES else ArchClass.OTHER


def detect() -> ArchClass:
    machine = platform.machine()
    warn(f"🔍 Detected host architecture: {machine}")
    return classify(machine)
