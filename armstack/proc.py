from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Union


PathLike = Union[str, Path]


def run(
    cmd: List[str],
    *,
    cwd: Optional[PathLike] = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """
    Run a command with stdout/stderr passthrough.
    """
    return subprocess.run(
        cmd,
        cwd=cwd,
        check=check,
        stdout=sys.stdout,
        stderr=sys.stderr,
    )


def run_quiet(
    cmd: List[str], *, cwd: Optional[PathLike] = None
) -> subprocess.CompletedProcess:
    """
    Run a probe command, discarding its output. Never raises on non-zero exit.
    """
    return subprocess.run(
        cmd,
        cwd=cwd,
        check=False,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


def run_capture(
    cmd: List[str], *, cwd: Optional[PathLike] = None
) -> subprocess.CompletedProcess:
    return subprocess.run(
        cmd,
        cwd=cwd,
        check=False,
        capture_output=True,
        text=True,
    )
