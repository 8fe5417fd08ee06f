from __future__ import annotations

import subprocess
from pathlib import Path

from .colors import ok, warn
from .errors import FetchError
from .proc import run


def clone(url: str, dest: Path) -> bool:
    """
    Shallow-clone ``url`` into ``dest`` unless ``dest`` already exists.

    Returns True when a clone happened.
    """
    if dest.exists():
        ok(f"✅ {dest} already exists, skipping clone")
        return False

    warn(f"⬇️ Cloning {url} ...")
    try:
        run(["git", "clone", "--depth", "1", url, str(dest)], check=True)
    except (subprocess.CalledProcessError, OSError) as exc:
        raise FetchError(f"❌ git clone {url} failed") from exc
    return True
