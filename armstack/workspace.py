from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

from .config import DeployConfig


def ensure_structure(config: DeployConfig) -> List[Path]:
    """Create the workspace directories; existing ones are left alone."""
    dirs = [config.db_dir, config.app_dir, config.jar_dir, config.data_dir]
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)
    return dirs


def clean_targets(config: DeployConfig) -> List[Path]:
    """
    Everything ``clean`` removes. The MySQL data directory is not included.
    """
    return [
        config.src_root,
        config.app_jar,
        config.db_dockerfile,
        config.app_dockerfile,
        config.compose_file,
    ]


def remove_paths(paths: List[Path]) -> List[Path]:
    removed: List[Path] = []
    for p in paths:
        if p.is_dir() and not p.is_symlink():
            shutil.rmtree(p)
        elif p.exists() or p.is_symlink():
            p.unlink()
        else:
            continue
        removed.append(p)
    return removed
