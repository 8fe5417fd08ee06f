from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Optional

from .colors import ok, warn
from .errors import BuildError
from .proc import run


EXCLUDED_MARKERS = ("sources", "javadoc")


def find_artifact(project_dir: Path) -> Optional[Path]:
    """
    Return the runnable jar under any ``target/`` directory of ``project_dir``.

    Source and javadoc jars are skipped. With several candidates the first by
    path wins.
    """
    candidates = sorted(
        (
            p
            for p in project_dir.rglob("*.jar")
            if p.is_file()
            and "target" in p.relative_to(project_dir).parts[:-1]
            and not any(m in p.name for m in EXCLUDED_MARKERS)
        ),
        key=str,
    )
    return candidates[0] if candidates else None


def build(project_dir: Path) -> Path:
    warn(f"🔧 Maven build of {project_dir.name} ...")
    if not project_dir.is_dir():
        raise BuildError(f"❌ project directory not found: {project_dir}")

    try:
        run(["mvn", "-DskipTests", "clean", "package"], cwd=project_dir, check=True)
    except (subprocess.CalledProcessError, OSError) as exc:
        raise BuildError("❌ Maven build failed") from exc

    warn("🔎 Looking for the executable jar ...")
    jar = find_artifact(project_dir)
    if jar is None:
        raise BuildError("❌ no executable jar found")

    ok(f"✔ Found jar: {jar}")
    return jar


def deploy_artifact(jar: Path, dest: Path) -> Path:
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(jar, dest)
    ok(f"✔ Copied to: {dest}")
    return dest
