from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

from .colors import step
from .errors import EngineError
from .proc import run, run_capture, run_quiet


IMAGE_LS_FORMAT = "{{.Repository}}:{{.Tag}}"


class DockerEngine:
    """
    Small wrapper around:
      docker image ...
      docker compose -f <compose_file> ...
    run from the deployment workspace.
    """

    def __init__(self, workdir: Path, compose_file: Path) -> None:
        self.workdir = workdir
        self.compose_file = compose_file

    # ---- images -----------------------------------------------------------

    def image_exists(self, ref: str) -> bool:
        r = run_quiet(["docker", "image", "inspect", ref], cwd=self.workdir)
        return int(r.returncode) == 0

    def list_images(self) -> List[str]:
        """
        Return ``repository:tag`` for every local image in docker's listing order.
        """
        r = run_capture(
            ["docker", "image", "ls", "--format", IMAGE_LS_FORMAT], cwd=self.workdir
        )
        if int(r.returncode) != 0:
            return []
        return [line.strip() for line in (r.stdout or "").splitlines() if line.strip()]

    def pull(self, ref: str) -> None:
        try:
            run(["docker", "pull", ref], cwd=self.workdir, check=True)
        except (subprocess.CalledProcessError, OSError) as exc:
            raise EngineError(f"docker pull {ref} failed") from exc

    # ---- compose ----------------------------------------------------------

    def _compose_cmd(self, *args: str) -> List[str]:
        return ["docker", "compose", "-f", str(self.compose_file), *args]

    def compose(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        cmd = self._compose_cmd(*args)
        try:
            return run(cmd, cwd=self.workdir, check=check)
        except (subprocess.CalledProcessError, OSError) as exc:
            raise EngineError(f"{' '.join(cmd)} failed") from exc

    def compose_build(self, *, no_pull: bool = True) -> None:
        args = ["build"]
        if no_pull:
            args.append("--pull=false")
        step("Building application images")
        self.compose(*args)

    def compose_up(self) -> None:
        step("Starting services")
        self.compose("up", "-d")

    def compose_down(self) -> int:
        step("Stopping services")
        return int(self.compose("down", check=False).returncode)

    def compose_logs(self, *, follow: bool = True) -> int:
        args = ["logs"]
        if follow:
            args.append("-f")
        return int(self.compose(*args, check=False).returncode)

    def compose_ps(self) -> int:
        return int(self.compose("ps", check=False).returncode)
