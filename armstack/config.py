from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


DEFAULT_GIT_URL = "https://github.com/jeecgboot/jimureport.git"

APP_NAME = "jimureport"
DB_NAME = "jimureport-mysql"
APP_PORT = 8085
DB_PORT = 3306
DB_ROOT_PASSWORD = "root"


@dataclass(frozen=True)
class DeployConfig:
    """
    Workspace layout for one deployment.

    All paths hang off ``workdir``; docker compose runs from there so the
    relative build contexts in the compose file resolve.
    """

    workdir: Path
    git_url: str = DEFAULT_GIT_URL

    @property
    def src_root(self) -> Path:
        return self.workdir / f"{APP_NAME}-src"

    @property
    def example_dir(self) -> Path:
        return self.src_root / f"{APP_NAME}-example"

    @property
    def app_dir(self) -> Path:
        return self.workdir / APP_NAME

    @property
    def db_dir(self) -> Path:
        return self.workdir / DB_NAME

    @property
    def jar_dir(self) -> Path:
        return self.app_dir / "jar"

    @property
    def app_jar(self) -> Path:
        return self.jar_dir / "app.jar"

    @property
    def data_dir(self) -> Path:
        return self.workdir / "data" / "mysql"

    @property
    def app_dockerfile(self) -> Path:
        return self.app_dir / "Dockerfile"

    @property
    def db_dockerfile(self) -> Path:
        return self.db_dir / "Dockerfile"

    @property
    def compose_file(self) -> Path:
        return self.workdir / "docker-compose.yml"


def load_config(
    workdir: Optional[str] = None, git_url: Optional[str] = None
) -> DeployConfig:
    """
    Build the config from explicit values, then ARMSTACK_* env vars, then defaults.
    """
    wd = workdir or os.environ.get("ARMSTACK_WORKDIR") or os.getcwd()
    url = git_url or os.environ.get("ARMSTACK_GIT_URL") or DEFAULT_GIT_URL
    return DeployConfig(workdir=Path(wd).expanduser().resolve(), git_url=url)
