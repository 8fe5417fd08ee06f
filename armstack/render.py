from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml
from jinja2 import Environment, StrictUndefined

from .colors import ok
from .config import (
    APP_NAME,
    APP_PORT,
    DB_NAME,
    DB_PORT,
    DB_ROOT_PASSWORD,
    DeployConfig,
)
from .selection import ImageSelection


DB_DOCKERFILE_TMPL = """\
FROM {{ image }}
ENV LANG C.UTF-8
"""

APP_DOCKERFILE_TMPL = """\
FROM {{ image }}

WORKDIR /{{ app }}
COPY jar/app.jar /{{ app }}/app.jar

EXPOSE {{ port }}
ENTRYPOINT ["java","-jar","/{{ app }}/app.jar"]
"""


def _jinja_env() -> Environment:
    # StrictUndefined: a missing image must fail instead of rendering "FROM ".
    return Environment(
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )


def render_db_dockerfile(image: str) -> str:
    return _jinja_env().from_string(DB_DOCKERFILE_TMPL).render(image=image)


def render_app_dockerfile(image: str) -> str:
    return (
        _jinja_env()
        .from_string(APP_DOCKERFILE_TMPL)
        .render(image=image, app=APP_NAME, port=APP_PORT)
    )


def compose_document() -> Dict[str, Any]:
    return {
        "version": "3.8",
        "services": {
            DB_NAME: {
                "build": {"context": f"./{DB_NAME}"},
                "container_name": DB_NAME,
                "restart": "always",
                "environment": {"MYSQL_ROOT_PASSWORD": DB_ROOT_PASSWORD},
                "ports": [f"{DB_PORT}:{DB_PORT}"],
                "volumes": ["./data/mysql:/var/lib/mysql"],
            },
            APP_NAME: {
                "build": {"context": f"./{APP_NAME}"},
                "container_name": APP_NAME,
                "restart": "always",
                "depends_on": [DB_NAME],
                "ports": [f"{APP_PORT}:{APP_PORT}"],
            },
        },
    }


def render_compose() -> str:
    return yaml.safe_dump(
        compose_document(), sort_keys=False, default_flow_style=False
    )


def write_atomic(path: Path, content: str) -> Path:
    """
    Write ``content`` to ``path`` through a sibling tmp file and rename.
    """
    if path.exists() and path.is_dir():
        raise RuntimeError(f"Output path is a directory: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(content, encoding="utf-8")
    tmp.replace(path)
    return path


def write_files(config: DeployConfig, selection: ImageSelection) -> List[Path]:
    """Write both Dockerfiles and the compose file, overwriting previous ones."""
    ok(f"📄 Writing Dockerfiles (JDK image: {selection.runtime_image})")
    written = [
        write_atomic(
            config.db_dockerfile, render_db_dockerfile(selection.database_image)
        ),
        write_atomic(
            config.app_dockerfile, render_app_dockerfile(selection.runtime_image)
        ),
        write_atomic(config.compose_file, render_compose()),
    ]
    return written
