"""sonar_sync/config.py

Settings loading: environment (optionally seeded from ``.env``) and JSON
settings files.

Passwords never come from settings files. They are resolved lazily by a
password loader right before a client is built (see
:class:`sonar_sync.client.ServerClientFactory`).
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .errors import SonarConfigError
from .types import ServerSettings

ROOT_DIR = Path(__file__).resolve().parents[1]
ENV_PATH = ROOT_DIR / ".env"

SONAR_HOST_DEFAULT = "http://localhost:9000"

_TRUTHY = {"1", "true", "yes", "on"}


def load_env(dotenv_path: Path = ENV_PATH) -> None:
    """Load ``.env`` into ``os.environ`` without overriding existing keys."""
    if dotenv_path.exists():
        load_dotenv(dotenv_path, override=False)


def _parse_flag(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    raise SonarConfigError(f"Expected a boolean, got {value!r}")


def _env_flag(name: str) -> bool:
    return _parse_flag(os.environ.get(name))


def settings_from_env() -> ServerSettings:
    return ServerSettings(
        host=os.environ.get("SONAR_HOST") or SONAR_HOST_DEFAULT,
        user=os.environ.get("SONAR_USER") or None,
        anonymous=_env_flag("SONAR_ANONYMOUS"),
        resource=os.environ.get("SONAR_RESOURCE") or "",
    )


def env_password_loader(settings: ServerSettings) -> None:
    """Default password loader: fill ``settings.password`` from SONAR_PASSWORD."""
    if settings.password is None:
        settings.password = os.environ.get("SONAR_PASSWORD") or None


def _server_entries(data: Any) -> List[Dict[str, Any]]:
    if isinstance(data, dict) and "servers" in data:
        servers = data["servers"]
        if not isinstance(servers, list):
            raise SonarConfigError("'servers' must be a list")
        return servers
    if isinstance(data, dict):
        return [data]
    raise SonarConfigError("Settings file must contain a JSON object")


def _settings_for_entry(entry: Dict[str, Any], default_host: Optional[str]) -> List[ServerSettings]:
    if not isinstance(entry, dict):
        raise SonarConfigError(f"Server entry must be an object, got {type(entry).__name__}")
    if "password" in entry:
        raise SonarConfigError("Passwords must not be stored in settings files; use SONAR_PASSWORD")

    host = entry.get("host") or default_host
    if not host:
        raise SonarConfigError("Server entry has no 'host'")

    resources = entry.get("resources")
    if resources is None:
        resources = [entry.get("resource") or ""]
    if not isinstance(resources, list):
        raise SonarConfigError("'resources' must be a list")

    return [
        ServerSettings(
            host=str(host),
            user=entry.get("user") or None,
            anonymous=_parse_flag(entry.get("anonymous")),
            resource=str(r or ""),
        )
        for r in resources
    ]


def load_settings_file(path: Path, *, default_host: Optional[str] = None) -> List[ServerSettings]:
    """Read one ServerSettings per configured resource.

    Accepted shapes::

        {"host": "...", "user": "...", "resources": ["proj:A", "proj:B"]}
        {"servers": [{"host": "...", "resource": "proj:A"}, ...]}
    """
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SonarConfigError(f"Cannot read settings file {path}: {e}") from e

    out: List[ServerSettings] = []
    for entry in _server_entries(data):
        out.extend(_settings_for_entry(entry, default_host))
    return out
