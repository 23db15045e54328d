"""
Client configuration: API base URL and the local config directory.

The base URL is resolved once, when a client is constructed:
explicit argument > LOVENEST_API_URL > saved CLI config > DEFAULT_BASE_URL.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

DEFAULT_BASE_URL = "http://localhost:5000/api"
BASE_URL_ENV = "LOVENEST_API_URL"
HOME_ENV = "LOVENEST_HOME"


def config_dir() -> Path:
    override = os.environ.get(HOME_ENV)
    if override:
        return Path(override)
    return Path.home() / ".lovenest"


def config_file() -> Path:
    return config_dir() / "config.json"


def token_file() -> Path:
    return config_dir() / "token.json"


def load_config() -> dict[str, Any]:
    try:
        return json.loads(config_file().read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def save_config(cfg: dict[str, Any]) -> None:
    path = config_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cfg, indent=2))


def resolve_base_url(base_url: Optional[str] = None) -> str:
    url = base_url or os.environ.get(BASE_URL_ENV) or load_config().get("base_url") or DEFAULT_BASE_URL
    return url.rstrip("/")
