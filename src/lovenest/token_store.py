"""
Session token persistence.

Exactly one bearer token per installation, or none. The store is the single
source of truth for whether a session is active; the HTTP client reads it on
every call and never keeps its own copy.
"""

import json
from pathlib import Path
from typing import Optional, Protocol

from lovenest.config import token_file

TOKEN_KEY = "lovenest_token"


class TokenStore(Protocol):
    def get(self) -> Optional[str]: ...

    def set(self, token: str) -> None: ...

    def clear(self) -> None: ...


class MemoryTokenStore:
    """Keeps the token in process memory only."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileTokenStore:
    """Keeps the token in a small JSON file so it survives restarts.

    Reads never raise: a missing, unreadable or corrupt file means no token.
    Writes go through a temp file and an atomic replace.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else token_file()

    def get(self) -> Optional[str]:
        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        token = data.get(TOKEN_KEY)
        return token if isinstance(token, str) and token else None

    def set(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps({TOKEN_KEY: token}))
        tmp.replace(self.path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
