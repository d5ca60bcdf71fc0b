"""JSON-backed settings store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pile.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "pile"
_SETTINGS_FILE = "settings.json"

DEFAULTS: dict[str, Any] = {
    "session": {"page_size": 5},
    "filters": {
        "min_created_days": 0,
        "min_modified_days": 0,
        "min_accessed_days": 0,
    },
}


class Settings:
    """Read-only settings backed by a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("session.page_size")  # reads data["session"]["page_size"]

    Keys missing from the file fall back to ``DEFAULTS``.
    """

    _instance: Settings | None = None

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @classmethod
    def instance(cls) -> Settings:
        """Return the singleton settings instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        found, value = _lookup(self._data, key)
        if found:
            return value
        found, value = _lookup(DEFAULTS, key)
        return value if found else default

    def get_int(self, key: str, minimum: int = 0) -> int:
        """Get an integer setting, falling back to the default when invalid."""
        value = self.get(key)
        if isinstance(value, int) and not isinstance(value, bool) and value >= minimum:
            return value
        fallback = _lookup(DEFAULTS, key)[1]
        log.warning("Invalid value for %s in %s: %r, using %r", key, self._path, value, fallback)
        return fallback

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring settings in %s: expected a JSON object", self._path)
            return
        self._data = data


def _lookup(data: dict[str, Any], key: str) -> tuple[bool, Any]:
    node: Any = data
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return False, None
        node = node[part]
    return True, node
