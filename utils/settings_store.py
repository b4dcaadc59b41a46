"""JSON-backed settings store with an in-memory cache."""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Any

from utils.file_utils import load_json, save_json
from utils.log_utils import tprint

DEFAULT_SETTINGS_PATH = "config/app_settings.json"


class SettingsStore:
    """Cached key/value settings persisted to a single JSON file."""

    def __init__(self, path: str | Path = DEFAULT_SETTINGS_PATH) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._cache: dict[str, Any] = {}
        self._loaded = False

    def refresh(self) -> dict[str, Any]:
        """Reload settings from disk and replace the cache."""
        data = load_json(self.path)
        if not isinstance(data, dict):
            data = {}
        with self._lock:
            self._cache.clear()
            self._cache.update(data)
            self._loaded = True
            return dict(self._cache)

    def get_all(self) -> dict[str, Any]:
        """Return a copy of the cached settings."""
        if not self._loaded:
            return self.refresh()
        with self._lock:
            return dict(self._cache)

    def get(self, key: str, default: Any = None) -> Any:
        return self.get_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.get_all()
        with self._lock:
            self._cache[key] = value
            save_json(self.path, dict(self._cache))

    def clear_all(self) -> None:
        """Remove every persisted key."""
        with self._lock:
            removed = len(self._cache)
            self._cache.clear()
            self._loaded = True
            save_json(self.path, {})
        tprint(f"[SETTINGS] Cleared {removed} cached key(s) in {self.path}")


_default_store: SettingsStore | None = None


def get_store() -> SettingsStore:
    """Return the process-wide store (path from PEAR_SETTINGS_PATH)."""
    global _default_store
    if _default_store is None:
        _default_store = SettingsStore(os.getenv("PEAR_SETTINGS_PATH", DEFAULT_SETTINGS_PATH))
    return _default_store


def refresh_settings() -> dict[str, Any]:
    """Reload settings from disk and replace the cache."""
    return get_store().refresh()


def get_settings() -> dict[str, Any]:
    """Return a copy of the cached settings."""
    return get_store().get_all()


def is_deep_logging() -> bool:
    """Return True when log_level requests deep tracing."""
    level = str(get_settings().get("log_level", "")).upper()
    return level in {"DEEP"}


def deep_log(message: str) -> None:
    if is_deep_logging():
        tprint(message)
