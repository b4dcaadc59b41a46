"""Shared application state mutated by the router."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum

from deeplink.dev_environments import DevEnvironment


class Page(str, Enum):
    APPLICATIONS = "applications"
    ORPHANS = "orphans"
    DEVELOPMENT = "development"


class SettingsTab(str, Enum):
    GENERAL = "general"
    INTERFACE = "interface"
    FOLDERS = "folders"
    UPDATE = "update"
    HELPER = "helper"
    ABOUT = "about"

    @property
    def title(self) -> str:
        return self.value.capitalize()


@dataclass
class AppInfo:
    app_name: str
    path: str
    bundle_id: str | None = None
    version: str | None = None

    def to_dict(self) -> dict:
        return {
            "app_name": self.app_name,
            "path": self.path,
            "bundle_id": self.bundle_id,
            "version": self.version,
        }


@dataclass
class AppState:
    """Mutable context passed explicitly to the router and its handlers."""

    external_mode: bool = False
    current_page: Page = Page.APPLICATIONS
    selected_tab: SettingsTab = SettingsTab.GENERAL
    selected_environment: DevEnvironment | None = None
    external_paths: list[str] = field(default_factory=list)
    app_info: AppInfo | None = None
    sorted_apps: list[AppInfo] = field(default_factory=list)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    @property
    def has_app_info(self) -> bool:
        return self.app_info is not None

    def add_external_path(self, path: str) -> bool:
        """Append ``path`` unless already registered. Returns True when added."""
        with self._lock:
            if path in self.external_paths:
                return False
            self.external_paths.append(path)
            return True

    def next_external_path(self) -> str | None:
        with self._lock:
            return self.external_paths[0] if self.external_paths else None

    def replace_apps(self, apps: list[AppInfo]) -> None:
        with self._lock:
            self.sorted_apps = sorted(apps, key=lambda app: app.app_name.lower())

    def to_dict(self) -> dict:
        with self._lock:
            return {
                "external_mode": self.external_mode,
                "current_page": self.current_page.value,
                "selected_tab": self.selected_tab.value,
                "selected_environment": (
                    self.selected_environment.name if self.selected_environment else None
                ),
                "external_paths": list(self.external_paths),
                "app_info": self.app_info.to_dict() if self.app_info else None,
                "app_count": len(self.sorted_apps),
            }
