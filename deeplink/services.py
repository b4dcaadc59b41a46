"""Collaborator interface and result payloads for routing."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from deeplink.state import AppInfo, AppState


@dataclass
class RouteResult:
    """Which branch the router took for an incoming URL."""

    kind: str  # "action" | "path"
    target: str
    action: str | None = None
    # Background work started by the action, if any (resetSettings).
    background: threading.Thread | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"kind": self.kind, "target": self.target}
        if self.action is not None:
            payload["action"] = self.action
        if self.background is not None:
            payload["background"] = True
        return payload


class BaseAppServices:
    """Application surfaces the router delegates to.

    Implementations own rendering, app enumeration and update checks; the
    router only decides when to call them.
    """

    def open_settings(self) -> None:
        raise NotImplementedError

    def open_modal(self, kind: str, width: int, height: int) -> None:
        raise NotImplementedError

    def check_for_updates(self, sheet: bool = False) -> None:
        raise NotImplementedError

    def reload_apps(self, app_state: AppState, on_complete: Callable[[], None] | None = None) -> None:
        """Refresh ``app_state.sorted_apps``; call ``on_complete`` once done.

        The continuation may run on another thread.
        """
        raise NotImplementedError

    def get_app_info(self, path: str) -> AppInfo | None:
        raise NotImplementedError

    def show_app_in_files(self, app_info: AppInfo, app_state: AppState, locations: Any = None) -> None:
        raise NotImplementedError
