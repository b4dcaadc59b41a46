"""Forward Qt FileOpen events (macOS open-URL / open-file) to the router."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QEvent, QObject

from deeplink.router import LinkRouter
from deeplink.state import AppState
from utils.log_utils import tprint


def target_from_file_open_event(event: Any) -> str | None:
    """Custom-scheme URLs keep their URL form; local files become paths."""
    url = event.url()
    if url is not None and url.isValid() and not url.isLocalFile():
        return url.toString()
    path = event.file()
    return path or None


class FileOpenBridge(QObject):
    def __init__(self, router: LinkRouter, app_state: AppState, locations: Any = None, parent: Any = None) -> None:
        super().__init__(parent)
        self.router = router
        self.app_state = app_state
        self.locations = locations

    def eventFilter(self, watched: Any, event: Any) -> bool:  # type: ignore[override]
        if event.type() != QEvent.Type.FileOpen:
            return False
        target = target_from_file_open_event(event)
        if not target:
            return False
        tprint(f"[UI] FileOpen event: {target}")
        self.router.route(target, self.app_state, self.locations)
        return True


def install_file_open_bridge(app: Any, router: LinkRouter, app_state: AppState, locations: Any = None) -> FileOpenBridge:
    bridge = FileOpenBridge(router, app_state, locations, parent=app)
    app.installEventFilter(bridge)
    return bridge
