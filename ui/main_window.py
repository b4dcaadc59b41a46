"""Main UI window placeholder.

Attach your real frontend here. The window implements the surfaces the
deep-link router calls into:
  - open_settings() / open_modal(kind, width, height)
  - check_for_updates(sheet)
  - reload_apps(app_state, on_complete)
  - get_app_info(path) / show_app_in_files(app_info, app_state, locations)
The app list comes from ``app_source``; this window does no discovery of its own.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from deeplink.services import BaseAppServices
from deeplink.state import AppInfo, AppState, Page
from utils.log_utils import tprint
from utils.threading_utils import run_async


class MainWindow(BaseAppServices):
    def __init__(
        self,
        app_source: Callable[[], list[AppInfo]] | None = None,
        *,
        background_reload: bool = True,
    ) -> None:
        self.is_open = False
        self.app_source = app_source or (lambda: [])
        self.background_reload = background_reload
        self.open_surfaces: list[str] = []

    def launch(self) -> None:
        self.is_open = True
        tprint("[UI] Main window launched (attach your frontend here)")

    def close(self) -> None:
        self.is_open = False
        tprint("[UI] Main window closed")

    def open_settings(self) -> None:
        self.open_surfaces.append("settings")
        tprint("[UI] Settings window opened")

    def open_modal(self, kind: str, width: int, height: int) -> None:
        self.open_surfaces.append(kind)
        tprint(f"[UI] Modal '{kind}' opened ({width}x{height})")

    def check_for_updates(self, sheet: bool = False) -> None:
        tprint(f"[UI] Checking for updates (sheet={sheet})")

    def reload_apps(self, app_state: AppState, on_complete: Callable[[], None] | None = None) -> None:
        def _reload() -> None:
            try:
                app_state.replace_apps(list(self.app_source()))
                tprint(f"[UI] App list reloaded ({len(app_state.sorted_apps)} apps)")
                if on_complete:
                    on_complete()
            except Exception as exc:
                tprint(f"[ERROR][UI] App list reload failed: {exc}")

        if self.background_reload:
            run_async(_reload, name="reload-apps")
        else:
            _reload()

    def get_app_info(self, path: str) -> AppInfo | None:
        if not path:
            return None
        bundle = Path(path)
        return AppInfo(app_name=bundle.stem or bundle.name, path=str(bundle))

    def show_app_in_files(self, app_info: AppInfo, app_state: AppState, locations: Any = None) -> None:
        app_state.app_info = app_info
        app_state.current_page = Page.APPLICATIONS
        tprint(f"[UI] Showing files for {app_info.app_name} ({app_info.path})")
