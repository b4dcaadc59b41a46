"""Executes named deep-link actions against the shared app state."""

from __future__ import annotations

import threading
from collections.abc import Sequence

from deeplink import actions
from deeplink.dev_environments import find_environment
from deeplink.incoming import QueryItem, first_query_value
from deeplink.logger import DeepLinkLogger
from deeplink.services import BaseAppServices
from deeplink.state import AppState, Page, SettingsTab
from utils.settings_store import SettingsStore, deep_log, get_store
from utils.threading_utils import run_async

SELECTED_TAB_KEY = "settings.general.selectedTab"
PERMISSIONS_MODAL = ("permissions", 300, 250)


def find_settings_tab(search: str) -> SettingsTab | None:
    needle = search.lower()
    for tab in SettingsTab:
        if needle in tab.title.lower():
            return tab
    return None


class ActionDispatcher:
    def __init__(
        self,
        services: BaseAppServices,
        *,
        settings: SettingsStore | None = None,
        logger: DeepLinkLogger | None = None,
    ) -> None:
        self.services = services
        self.settings = settings or get_store()
        self.logger = logger or DeepLinkLogger()

    def dispatch(
        self, action: str, query_items: Sequence[QueryItem], app_state: AppState
    ) -> threading.Thread | None:
        """Run ``action``. Returns the background thread it started, if any.

        Unknown actions are no-ops; collaborator failures are logged.
        """
        deep_log(f"[DEEP][DEEPLINK] dispatch action={action} items={query_items}")
        handler = self._handlers().get(action)
        if handler is None:
            return None
        try:
            return handler(query_items, app_state)
        except Exception as exc:
            self.logger.error(f"Action {action} failed: {exc}")
            return None

    def _handlers(self) -> dict:
        return {
            actions.OPEN_PEARCLEANER: self._open_app,
            actions.OPEN_SETTINGS: self._open_settings,
            actions.OPEN_PERMISSIONS: self._open_permissions,
            actions.CHECK_ORPHANED_FILES: self._check_orphaned_files,
            actions.CHECK_DEV_ENV: self._check_dev_env,
            actions.CHECK_UPDATES: self._check_updates,
            actions.REFRESH_APPS_LIST: self._refresh_apps_list,
            actions.RESET_SETTINGS: self._reset_settings,
        }

    def _open_app(self, query_items: Sequence[QueryItem], app_state: AppState) -> None:
        return None

    def _open_settings(self, query_items: Sequence[QueryItem], app_state: AppState) -> None:
        self.services.open_settings()
        search = first_query_value(query_items, actions.PARAM_NAME)
        if search is None:
            return
        tab = find_settings_tab(search)
        if tab is None:
            return
        app_state.selected_tab = tab
        self.settings.set(SELECTED_TAB_KEY, tab.value)

    def _open_permissions(self, query_items: Sequence[QueryItem], app_state: AppState) -> None:
        kind, width, height = PERMISSIONS_MODAL
        self.services.open_modal(kind, width=width, height=height)

    def _check_orphaned_files(self, query_items: Sequence[QueryItem], app_state: AppState) -> None:
        app_state.current_page = Page.ORPHANS

    def _check_dev_env(self, query_items: Sequence[QueryItem], app_state: AppState) -> None:
        search = first_query_value(query_items, actions.PARAM_NAME)
        if search is not None:
            env = find_environment(search)
            if env is not None:
                app_state.selected_environment = env
        app_state.current_page = Page.DEVELOPMENT

    def _check_updates(self, query_items: Sequence[QueryItem], app_state: AppState) -> None:
        self.services.check_for_updates(sheet=True)

    def _refresh_apps_list(self, query_items: Sequence[QueryItem], app_state: AppState) -> None:
        self.services.reload_apps(app_state)

    def _reset_settings(self, query_items: Sequence[QueryItem], app_state: AppState) -> threading.Thread:
        return run_async(self._clear_settings, name="reset-settings")

    def _clear_settings(self) -> None:
        try:
            self.settings.clear_all()
        except OSError as exc:
            self.logger.error(f"Resetting settings failed: {exc}")
