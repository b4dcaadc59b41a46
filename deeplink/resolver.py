"""Resolve reserved-scheme URLs carrying ``path``/``name`` into app paths."""

from __future__ import annotations

import os

from deeplink.actions import MATCH_CONTAINS, MATCH_EXACT, PARAM_MATCH_TYPE, PARAM_NAME, PARAM_PATH
from deeplink.app_loader import AppLoader
from deeplink.incoming import IncomingURL
from deeplink.logger import DeepLinkLogger
from deeplink.services import BaseAppServices
from deeplink.state import AppInfo, AppState


def match_app(apps: list[AppInfo], name: str, match_type: str = MATCH_EXACT) -> AppInfo | None:
    """First app whose lowercased name matches ``name`` under ``match_type``.

    Unknown match types match nothing.
    """
    needle = name.lower()
    match_type = match_type.lower()
    for app in apps:
        app_name = app.app_name.lower()
        if match_type == MATCH_CONTAINS and needle in app_name:
            return app
        if match_type == MATCH_EXACT and app_name == needle:
            return app
    return None


class DeepLinkedAppResolver:
    def __init__(
        self,
        services: BaseAppServices,
        app_state: AppState,
        loader: AppLoader,
        logger: DeepLinkLogger | None = None,
    ) -> None:
        self.services = services
        self.app_state = app_state
        self.loader = loader
        self.logger = logger or DeepLinkLogger()

    def handle(self, url: IncomingURL) -> None:
        path = url.query_value(PARAM_PATH)
        if path is not None:
            self.loader.register(os.path.abspath(os.path.expanduser(path)))
            return

        name = url.query_value(PARAM_NAME)
        if name is not None:
            match_type = url.query_value(PARAM_MATCH_TYPE)
            if match_type is None:
                match_type = MATCH_EXACT
            # Matching must see a fresh app list, so it only runs in the continuation.
            self.services.reload_apps(
                self.app_state,
                on_complete=lambda: self._register_by_name(name, match_type),
            )
            return

        self.logger.info("No valid query items for 'path' or 'name' found in the URL.")

    def _register_by_name(self, name: str, match_type: str) -> None:
        matched = match_app(self.app_state.sorted_apps, name, match_type)
        if matched is None:
            self.logger.info(
                f"No app found matching the name '{name.lower()}' with matchType: {match_type.lower()}"
            )
            return
        self.loader.register(matched.path)
