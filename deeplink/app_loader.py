"""Registers external app paths and loads the next one for display."""

from __future__ import annotations

from typing import Any

from deeplink.logger import DeepLinkLogger
from deeplink.services import BaseAppServices
from deeplink.state import AppState


class AppLoader:
    def __init__(
        self,
        services: BaseAppServices,
        app_state: AppState,
        locations: Any = None,
        logger: DeepLinkLogger | None = None,
    ) -> None:
        self.services = services
        self.app_state = app_state
        self.locations = locations
        self.logger = logger or DeepLinkLogger()

    def register(self, path: str) -> bool:
        """Add ``path`` to the external paths and load it if nothing is shown."""
        added = self.app_state.add_external_path(path)
        if not self.app_state.has_app_info:
            self.load_next()
        return added

    def load_next(self) -> None:
        path = self.app_state.next_external_path()
        if path is None:
            return
        app_info = self.services.get_app_info(path)
        if app_info is None:
            self.logger.warn(f"No app info available at {path}")
            return
        self.services.show_app_in_files(app_info, self.app_state, self.locations)
