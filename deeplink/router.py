"""Classify incoming URLs and hand them to the path queue or the dispatcher."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Any

from deeplink.actions import PATH_ROUTED_ACTIONS, is_known_action
from deeplink.app_loader import AppLoader
from deeplink.dispatcher import ActionDispatcher
from deeplink.incoming import IncomingURL
from deeplink.logger import DeepLinkLogger
from deeplink.path_queue import PathQueue
from deeplink.resolver import DeepLinkedAppResolver
from deeplink.services import BaseAppServices, RouteResult
from deeplink.state import AppState
from utils.settings_store import SettingsStore, deep_log

RESERVED_SCHEME = "pear"

URLInput = str | os.PathLike | IncomingURL


class LinkRouter:
    """Entry point for deep links and dropped files.

    URLs in the reserved scheme whose host is a known action are dispatched;
    everything else (foreign schemes, raw paths, unknown hosts and
    ``uninstallApp``) goes through the path queue.
    """

    def __init__(
        self,
        services: BaseAppServices,
        *,
        scheme: str = RESERVED_SCHEME,
        settings: SettingsStore | None = None,
        dispatcher: ActionDispatcher | None = None,
        logger: DeepLinkLogger | None = None,
    ) -> None:
        self.services = services
        self.scheme = scheme.lower()
        self.logger = logger or DeepLinkLogger()
        self.dispatcher = dispatcher or ActionDispatcher(services, settings=settings, logger=self.logger)
        self.queue = PathQueue(
            scheme=self.scheme,
            on_dropped_app=self._handle_dropped_app,
            on_deep_link=self._handle_deep_linked_app,
            logger=self.logger,
        )
        self._app_state: AppState | None = None
        self._locations: Any = None

    def route(self, url: URLInput, app_state: AppState, locations: Any = None) -> RouteResult:
        app_state.external_mode = True
        self._app_state = app_state
        self._locations = locations

        incoming = IncomingURL.parse(url)
        deep_log(f"[DEEP][DEEPLINK] route scheme={incoming.scheme} host={incoming.host} raw={incoming.raw!r}")

        if incoming.scheme != self.scheme:
            return self.handle_as_path_or_dropped(incoming)

        host = incoming.host
        if is_known_action(host) and host not in PATH_ROUTED_ACTIONS:
            self.logger.info(f"Dispatching action {host}")
            background = self.dispatcher.dispatch(host, incoming.query_items, app_state)
            return RouteResult(kind="action", target=incoming.raw, action=host, background=background)

        # Unknown hosts fall back to path handling, same as uninstallApp.
        return self.handle_as_path_or_dropped(incoming)

    def route_many(
        self, urls: Iterable[URLInput], app_state: AppState, locations: Any = None
    ) -> list[RouteResult]:
        return [self.route(url, app_state, locations) for url in urls]

    def handle_as_path_or_dropped(self, url: IncomingURL) -> RouteResult:
        self.queue.enqueue(url)
        self.queue.drain()
        if self._app_state is not None and not self._app_state.has_app_info:
            try:
                self._loader().load_next()
            except Exception as exc:
                self.logger.error(f"Loading next app failed: {exc}")
        action = url.host if url.scheme == self.scheme and is_known_action(url.host) else None
        return RouteResult(kind="path", target=url.raw, action=action)

    def _loader(self) -> AppLoader:
        if self._app_state is None:
            raise RuntimeError("route() has not been called")
        return AppLoader(self.services, self._app_state, self._locations, logger=self.logger)

    def _handle_dropped_app(self, url: IncomingURL) -> None:
        path = url.file_path
        if url.is_local:
            path = os.path.abspath(os.path.expanduser(path))
        self._loader().register(path)

    def _handle_deep_linked_app(self, url: IncomingURL) -> None:
        loader = self._loader()
        DeepLinkedAppResolver(self.services, loader.app_state, loader, logger=self.logger).handle(url)
