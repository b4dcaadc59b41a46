"""Deep-link and dropped-file routing."""

from deeplink.dispatcher import ActionDispatcher
from deeplink.incoming import IncomingURL, QueryItem
from deeplink.path_queue import PathQueue
from deeplink.router import RESERVED_SCHEME, LinkRouter
from deeplink.services import BaseAppServices, RouteResult
from deeplink.state import AppInfo, AppState, Page, SettingsTab

__all__ = [
    "ActionDispatcher",
    "AppInfo",
    "AppState",
    "BaseAppServices",
    "IncomingURL",
    "LinkRouter",
    "Page",
    "PathQueue",
    "QueryItem",
    "RESERVED_SCHEME",
    "RouteResult",
    "SettingsTab",
]
