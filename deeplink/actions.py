"""Deep-link action vocabulary (URL host values)."""

from __future__ import annotations

OPEN_PEARCLEANER = "openPearcleaner"
OPEN_SETTINGS = "openSettings"
OPEN_PERMISSIONS = "openPermissions"
UNINSTALL_APP = "uninstallApp"
CHECK_ORPHANED_FILES = "checkOrphanedFiles"
CHECK_DEV_ENV = "checkDevEnv"
CHECK_UPDATES = "checkUpdates"
REFRESH_APPS_LIST = "refreshAppsList"
RESET_SETTINGS = "resetSettings"

ALL_ACTIONS = (
    OPEN_PEARCLEANER,
    OPEN_SETTINGS,
    OPEN_PERMISSIONS,
    UNINSTALL_APP,
    CHECK_ORPHANED_FILES,
    CHECK_DEV_ENV,
    CHECK_UPDATES,
    REFRESH_APPS_LIST,
    RESET_SETTINGS,
)

# Known actions that are routed through the path pipeline instead of the dispatcher.
PATH_ROUTED_ACTIONS = frozenset({UNINSTALL_APP})

# Query parameter names.
PARAM_PATH = "path"
PARAM_NAME = "name"
PARAM_MATCH_TYPE = "matchType"

MATCH_EXACT = "exact"
MATCH_CONTAINS = "contains"


def is_known_action(name: str | None) -> bool:
    return name is not None and name in ALL_ACTIONS
