"""Entry point: route deep links and dropped files passed to the app."""

import importlib.util
import os
import sys
from pathlib import Path

try:  # Optional dependency; enable .env loading when available.
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover - optional dep
    load_dotenv = None


def _ensure_qt_plugin_path() -> None:
    """Set Qt plugin paths before importing PySide6-based modules."""
    if os.getenv("QT_QPA_PLATFORM_PLUGIN_PATH"):
        return
    spec = importlib.util.find_spec("PySide6")
    if not spec or not spec.submodule_search_locations:
        return
    pyside_root = Path(spec.submodule_search_locations[0])
    plugin_root = pyside_root / "Qt" / "plugins"
    platforms_path = plugin_root / "platforms"
    if platforms_path.exists():
        os.environ.setdefault("QT_QPA_PLATFORM_PLUGIN_PATH", str(platforms_path))
        os.environ.setdefault("QT_PLUGIN_PATH", str(plugin_root))


_ensure_qt_plugin_path()

from deeplink.router import RESERVED_SCHEME, LinkRouter
from deeplink.state import AppState
from ui.main_window import MainWindow
from utils.log_utils import tprint
from utils.settings_store import get_settings, get_store


def _is_enabled(name: str, default: bool = True) -> bool:
    """Read a boolean-like environment variable (1/0/true/false)."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _load_env_files() -> None:
    """Load .env files from common locations (repo, bundle, home)."""
    if not load_dotenv:
        return

    candidates: list[Path] = []
    cwd = Path.cwd()
    candidates.extend([cwd / "env/.env", cwd / ".env"])

    module_root = Path(__file__).resolve().parent
    candidates.extend([module_root / "env/.env", module_root / ".env"])

    home = Path.home()
    candidates.append(home / ".pear.env")

    if getattr(sys, "frozen", False):
        meipass = Path(getattr(sys, "_MEIPASS", ""))
        if meipass:
            candidates.extend([meipass / "env/.env", meipass / ".env"])
        exec_path = Path(sys.executable).resolve()
        resources = exec_path.parent.parent / "Resources"
        candidates.extend([resources / "env/.env", resources / ".env"])

    for path in candidates:
        if path.exists():
            load_dotenv(dotenv_path=str(path), override=False)


def resolve_scheme() -> str:
    """Reserved URL scheme: env, then settings, then the built-in default."""
    return (
        os.getenv("PEAR_URL_SCHEME")
        or str(get_settings().get("url_scheme") or "")
        or RESERVED_SCHEME
    ).strip().lower()


def initial_targets_from_argv(argv: list[str] | None = None) -> list[str]:
    """URLs/paths passed on the command line, up to the first ``-`` option."""
    targets: list[str] = []
    for arg in (argv if argv is not None else sys.argv)[1:]:
        if arg.startswith("-"):
            break
        if arg.strip():
            targets.append(arg)
    return targets


def build_router(window: MainWindow) -> LinkRouter:
    return LinkRouter(window, scheme=resolve_scheme(), settings=get_store())


def _run_qt_loop(router: LinkRouter, app_state: AppState) -> int:
    from PySide6.QtWidgets import QApplication

    from ui.file_open_bridge import install_file_open_bridge

    app = QApplication.instance() or QApplication(sys.argv)
    install_file_open_bridge(app, router, app_state)
    return app.exec()


def bootstrap(argv: list[str] | None = None) -> int:
    """Wire up the router, route cold-start targets and launch the window."""
    _load_env_files()

    window = MainWindow()
    app_state = AppState()
    router = build_router(window)
    tprint(f"[MAIN] Deep-link router ready (scheme={router.scheme}://)")

    targets = initial_targets_from_argv(argv)
    if targets:
        router.route_many(targets, app_state)

    window.launch()
    try:
        if _is_enabled("PEAR_QT_EVENT_LOOP", False):
            return _run_qt_loop(router, app_state)
    except KeyboardInterrupt:
        tprint("[MAIN] Received interrupt. Shutting down...")
    finally:
        window.close()
    return 0


if __name__ == "__main__":
    sys.exit(bootstrap())
