"""Launch the deep-link API for the Tauri shell as a local-only server."""

from __future__ import annotations

import argparse
import os

import uvicorn

from utils.settings_store import get_settings


def _uvicorn_log_level(settings: dict) -> str:
    level = str(settings.get("log_level", "INFO")).upper()
    # uvicorn has no DEEP level.
    return "debug" if level == "DEEP" else level.lower()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--host", default=os.getenv("PEAR_API_HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.getenv("PEAR_API_PORT", "8000")))
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    uvicorn.run(
        "api.server:app",
        host=args.host,
        port=args.port,
        log_level=_uvicorn_log_level(settings),
        access_log=bool(settings.get("http_access_log", False)),
    )


if __name__ == "__main__":
    main()
