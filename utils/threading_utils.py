"""Helpers for running work off the calling thread."""

import threading
from collections.abc import Callable


def run_async(target: Callable, *, daemon: bool = True, name: str | None = None) -> threading.Thread:
    """Start ``target`` on a new thread and return it without joining."""
    thread = threading.Thread(target=target, daemon=daemon, name=name)
    thread.start()
    return thread
