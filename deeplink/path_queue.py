"""Serialized FIFO queue of dropped paths and deep-linked app targets."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable

from deeplink.incoming import IncomingURL
from deeplink.logger import DeepLinkLogger
from utils.settings_store import deep_log

Handler = Callable[[IncomingURL], None]


class PathQueue:
    """Single-consumer queue processed one entry at a time.

    ``drain`` is guarded by a non-blocking lock: a nested or concurrent call
    returns immediately and the active drain picks up whatever was added.
    """

    def __init__(
        self,
        *,
        scheme: str,
        on_dropped_app: Handler,
        on_deep_link: Handler,
        logger: DeepLinkLogger | None = None,
    ) -> None:
        self.scheme = scheme
        self._on_dropped_app = on_dropped_app
        self._on_deep_link = on_deep_link
        self._logger = logger or DeepLinkLogger()
        self._pending: deque[IncomingURL] = deque()
        self._processing = threading.Lock()

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def is_processing(self) -> bool:
        return self._processing.locked()

    def pending(self) -> list[IncomingURL]:
        return list(self._pending)

    def enqueue(self, url: IncomingURL) -> None:
        self._pending.append(url)

    def drain(self) -> None:
        while self._pending:
            if not self._processing.acquire(blocking=False):
                return
            try:
                self._process(self._pending[0])
            finally:
                self._pending.popleft()
                self._processing.release()

    def _process(self, url: IncomingURL) -> None:
        try:
            if url.path_extension == "app":
                self._on_dropped_app(url)
            elif url.scheme == self.scheme:
                self._on_deep_link(url)
            else:
                deep_log(f"[DEEP][DEEPLINK] ignoring queued target {url.raw!r}")
        except Exception as exc:
            self._logger.error(f"Handling {url.raw!r} failed: {exc}")
