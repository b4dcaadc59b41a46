"""Parsing of incoming deep links and dropped paths."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import PurePosixPath
from urllib.parse import unquote, urlsplit


@dataclass(frozen=True)
class QueryItem:
    name: str
    value: str | None = None


@dataclass(frozen=True)
class IncomingURL:
    """An external invocation: a custom-scheme URL, a file URL or a raw path."""

    raw: str
    scheme: str | None = None
    host: str | None = None
    path: str = ""
    query_items: tuple[QueryItem, ...] = ()

    @classmethod
    def parse(cls, value: str | os.PathLike[str] | IncomingURL) -> IncomingURL:
        """Parse ``value`` without raising.

        Inputs that cannot be split as a URL come back as a raw path with no
        scheme and no query items.
        """
        if isinstance(value, IncomingURL):
            return value
        try:
            text = os.fspath(value)
        except TypeError:
            text = str(value)
        text = text.strip()
        try:
            parts = urlsplit(text)
        except ValueError:
            return cls(raw=text, path=text)

        scheme = parts.scheme or None
        # "C:\..." splits as scheme "c"; a drive letter is a path, not a scheme.
        if scheme is None or len(scheme) == 1:
            return cls(raw=text, path=text)

        host = _strip_port(parts.netloc.rpartition("@")[2]) or None
        return cls(
            raw=text,
            scheme=scheme,
            host=host,
            path=parts.path,
            query_items=parse_query_items(parts.query),
        )

    def query_value(self, name: str) -> str | None:
        """Value of the first query item called ``name``."""
        return first_query_value(self.query_items, name)

    @property
    def is_local(self) -> bool:
        """True for raw paths and ``file://`` URLs."""
        return self.scheme is None or self.scheme == "file"

    @property
    def file_path(self) -> str:
        """Filesystem path for local inputs; the URL text itself otherwise."""
        if self.scheme == "file":
            return unquote(self.path)
        return self.raw

    @property
    def path_extension(self) -> str:
        path = self.raw if self.scheme is None else unquote(self.path)
        tail = path.rstrip("/").rsplit("/", 1)[-1]
        return PurePosixPath(tail).suffix.lstrip(".") if tail else ""

    def __str__(self) -> str:
        return self.raw


def _strip_port(host: str) -> str:
    if host.startswith("["):
        end = host.find("]")
        return host[: end + 1] if end != -1 else host
    return host.partition(":")[0]


def parse_query_items(query: str) -> tuple[QueryItem, ...]:
    items: list[QueryItem] = []
    for segment in query.split("&"):
        if not segment:
            continue
        name, sep, value = segment.partition("=")
        items.append(QueryItem(name=unquote(name), value=unquote(value) if sep else None))
    return tuple(items)


def first_query_value(items: Sequence[QueryItem], name: str) -> str | None:
    for item in items:
        if item.name == name:
            return item.value
    return None
