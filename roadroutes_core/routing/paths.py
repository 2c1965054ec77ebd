"""Path keys - Normalization and ancestor enumeration.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import posixpath
from typing import Any, List
from urllib.parse import quote, unquote, urlsplit

from roadroutes_core.errors import ConfigurationError

PATH_SEP = posixpath.sep
ROOT = PATH_SEP

# Characters left unescaped inside a path segment (RFC 3986 pchar minus "%").
_SEGMENT_SAFE = "!$&'()*+,;=:@~"

_DEFAULT_PORTS = {"http": 80, "https": 443}


def _strip_authority(scheme: str, netloc: str) -> str:
    """Lowercase host, drop credentials and default ports."""
    host = netloc.rpartition("@")[2].lower()
    name, sep, port = host.rpartition(":")
    if sep and port.isdigit() and _DEFAULT_PORTS.get(scheme) == int(port):
        host = name
    return host


def _split_raw(raw: str) -> str:
    """Reduce a raw path or URL to a bare path string."""
    if "://" in raw:
        parts = urlsplit(raw)
        if parts.scheme and parts.netloc:
            host = _strip_authority(parts.scheme.lower(), parts.netloc)
            return f"{PATH_SEP}{host}{PATH_SEP}{parts.path}"
        return parts.path
    return raw.split("#", 1)[0].split("?", 1)[0]


def normalize_path(path: Any) -> str:
    """Return the canonical key for a route path.

    The canonical form always starts with the separator, has no
    empty, ``.`` or ``..`` segments, no trailing separator (except the
    root key) and percent-escapes each segment consistently. Absolute
    URLs are keyed by host: ``http://Example.com:80/a/`` becomes
    ``/example.com/a``.

    Args:
        path: Raw request or registration path. ``None`` and ``""``
            map to the root key.

    Returns:
        Canonical path key.

    Raises:
        ConfigurationError: If ``path`` is not a string.
    """
    if not path or path == ROOT:
        if path is None or isinstance(path, str):
            return ROOT
    if not isinstance(path, str):
        raise ConfigurationError(
            f"Route path must be a string, got {type(path).__name__}"
        )

    segments: List[str] = []
    for segment in _split_raw(path).split(PATH_SEP):
        # dot segments are recognized after decoding so %2E%2E cannot survive
        decoded = unquote(segment)
        if not decoded or decoded == ".":
            continue
        if decoded == "..":
            if segments:
                segments.pop()
            continue
        segments.append(quote(decoded, safe=_SEGMENT_SAFE))

    return ROOT + PATH_SEP.join(segments)


def ancestors(key: str) -> List[str]:
    """List a key and all of its parents, most specific first.

    ``ancestors("/foo/bar/xyz")`` returns
    ``["/foo/bar/xyz", "/foo/bar", "/foo", "/"]``.
    """
    if key == ROOT:
        return [ROOT]

    parts = key.strip(PATH_SEP).split(PATH_SEP)
    keys = [
        ROOT + PATH_SEP.join(parts[:length])
        for length in range(len(parts), 0, -1)
    ]
    keys.append(ROOT)
    return keys


__all__ = [
    "PATH_SEP",
    "ROOT",
    "normalize_path",
    "ancestors",
]
