"""Route store errors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Optional

from redis.exceptions import RedisError

# Backend failures are surfaced as the client raised them.
BackendError = RedisError


class RouteStoreError(Exception):
    """Base class for route store errors."""
    pass


class ConfigurationError(RouteStoreError):
    """Raised when the store cannot be configured."""
    pass


class NotFoundError(RouteStoreError):
    """Raised when an operation requires an existing route."""

    def __init__(self, path: str):
        super().__init__(f"No route registered at {path!r}")
        self.path = path


class RouteDecodeError(RouteStoreError, ValueError):
    """Raised when a stored value cannot be decoded."""

    def __init__(self, message: str, key: Optional[str] = None):
        if key is not None:
            message = f"{message} (key={key!r})"
        super().__init__(message)
        self.key = key


__all__ = [
    "BackendError",
    "RouteStoreError",
    "ConfigurationError",
    "NotFoundError",
    "RouteDecodeError",
]
