"""Backend Base - Hash storage contract.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

DEFAULT_NAMESPACE = "configurable-proxy-redis-storage"


class HashBackend(ABC):
    """Async field storage scoped to a single namespace.

    The route store keeps its whole table in one hash: every path key
    is a field, every encoded route is a value.

    ┌────────────────────────────────────────────────┐
    │  namespace                                      │
    │  ┌──────────────┬───────────────────────────┐  │
    │  │ /            │ {"target": "http://..."}  │  │
    │  │ /foo         │ {"target": "http://..."}  │  │
    │  │ /foo/bar     │ {"target": "http://..."}  │  │
    │  └──────────────┴───────────────────────────┘  │
    └────────────────────────────────────────────────┘
    """

    namespace: str

    @abstractmethod
    async def get(self, field: str) -> Optional[str]:
        """Get a field value, ``None`` if missing."""
        pass

    @abstractmethod
    async def set(self, field: str, value: str) -> None:
        """Create or replace a field."""
        pass

    @abstractmethod
    async def delete(self, field: str) -> int:
        """Delete a field. Returns the number of fields removed."""
        pass

    @abstractmethod
    async def delete_many(self, fields: Iterable[str]) -> int:
        """Delete several fields in one batch."""
        pass

    @abstractmethod
    async def get_all(self) -> Dict[str, str]:
        """Get every field with its value."""
        pass

    @abstractmethod
    async def keys(self) -> List[str]:
        """Get every field name."""
        pass

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        pass


__all__ = ["DEFAULT_NAMESPACE", "HashBackend"]
