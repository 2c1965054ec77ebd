"""In-memory hash backend.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from roadroutes_core.backends.base import DEFAULT_NAMESPACE, HashBackend

logger = logging.getLogger(__name__)


class MemoryHashBackend(HashBackend):
    """Dict-backed backend for tests and single-process proxies.

    Each call runs to completion without yielding to the event loop, so
    every operation is atomic with respect to other coroutines.
    """

    def __init__(
        self,
        namespace: str = DEFAULT_NAMESPACE,
        data: Optional[Dict[str, str]] = None,
    ):
        self.namespace = namespace
        self._fields: Dict[str, str] = dict(data or {})

    async def get(self, field: str) -> Optional[str]:
        return self._fields.get(field)

    async def set(self, field: str, value: str) -> None:
        self._fields[field] = value

    async def delete(self, field: str) -> int:
        return 1 if self._fields.pop(field, None) is not None else 0

    async def delete_many(self, fields: Iterable[str]) -> int:
        removed = 0
        for field in list(fields):
            if self._fields.pop(field, None) is not None:
                removed += 1
        return removed

    async def get_all(self) -> Dict[str, str]:
        return dict(self._fields)

    async def keys(self) -> List[str]:
        return list(self._fields)

    def __len__(self) -> int:
        return len(self._fields)


__all__ = ["MemoryHashBackend"]
