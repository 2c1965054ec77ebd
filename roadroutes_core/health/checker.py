"""Health Checker - Route store backend health.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from roadroutes_core.errors import BackendError
from roadroutes_core.store.route_store import RouteStore

logger = logging.getLogger(__name__)


class HealthStatus(Enum):
    """Health check status."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    UNKNOWN = "unknown"


@dataclass
class HealthResult:
    """Result of a health check."""

    status: HealthStatus
    name: str
    message: str = ""
    latency_ms: float = 0.0
    timestamp: float = field(default_factory=time.time)
    details: Dict[str, Any] = field(default_factory=dict)


class StoreHealthCheck:
    """Pings the route store backend and records the outcome."""

    def __init__(self, store: RouteStore, name: str = "route-store"):
        self.store = store
        self.name = name
        self._last: Optional[HealthResult] = None

    def _details(self) -> Dict[str, Any]:
        details: Dict[str, Any] = {"namespace": self.store.namespace}
        if self.store.topology is not None:
            details["topology"] = self.store.topology.kind
        return details

    async def check(self) -> HealthResult:
        """Run the check."""
        start = time.perf_counter()
        try:
            ok = await self.store.ping()
        except (BackendError, OSError) as e:
            logger.warning(f"Route store unreachable: {e}")
            result = HealthResult(
                status=HealthStatus.UNHEALTHY,
                name=self.name,
                message=str(e),
                details=self._details(),
            )
        else:
            result = HealthResult(
                status=HealthStatus.HEALTHY if ok else HealthStatus.UNHEALTHY,
                name=self.name,
                message="PONG" if ok else "Ping failed",
                details=self._details(),
            )

        result.latency_ms = (time.perf_counter() - start) * 1000
        self._last = result
        return result

    def get_status(self) -> HealthStatus:
        """Status of the last check."""
        if self._last is None:
            return HealthStatus.UNKNOWN
        return self._last.status

    def get_summary(self) -> Dict[str, Any]:
        """Get health summary."""
        if self._last is None:
            return {"status": HealthStatus.UNKNOWN.value, "name": self.name}

        return {
            "status": self._last.status.value,
            "name": self.name,
            "message": self._last.message,
            "latency_ms": self._last.latency_ms,
            "details": dict(self._last.details),
        }


__all__ = [
    "HealthResult",
    "HealthStatus",
    "StoreHealthCheck",
]
