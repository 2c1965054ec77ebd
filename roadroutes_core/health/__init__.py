"""Health module - Route store health checks."""

from roadroutes_core.health.checker import (
    HealthResult,
    HealthStatus,
    StoreHealthCheck,
)

__all__ = [
    "HealthResult",
    "HealthStatus",
    "StoreHealthCheck",
]
