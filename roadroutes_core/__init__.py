"""RoadRoutes - Persistent routing table for reverse proxies.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

RoadRoutes stores proxy routes in redis and resolves request paths with:
- Canonical path keys
- Longest-prefix route resolution
- Standalone, sentinel and cluster topologies from one connection string
- Async API on top of redis.asyncio

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────────┐
│                              RoadRoutes                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                              │
│  ┌───────────────────────────────────────────────────────────────────────┐  │
│  │                          Resolution                                    │  │
│  │  Path ──▶ normalize ──▶ ancestors ──▶ table snapshot ──▶ first match  │  │
│  └───────────────────────────────────────────────────────────────────────┘  │
│                                                                              │
│  ┌─────────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐ │
│  │    Routing      │  │    Topology     │  │        Backends             │ │
│  │                 │  │                 │  │                             │ │
│  │ - Path keys     │  │ - Standalone    │  │ - Redis hash                │ │
│  │ - Ancestors     │  │ - Sentinel      │  │ - In-memory                 │ │
│  │ - Route codec   │  │ - Cluster       │  │                             │ │
│  └─────────────────┘  └─────────────────┘  └─────────────────────────────┘ │
│                                                                              │
│  ┌─────────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐ │
│  │     Store       │  │     Health      │  │        Config               │ │
│  │                 │  │                 │  │                             │ │
│  │ - CRUD          │  │ - Backend ping  │  │ - Explicit / env / file     │ │
│  │ - Resolve       │  │ - Latency       │  │ - Logging level             │ │
│  │ - Bulk clear    │  │                 │  │                             │ │
│  └─────────────────┘  └─────────────────┘  └─────────────────────────────┘ │
│                                                                              │
└─────────────────────────────────────────────────────────────────────────────┘

Usage:
    from roadroutes_core import RouteStore

    store = RouteStore(uri="cluster://secret@redis-1:7000,redis-2:7001")

    await store.add("/api", {"target": "http://backend:8080"})
    match = await store.resolve("/api/users/42")
    # match.prefix == "/api", match.route.target == "http://backend:8080"

    await store.clear(keep_root=True)
    await store.close()
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# Errors
from roadroutes_core.errors import (
    BackendError,
    ConfigurationError,
    NotFoundError,
    RouteDecodeError,
    RouteStoreError,
)

# Routing
from roadroutes_core.routing.paths import PATH_SEP, ROOT, ancestors, normalize_path
from roadroutes_core.routing.route import (
    Route,
    RouteMatch,
    decode_route,
    encode_route,
)

# Topology
from roadroutes_core.topology.descriptor import (
    Cluster,
    Endpoint,
    Sentinel,
    Standalone,
)
from roadroutes_core.topology.resolver import resolve_topology

# Backends
from roadroutes_core.backends.base import HashBackend
from roadroutes_core.backends.memory import MemoryHashBackend
from roadroutes_core.backends.redis_backend import (
    RedisHashBackend,
    create_redis_client,
)

# Store
from roadroutes_core.store.route_store import RouteStore

# Health
from roadroutes_core.health.checker import HealthStatus, StoreHealthCheck

# Utils
from roadroutes_core.utils.config import StoreConfig, load_config

__all__ = [
    # Version
    "__version__",
    # Errors
    "BackendError",
    "ConfigurationError",
    "NotFoundError",
    "RouteDecodeError",
    "RouteStoreError",
    # Routing
    "PATH_SEP",
    "ROOT",
    "ancestors",
    "normalize_path",
    "Route",
    "RouteMatch",
    "decode_route",
    "encode_route",
    # Topology
    "Cluster",
    "Endpoint",
    "Sentinel",
    "Standalone",
    "resolve_topology",
    # Backends
    "HashBackend",
    "MemoryHashBackend",
    "RedisHashBackend",
    "create_redis_client",
    # Store
    "RouteStore",
    # Health
    "HealthStatus",
    "StoreHealthCheck",
    # Utils
    "StoreConfig",
    "load_config",
]
