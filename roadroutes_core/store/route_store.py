"""Route Store - Persistent routing table with prefix resolution.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from roadroutes_core.backends.base import DEFAULT_NAMESPACE, HashBackend
from roadroutes_core.backends.redis_backend import (
    RedisHashBackend,
    create_redis_client,
)
from roadroutes_core.errors import NotFoundError
from roadroutes_core.routing.paths import ROOT, ancestors, normalize_path
from roadroutes_core.routing.route import (
    Route,
    RouteMatch,
    decode_route,
    encode_route,
)
from roadroutes_core.topology.descriptor import TopologyDescriptor
from roadroutes_core.topology.resolver import resolve_topology
from roadroutes_core.utils.config import (
    EnvironmentProvider,
    ExplicitProvider,
    StoreConfig,
    load_config,
    resolve_connection_string,
)

logger = logging.getLogger(__name__)

RouteData = Union[Route, Mapping[str, Any]]


class RouteStore:
    """Routing table kept in a key-value backend.

    Features:
    - Canonical path keys
    - Longest-prefix resolution
    - Standalone, sentinel and cluster redis topologies
    - Bulk clear

    Resolution:
    ┌────────────────────────────────────────────────────────────┐
    │  /foo/bar/baz ──▶ ancestors ──▶ /foo/bar/baz   (miss)      │
    │                                 /foo/bar       (hit)  ──▶  │
    │                                 /foo                        │
    │                                 /                           │
    └────────────────────────────────────────────────────────────┘

    Every read goes to the backend; nothing is cached. Backend errors
    propagate as raised by the client.
    """

    def __init__(
        self,
        backend: Optional[HashBackend] = None,
        *,
        uri: Optional[str] = None,
        namespace: str = DEFAULT_NAMESPACE,
        keep_root: bool = True,
        environ: Optional[Mapping[str, str]] = None,
        **client_options: Any,
    ):
        """Create a store.

        Args:
            backend: Backend to use as-is. When omitted a redis backend is
                built from ``uri`` or the environment.
            uri: Connection string; wins over the environment.
            namespace: Hash holding the routing table.
            keep_root: Default for :meth:`clear`.
            environ: Environment mapping, ``os.environ`` if omitted.
            **client_options: Passed to the redis client.

        Raises:
            ConfigurationError: If no connection string can be found or
                it is malformed.
        """
        self.keep_root = keep_root
        self.topology: Optional[TopologyDescriptor] = None

        if backend is not None:
            self._backend = backend
            self._owns_backend = False
            return

        connection_string = resolve_connection_string([
            ExplicitProvider(uri),
            EnvironmentProvider(environ=environ),
        ])
        self.topology = resolve_topology(connection_string)
        logger.info(f"Route store using {self.topology.describe()}")

        client = create_redis_client(self.topology, **client_options)
        self._backend = RedisHashBackend(client, namespace)
        self._owns_backend = True

    @classmethod
    def from_config(
        cls,
        config: Optional[StoreConfig] = None,
        backend: Optional[HashBackend] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "RouteStore":
        """Create a store from a :class:`StoreConfig`."""
        if config is None:
            config = load_config(environ=environ)

        client_options = {}
        if config.socket_timeout is not None:
            client_options["socket_timeout"] = config.socket_timeout

        return cls(
            backend,
            uri=config.uri or None,
            namespace=config.namespace,
            keep_root=config.keep_root,
            environ=environ,
            **client_options,
        )

    @property
    def backend(self) -> HashBackend:
        return self._backend

    @property
    def namespace(self) -> str:
        return self._backend.namespace

    def clean_path(self, path: Optional[str]) -> str:
        """Normalize a path to its storage key."""
        return normalize_path(path)

    async def get(self, path: Optional[str]) -> Optional[Route]:
        """Get the route registered at exactly ``path``."""
        key = self.clean_path(path)
        return decode_route(await self._backend.get(key), key)

    async def add(self, path: Optional[str], route: Optional[RouteData]) -> None:
        """Register ``route`` at ``path``, replacing any existing record."""
        key = self.clean_path(path)
        value = encode_route(route)
        if value is None:
            logger.debug(f"Nothing to store at {key}")
            return

        await self._backend.set(key, value)
        logger.debug(f"Added route {key}")

    async def remove(self, path: Optional[str]) -> None:
        """Remove the route at ``path``; missing routes are ignored."""
        key = self.clean_path(path)
        await self._backend.delete(key)
        logger.debug(f"Removed route {key}")

    async def update(self, path: Optional[str], partial: RouteData) -> Route:
        """Merge ``partial`` into the route at ``path``.

        Read and write are separate round trips; concurrent writers to
        the same path race and the last write wins.

        Raises:
            NotFoundError: If no route is registered at ``path``.
        """
        key = self.clean_path(path)
        current = await self.get(key)
        if current is None:
            raise NotFoundError(key)

        merged = current.merge(partial)
        await self.add(key, merged)
        logger.debug(f"Updated route {key}")
        return merged

    async def get_all(self) -> Dict[str, Route]:
        """Get the whole routing table, skipping empty values."""
        table = await self._backend.get_all()
        routes = {}
        for key, value in table.items():
            route = decode_route(value, key)
            if route is not None:
                routes[key] = route
        return routes

    async def resolve(self, path: Optional[str]) -> Optional[RouteMatch]:
        """Find the most specific registered route for ``path``.

        Returns:
            The matching prefix and its route, or ``None`` if neither
            ``path`` nor any ancestor (root included) is registered.
        """
        candidates = ancestors(self.clean_path(path))
        table = await self._backend.get_all()

        for key in candidates:
            route = decode_route(table.get(key), key)
            if route is not None:
                return RouteMatch(prefix=key, route=route)

        logger.debug(f"No route for {candidates[0]}")
        return None

    async def get_target(self, path: Optional[str]) -> Optional[RouteMatch]:
        """Alias of :meth:`resolve` used by proxies."""
        return await self.resolve(path)

    async def clear(self, keep_root: Optional[bool] = None) -> int:
        """Delete every route in one batch.

        Args:
            keep_root: Preserve the ``/`` route. Defaults to the store's
                ``keep_root`` setting.

        Returns:
            Number of routes deleted.
        """
        if keep_root is None:
            keep_root = self.keep_root

        keys = await self._backend.keys()
        doomed = [key for key in keys if not (keep_root and key == ROOT)]
        removed = await self._backend.delete_many(doomed)
        logger.debug(f"Cleared {removed} routes (keep_root={keep_root})")
        return removed

    async def ping(self) -> bool:
        """Check the backend is reachable."""
        return await self._backend.ping()

    async def close(self) -> None:
        """Close the backend if this store created it."""
        if self._owns_backend:
            await self._backend.close()

    async def __aenter__(self) -> "RouteStore":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


__all__ = ["RouteStore"]
