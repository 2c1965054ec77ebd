"""Redis hash backend.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from redis.asyncio import Redis
from redis.asyncio.cluster import ClusterNode, RedisCluster
from redis.asyncio.sentinel import Sentinel as SentinelClient

from roadroutes_core.backends.base import DEFAULT_NAMESPACE, HashBackend
from roadroutes_core.topology.descriptor import (
    Cluster,
    Sentinel,
    Standalone,
    TopologyDescriptor,
)

logger = logging.getLogger(__name__)

DEFAULT_REDIS_PORT = 6379


def create_redis_client(descriptor: TopologyDescriptor, **options: Any) -> Any:
    """Build an asyncio redis client for a topology.

    Extra ``options`` are passed to the client as connection keyword
    arguments. Responses are always decoded to ``str``.
    """
    options.setdefault("decode_responses", True)

    if isinstance(descriptor, Cluster):
        startup_nodes = [
            ClusterNode(node.host, node.port or DEFAULT_REDIS_PORT)
            for node in descriptor.nodes
        ]
        return RedisCluster(
            startup_nodes=startup_nodes,
            password=descriptor.password,
            **options,
        )

    if isinstance(descriptor, Sentinel):
        sentinel_kwargs = {
            k: v for k, v in options.items() if k.startswith("socket_")
        }
        if descriptor.password:
            sentinel_kwargs["password"] = descriptor.password
        sentinel = SentinelClient(
            [(e.host, e.port) for e in descriptor.sentinels],
            sentinel_kwargs=sentinel_kwargs,
            password=descriptor.password,
            db=descriptor.db,
            **options,
        )
        return sentinel.master_for(descriptor.master_name)

    if isinstance(descriptor, Standalone):
        return Redis.from_url(descriptor.uri, **options)

    raise TypeError(f"Unknown topology: {descriptor!r}")


class RedisHashBackend(HashBackend):
    """Route table stored in a single redis hash.

    Commands:
    ┌──────────────┬────────────────────────────────┐
    │ get          │ HGET namespace field            │
    │ set          │ HSET namespace field value      │
    │ delete       │ HDEL namespace field            │
    │ delete_many  │ HDEL namespace field [field...] │
    │ get_all      │ HGETALL namespace               │
    │ keys         │ HKEYS namespace                 │
    └──────────────┴────────────────────────────────┘

    Client errors propagate unchanged.
    """

    def __init__(self, client: Any, namespace: str = DEFAULT_NAMESPACE):
        self._client = client
        self.namespace = namespace

    @property
    def client(self) -> Any:
        return self._client

    async def get(self, field: str) -> Optional[str]:
        return await self._client.hget(self.namespace, field)

    async def set(self, field: str, value: str) -> None:
        await self._client.hset(self.namespace, field, value)

    async def delete(self, field: str) -> int:
        return await self._client.hdel(self.namespace, field)

    async def delete_many(self, fields: Iterable[str]) -> int:
        fields = list(fields)
        if not fields:
            return 0
        return await self._client.hdel(self.namespace, *fields)

    async def get_all(self) -> Dict[str, str]:
        return await self._client.hgetall(self.namespace)

    async def keys(self) -> List[str]:
        return await self._client.hkeys(self.namespace)

    async def ping(self) -> bool:
        return bool(await self._client.ping())

    async def close(self) -> None:
        await self._client.aclose()


__all__ = [
    "DEFAULT_REDIS_PORT",
    "RedisHashBackend",
    "create_redis_client",
]
