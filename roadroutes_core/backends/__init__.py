"""Backends module - Key-value storage for the route table."""

from roadroutes_core.backends.base import DEFAULT_NAMESPACE, HashBackend
from roadroutes_core.backends.memory import MemoryHashBackend
from roadroutes_core.backends.redis_backend import (
    RedisHashBackend,
    create_redis_client,
)

__all__ = [
    "DEFAULT_NAMESPACE",
    "HashBackend",
    "MemoryHashBackend",
    "RedisHashBackend",
    "create_redis_client",
]
