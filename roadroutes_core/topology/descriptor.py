"""Topology descriptors - Backend deployment shapes.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Endpoint:
    """A host with an optional explicit port."""

    host: str
    port: Optional[int] = None

    def __str__(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class Standalone:
    """Single redis endpoint given as a URI."""

    uri: str = field(repr=False)

    kind = "standalone"

    def describe(self) -> str:
        return self.kind


@dataclass(frozen=True)
class Sentinel:
    """Sentinel-monitored master set."""

    sentinels: Tuple[Endpoint, ...]
    master_name: str
    password: Optional[str] = field(default=None, repr=False)
    db: int = 0

    kind = "sentinel"

    def describe(self) -> str:
        hosts = ",".join(str(e) for e in self.sentinels)
        return f"{self.kind} master={self.master_name} sentinels={hosts}"


@dataclass(frozen=True)
class Cluster:
    """Redis cluster; the password is shared by every node."""

    nodes: Tuple[Endpoint, ...]
    password: Optional[str] = field(default=None, repr=False)

    kind = "cluster"

    def describe(self) -> str:
        return f"{self.kind} nodes={','.join(str(n) for n in self.nodes)}"


TopologyDescriptor = Union[Standalone, Sentinel, Cluster]


__all__ = [
    "Endpoint",
    "Standalone",
    "Sentinel",
    "Cluster",
    "TopologyDescriptor",
]
