"""Topology module - Backend deployment shapes and connection strings."""

from roadroutes_core.topology.descriptor import (
    Cluster,
    Endpoint,
    Sentinel,
    Standalone,
    TopologyDescriptor,
)
from roadroutes_core.topology.cluster import is_cluster, parse_cluster_url
from roadroutes_core.topology.sentinel import is_sentinel, parse_sentinel_url
from roadroutes_core.topology.resolver import resolve_topology

__all__ = [
    "Cluster",
    "Endpoint",
    "Sentinel",
    "Standalone",
    "TopologyDescriptor",
    "is_cluster",
    "parse_cluster_url",
    "is_sentinel",
    "parse_sentinel_url",
    "resolve_topology",
]
