"""Topology resolver - Connection string to backend topology.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging

from roadroutes_core.errors import ConfigurationError
from roadroutes_core.topology.cluster import is_cluster, parse_cluster_url
from roadroutes_core.topology.descriptor import Standalone, TopologyDescriptor
from roadroutes_core.topology.sentinel import is_sentinel, parse_sentinel_url

logger = logging.getLogger(__name__)


def resolve_topology(connection_string: str) -> TopologyDescriptor:
    """Classify a connection string and parse its parameters.

    Schemes are checked in a fixed order: cluster, then sentinel.
    Anything else is a standalone URI passed through unchanged for the
    redis client to interpret.

    Raises:
        ConfigurationError: If the string is empty or a cluster or
            sentinel string is malformed.
    """
    if not isinstance(connection_string, str) or not connection_string:
        raise ConfigurationError("Connection string must be a non-empty string")

    if is_cluster(connection_string):
        descriptor: TopologyDescriptor = parse_cluster_url(connection_string)
    elif is_sentinel(connection_string):
        descriptor = parse_sentinel_url(connection_string)
    else:
        descriptor = Standalone(connection_string)

    logger.debug(f"Resolved topology: {descriptor.describe()}")
    return descriptor


__all__ = ["resolve_topology"]
