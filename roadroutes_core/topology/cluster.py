"""Cluster connection strings.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Format::

    cluster://[password@]host1[:port1][,host2[:port2]...]

Every segment may repeat ``password@``; the password belongs to the
whole cluster and the last one seen wins.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from roadroutes_core.errors import ConfigurationError
from roadroutes_core.topology.descriptor import Cluster, Endpoint

logger = logging.getLogger(__name__)

CLUSTER_SCHEME = "cluster://"


def is_cluster(url: str) -> bool:
    """Check for the cluster scheme marker."""
    return url.startswith(CLUSTER_SCHEME)


def parse_endpoint(target: str, url: str) -> Endpoint:
    """Parse ``host`` or ``host:port``; an empty port means none."""
    host, sep, port = target.rpartition(":")
    if not sep:
        host, port = target, ""

    if not host:
        raise ConfigurationError(f"Missing host in {target!r} of {url!r}")
    if not port:
        return Endpoint(host)
    if not port.isdigit():
        raise ConfigurationError(f"Invalid port {port!r} in {url!r}")
    return Endpoint(host, int(port))


def _split_credential(segment: str, url: str) -> Tuple[Optional[str], str]:
    if "@" not in segment:
        return None, segment

    credential, _, target = segment.rpartition("@")
    if not target:
        raise ConfigurationError(
            f"Cluster node {segment!r} has a password but no host in {url!r}"
        )
    if credential.startswith(":"):
        credential = credential[1:]
    return credential or None, target


def parse_cluster_url(url: str) -> Cluster:
    """Parse a cluster connection string.

    Raises:
        ConfigurationError: On a segment with a password but no host, an
            empty host, a non-numeric port, or no nodes at all.
    """
    if not is_cluster(url):
        raise ConfigurationError(f"Not a cluster connection string: {url!r}")

    nodes: List[Endpoint] = []
    password: Optional[str] = None

    for segment in url[len(CLUSTER_SCHEME):].split(","):
        segment = segment.strip()
        if not segment:
            continue

        credential, target = _split_credential(segment, url)
        if credential is not None:
            if password is not None and credential != password:
                logger.warning("Cluster nodes disagree on password; using the last one")
            password = credential

        nodes.append(parse_endpoint(target, url))

    if not nodes:
        raise ConfigurationError(f"No cluster nodes in {url!r}")

    return Cluster(nodes=tuple(nodes), password=password)


__all__ = [
    "CLUSTER_SCHEME",
    "is_cluster",
    "parse_cluster_url",
    "parse_endpoint",
]
