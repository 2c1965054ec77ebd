"""Sentinel connection strings.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Format::

    sentinel://[:password@]host1[:port1][,host2[:port2]...]/master_name[/db]

``redis+sentinel://`` is accepted as well.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import unquote

from roadroutes_core.errors import ConfigurationError
from roadroutes_core.topology.cluster import parse_endpoint
from roadroutes_core.topology.descriptor import Endpoint, Sentinel

logger = logging.getLogger(__name__)

SENTINEL_SCHEMES = ("sentinel://", "redis+sentinel://")
DEFAULT_SENTINEL_PORT = 26379


def is_sentinel(url: str) -> bool:
    """Check for a sentinel scheme marker."""
    return url.startswith(SENTINEL_SCHEMES)


def _password(credential: str) -> Optional[str]:
    # "user:secret" and ":secret" both carry the password after the colon
    _, sep, secret = credential.partition(":")
    password = secret if sep else credential
    return unquote(password) or None


def parse_sentinel_url(url: str) -> Sentinel:
    """Parse a sentinel connection string.

    Raises:
        ConfigurationError: If the master name is missing, a host is
            empty, or a port or db is not numeric.
    """
    scheme = next((s for s in SENTINEL_SCHEMES if url.startswith(s)), None)
    if scheme is None:
        raise ConfigurationError(f"Not a sentinel connection string: {url!r}")

    rest = url[len(scheme):]
    hosts, _, path = rest.partition("/")
    master_name, _, db = path.strip("/").partition("/")
    if not master_name:
        raise ConfigurationError(f"Missing sentinel master name in {url!r}")
    if db and not db.isdigit():
        raise ConfigurationError(f"Invalid db {db!r} in {url!r}")

    password = None
    if "@" in hosts:
        credential, _, hosts = hosts.rpartition("@")
        password = _password(credential)

    sentinels = []
    for segment in hosts.split(","):
        segment = segment.strip()
        if not segment:
            continue
        endpoint = parse_endpoint(segment, url)
        if endpoint.port is None:
            endpoint = Endpoint(endpoint.host, DEFAULT_SENTINEL_PORT)
        sentinels.append(endpoint)

    if not sentinels:
        raise ConfigurationError(f"No sentinel hosts in {url!r}")

    return Sentinel(
        sentinels=tuple(sentinels),
        master_name=unquote(master_name),
        password=password,
        db=int(db) if db else 0,
    )


__all__ = [
    "SENTINEL_SCHEMES",
    "DEFAULT_SENTINEL_PORT",
    "is_sentinel",
    "parse_sentinel_url",
]
