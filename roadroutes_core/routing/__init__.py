"""Routing module - Path keys and route records."""

from roadroutes_core.routing.paths import PATH_SEP, ROOT, ancestors, normalize_path
from roadroutes_core.routing.route import (
    Route,
    RouteMatch,
    decode_route,
    encode_route,
)

__all__ = [
    "PATH_SEP",
    "ROOT",
    "ancestors",
    "normalize_path",
    "Route",
    "RouteMatch",
    "decode_route",
    "encode_route",
]
