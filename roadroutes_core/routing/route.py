"""Route records - Value type and string encoding.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from roadroutes_core.errors import RouteDecodeError

logger = logging.getLogger(__name__)

LAST_ACTIVITY = "last_activity"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass(frozen=True)
class Route:
    """A registered route.

    ``data`` holds the application-defined fields (``target`` and
    friends). ``last_activity`` is kept apart so it always carries a
    ``datetime`` regardless of how it was supplied.
    """

    data: Dict[str, Any] = field(default_factory=dict)
    last_activity: Optional[datetime] = None

    # Mutable field; equality only
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self):
        object.__setattr__(self, "data", dict(self.data))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Route":
        """Create a route from a flat mapping of fields."""
        fields = dict(data)
        last_activity = fields.pop(LAST_ACTIVITY, None)
        if not last_activity:
            last_activity = None
        elif isinstance(last_activity, str):
            last_activity = parse_timestamp(last_activity)
        elif not isinstance(last_activity, datetime):
            raise TypeError(
                f"{LAST_ACTIVITY} must be a datetime or ISO-8601 string"
            )
        return cls(data=fields, last_activity=last_activity)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten back to a mapping, ``last_activity`` included if set."""
        result = dict(self.data)
        if self.last_activity is not None:
            result[LAST_ACTIVITY] = self.last_activity
        return result

    def merge(self, partial: Union["Route", Mapping[str, Any]]) -> "Route":
        """Return a new route with ``partial`` fields laid over this one."""
        if isinstance(partial, Route):
            partial = partial.to_dict()
        merged = self.to_dict()
        merged.update(partial)
        return Route.from_dict(merged)

    def get(self, name: str, default: Any = None) -> Any:
        if name == LAST_ACTIVITY:
            return self.last_activity
        return self.data.get(name, default)

    def __getitem__(self, name: str) -> Any:
        if name == LAST_ACTIVITY and self.last_activity is not None:
            return self.last_activity
        return self.data[name]

    def __contains__(self, name: object) -> bool:
        if name == LAST_ACTIVITY:
            return self.last_activity is not None
        return name in self.data

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    @property
    def target(self) -> Optional[str]:
        return self.data.get("target")


@dataclass(frozen=True)
class RouteMatch:
    """Result of resolving a request path."""

    prefix: str
    route: Route


def _default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_route(route: Union[Route, Mapping[str, Any], None]) -> Optional[str]:
    """Serialize a route to its stored JSON form.

    ``None`` encodes to ``None`` so callers can tell "no record" from an
    empty one. Timestamps are always written as ISO-8601 strings.
    """
    if route is None:
        return None
    if isinstance(route, Route):
        payload = route.to_dict()
    else:
        payload = dict(route)
    return json.dumps(payload, default=_default)


def decode_route(value: Optional[str], key: Optional[str] = None) -> Optional[Route]:
    """Parse a stored value back into a :class:`Route`.

    Empty or missing values decode to ``None``.

    Raises:
        RouteDecodeError: If the value is not a JSON object or carries an
            unparseable ``last_activity``.
    """
    if not value:
        return None

    try:
        payload = json.loads(value)
    except json.JSONDecodeError as e:
        raise RouteDecodeError(f"Stored route is not valid JSON: {e}", key) from e

    if not isinstance(payload, dict):
        raise RouteDecodeError(
            f"Stored route must be a JSON object, got {type(payload).__name__}",
            key,
        )

    try:
        return Route.from_dict(payload)
    except (TypeError, ValueError) as e:
        raise RouteDecodeError(f"Invalid {LAST_ACTIVITY}: {e}", key) from e


__all__ = [
    "LAST_ACTIVITY",
    "Route",
    "RouteMatch",
    "encode_route",
    "decode_route",
    "parse_timestamp",
]
