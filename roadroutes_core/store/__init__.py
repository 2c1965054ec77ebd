"""Store module - Route persistence and resolution."""

from roadroutes_core.store.route_store import RouteStore

__all__ = ["RouteStore"]
