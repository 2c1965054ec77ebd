"""Utils module - Configuration."""

from roadroutes_core.utils.config import (
    ConfigSource,
    EnvironmentProvider,
    ExplicitProvider,
    StoreConfig,
    configure_logging,
    load_config,
    resolve_connection_string,
)

__all__ = [
    "ConfigSource",
    "EnvironmentProvider",
    "ExplicitProvider",
    "StoreConfig",
    "configure_logging",
    "load_config",
    "resolve_connection_string",
]
