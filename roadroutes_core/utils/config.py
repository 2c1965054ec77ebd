"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Type, TypeVar

from roadroutes_core.backends.base import DEFAULT_NAMESPACE
from roadroutes_core.errors import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="StoreConfig")

ENV_PREFIX = "CONFIGURABLE_PROXY_REDIS_"
URI_ENV_VAR = f"{ENV_PREFIX}URI"


class ConfigSource(Enum):
    """Configuration sources."""

    EXPLICIT = auto()
    ENV = auto()
    FILE = auto()
    DEFAULT = auto()


@dataclass
class StoreConfig:
    """Route store configuration."""

    # Connection
    uri: str = ""
    namespace: str = DEFAULT_NAMESPACE
    socket_timeout: Optional[float] = None

    # Behaviour
    keep_root: bool = True

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls: Type[T], data: Mapping[str, Any]) -> T:
        """Create config from dictionary."""
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        try:
            import yaml
        except ImportError:
            raise ImportError("PyYAML required for YAML config")

        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_env(
        cls: Type[T],
        prefix: str = ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
    ) -> T:
        """Load config from environment variables."""
        if environ is None:
            environ = os.environ

        # Annotations are strings under postponed evaluation
        string_fields = {
            f.name for f in cls.__dataclass_fields__.values()
            if f.type in (str, "str")
        }

        data = {}
        for key, value in environ.items():
            if key.startswith(prefix):
                config_key = key[len(prefix):].lower()

                # Type conversion
                if config_key in string_fields:
                    data[config_key] = value
                elif value.lower() in ("true", "false"):
                    data[config_key] = value.lower() == "true"
                elif value.isdigit():
                    data[config_key] = int(value)
                else:
                    try:
                        data[config_key] = float(value)
                    except ValueError:
                        data[config_key] = value

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {}
        for field_name in self.__dataclass_fields__:
            result[field_name] = getattr(self, field_name)
        return result

    def merge(self, other: "StoreConfig") -> "StoreConfig":
        """Merge with another config (other's non-default values win)."""
        defaults = StoreConfig().to_dict()
        data = self.to_dict()
        for key, value in other.to_dict().items():
            if value != defaults[key]:
                data[key] = value
        return StoreConfig.from_dict(data)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = ENV_PREFIX,
    environ: Optional[Mapping[str, str]] = None,
) -> StoreConfig:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = StoreConfig()

    if path:
        path_obj = Path(path)
        if path_obj.exists():
            if path.endswith(".json"):
                config = StoreConfig.from_json(path)
            elif path.endswith((".yaml", ".yml")):
                config = StoreConfig.from_yaml(path)
            else:
                logger.warning(f"Unknown config format: {path}")
        else:
            logger.warning(f"Config file not found: {path}")

    env_config = StoreConfig.from_env(env_prefix, environ)
    return config.merge(env_config)


def configure_logging(level: str = "INFO") -> None:
    """Apply a log level for applications embedding the store."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


class ExplicitProvider:
    """Connection string supplied directly by the caller."""

    source = ConfigSource.EXPLICIT

    def __init__(self, value: Optional[str]):
        self._value = value

    def get(self) -> Optional[str]:
        return self._value or None


class EnvironmentProvider:
    """Connection string read from an environment variable."""

    source = ConfigSource.ENV

    def __init__(
        self,
        name: str = URI_ENV_VAR,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.name = name
        self._environ = environ

    def get(self) -> Optional[str]:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(self.name) or None


def resolve_connection_string(providers: Iterable[Any]) -> str:
    """Return the first connection string any provider supplies.

    Raises:
        ConfigurationError: If no provider has a value.
    """
    for provider in providers:
        value = provider.get()
        if value:
            logger.debug(f"Connection string from {provider.source.name.lower()}")
            return value

    raise ConfigurationError(f"{URI_ENV_VAR} environment variable must be defined")


__all__ = [
    "ENV_PREFIX",
    "URI_ENV_VAR",
    "ConfigSource",
    "StoreConfig",
    "load_config",
    "configure_logging",
    "ExplicitProvider",
    "EnvironmentProvider",
    "resolve_connection_string",
]
