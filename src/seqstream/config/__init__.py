"""Shared configuration helpers and settings."""

from .errors import ConfigurationError
from .runtime import ENV_PREFIX, env_bool, env_int, env_name, env_str
from .settings import SequenceStreamSettings, load_settings

__all__ = [
    "ConfigurationError",
    "ENV_PREFIX",
    "SequenceStreamSettings",
    "env_bool",
    "env_int",
    "env_name",
    "env_str",
    "load_settings",
]
