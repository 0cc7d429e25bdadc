"""Reads ``SEQSTREAM_*`` settings from the process environment.

Keys are given without the prefix. A value missing from the environment is
looked up in ``./.env`` and then ``~/.seqstream.env``; the first file that
defines a key wins.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

ENV_PREFIX = "SEQSTREAM_"

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".seqstream.env")

_DOTENV_VALUES: dict[str, str] | None = None


def env_name(key: str) -> str:
    """Full environment variable name for a settings key."""
    return f"{ENV_PREFIX}{key}"


def _dotenv_values() -> dict[str, str]:
    from .runtime_helpers import DotenvLoader

    global _DOTENV_VALUES
    if _DOTENV_VALUES is None:
        merged: dict[str, str] = {}
        for path in _DOTENV_CANDIDATES:
            for name, value in DotenvLoader.load_from_file(path).items():
                if name.startswith(ENV_PREFIX):
                    merged.setdefault(name, value)
        _DOTENV_VALUES = merged
    return _DOTENV_VALUES


def _raw(key: str) -> Optional[str]:
    name = env_name(key)
    for candidate in (os.getenv(name), _dotenv_values().get(name)):
        if candidate is not None and candidate.strip():
            return candidate.strip()
    return None


def env_str(key: str, default: str) -> str:
    """Setting as a stripped string; blank counts as unset."""
    raw = _raw(key)
    return default if raw is None else raw


def env_int(key: str, default: int, *, minimum: Optional[int] = None) -> int:
    """
    Setting as an integer.

    Raises:
        ConfigurationError: If the value is not an integer or is below ``minimum``
    """
    raw = _raw(key)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_format(env_name(key), raw, "an integer") from exc
    if minimum is not None and value < minimum:
        raise ConfigurationError.invalid_value(env_name(key), value, f"Must be at least {minimum}")
    return value


def env_bool(key: str, default: bool) -> bool:
    raw = _raw(key)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_format(env_name(key), raw, "a boolean such as true or false")


__all__ = ["ENV_PREFIX", "env_bool", "env_int", "env_name", "env_str"]
