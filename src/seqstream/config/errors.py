"""Exception types for configuration handling."""

from __future__ import annotations

from ..exceptions import ApplicationError


class ConfigurationError(ApplicationError, RuntimeError):
    """Raised when a setting is malformed or a settings file cannot be read."""

    @classmethod
    def invalid_format(cls, name: str, raw: str, expected: str) -> ConfigurationError:
        return cls(f"{name} has invalid format (received {raw!r}). Expected {expected}", setting=name)

    @classmethod
    def invalid_value(cls, name: str, value: object, reason: str) -> ConfigurationError:
        return cls(f"Invalid value for {name}: {value!r}. {reason}", setting=name)

    @classmethod
    def load_failed(cls, path: str) -> ConfigurationError:
        return cls(f"Failed to load settings file {path}", path=path)


__all__ = ["ConfigurationError"]
