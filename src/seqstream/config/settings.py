"""Settings for sequenced streams, read from the environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..sequence_id import DEFAULT_ARITHMETIC, SequenceArithmetic, WrappingSequenceArithmetic
from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_name, env_str

SEQUENCE_BITS_ENV = env_name("SEQUENCE_BITS")
MAX_GAP_TOLERANCE_ENV = env_name("MAX_GAP_TOLERANCE")
LOG_LEVEL_ENV = env_name("LOG_LEVEL")
LOG_APPEND_ENV = env_name("LOG_APPEND")

DEFAULT_MAX_GAP_TOLERANCE = 10
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class SequenceStreamSettings:
    """
    Resolved configuration.

    Attributes:
        sequence_bits: Counter width for wrapping ids, None for unbounded ids
        max_gap_tolerance: Missing-id budget for SequenceErrorStats
        log_level: Level name used by setup_logging
        log_append: Append to existing log files instead of truncating
    """

    sequence_bits: Optional[int] = None
    max_gap_tolerance: int = DEFAULT_MAX_GAP_TOLERANCE
    log_level: str = DEFAULT_LOG_LEVEL
    log_append: bool = False

    def arithmetic(self) -> SequenceArithmetic:
        """Build the sequence arithmetic matching ``sequence_bits``."""
        if self.sequence_bits is None:
            return DEFAULT_ARITHMETIC
        return WrappingSequenceArithmetic(self.sequence_bits)


def _resolve_sequence_bits() -> Optional[int]:
    bits = env_int("SEQUENCE_BITS", 0, minimum=0)
    if bits == 0:
        return None
    if bits == 1:
        raise ConfigurationError.invalid_value(SEQUENCE_BITS_ENV, bits, "Must be 0 (unbounded) or at least 2")
    return bits


def _resolve_log_level() -> str:
    level = env_str("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError.invalid_format(LOG_LEVEL_ENV, level, "a logging level name such as DEBUG or INFO")
    return level


def load_settings() -> SequenceStreamSettings:
    """
    Load settings from the environment and ``.env`` fallbacks.

    Raises:
        ConfigurationError: If any variable is malformed
    """
    return SequenceStreamSettings(
        sequence_bits=_resolve_sequence_bits(),
        max_gap_tolerance=env_int("MAX_GAP_TOLERANCE", DEFAULT_MAX_GAP_TOLERANCE, minimum=0),
        log_level=_resolve_log_level(),
        log_append=env_bool("LOG_APPEND", False),
    )


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_MAX_GAP_TOLERANCE",
    "LOG_APPEND_ENV",
    "LOG_LEVEL_ENV",
    "MAX_GAP_TOLERANCE_ENV",
    "SEQUENCE_BITS_ENV",
    "SequenceStreamSettings",
    "load_settings",
]
