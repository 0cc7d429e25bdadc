"""
Ready-made ``on_error`` handlers for sequence validators.

The validator only reports anomalies; what happens next is up to the handler.
These cover the usual choices: log and carry on, escalate, count, or publish a
JSON report. Handlers can be fanned out with ``combine_handlers``.
"""

import logging
from typing import Callable, Optional

from .error_handlers_helpers import SequenceErrorStats
from .exceptions import SequenceAnomalyError
from .sequence_id import SequenceIdError
from .sequence_id_helpers import encode_sequence_error
from .sequence_validator import SequenceErrorHandler

logger = logging.getLogger(__name__)


def log_sequence_errors(service_name: str, *, log: Optional[logging.Logger] = None) -> SequenceErrorHandler:
    """
    Build a handler that logs each anomaly at warning level and continues.

    Args:
        service_name: Prefix for log lines
        log: Logger to use (defaults to this module's logger)
    """
    target = log if log is not None else logger

    def _handle(error: SequenceIdError) -> None:
        if error.is_dropped:
            target.warning(
                f"{service_name} sequence gap detected: "
                f"last {error.last_seq_id}, got {error.curr_seq_id} "
                f"(missing: {error.missing_count()})"
            )
        else:
            target.warning(
                f"{service_name} out-of-order message: "
                f"last {error.last_seq_id}, got {error.curr_seq_id} (duplicate or reordered)"
            )

    return _handle


def raise_on_sequence_error(error: SequenceIdError) -> None:
    """Handler that escalates every anomaly, aborting the read in progress.

    Raises:
        SequenceAnomalyError: Always
    """
    raise SequenceAnomalyError(sequence_error=error)


def publish_sequence_errors(publish: Callable[[bytes], None]) -> SequenceErrorHandler:
    """Build a handler that hands each anomaly to ``publish`` as JSON bytes."""

    def _handle(error: SequenceIdError) -> None:
        publish(encode_sequence_error(error))

    return _handle


def combine_handlers(*handlers: SequenceErrorHandler) -> SequenceErrorHandler:
    """Call every handler in order; an exception from one stops the rest."""

    def _handle(error: SequenceIdError) -> None:
        for handler in handlers:
            handler(error)

    return _handle


__all__ = [
    "SequenceErrorStats",
    "combine_handlers",
    "log_sequence_errors",
    "publish_sequence_errors",
    "raise_on_sequence_error",
]
