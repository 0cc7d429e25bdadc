"""Exception classes for sequenced streams.

All custom exceptions inherit from ApplicationError so callers can catch the
whole family at once.

Exception classes support two patterns:
1. No-argument raise: raise SequenceArithmeticError()
2. Contextual attributes: err = SequenceArithmeticError(bits=0); raise err

Sequence anomalies (dropped or duplicated ids) are never raised by the stream
adapters themselves. They are reported to the caller's handler as
SequenceIdError values; only the opt-in handlers in
``seqstream.error_handlers`` turn them into SequenceAnomalyError.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all seqstream errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class SequenceArithmeticError(ApplicationError):
    """Sequence arithmetic collaborator is malformed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Sequence arithmetic collaborator is malformed"
        super().__init__(message, **kwargs)


class SequenceAnomalyError(ApplicationError):
    """A sequence anomaly was escalated by an error handler.

    Attributes:
        sequence_error: The SequenceIdError that triggered the escalation.
    """

    def __init__(self, message: str = "", sequence_error: Any = None, **kwargs: Any) -> None:
        if not message:
            if sequence_error is not None:
                message = f"Sequence anomaly: {sequence_error}"
            else:
                message = "Sequence anomaly escalated"
        super().__init__(message, **kwargs)
        self.sequence_error = sequence_error


class SequenceErrorDecodeError(ApplicationError):
    """Serialized sequence error report could not be decoded."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Serialized sequence error report could not be decoded"
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "SequenceAnomalyError",
    "SequenceArithmeticError",
    "SequenceErrorDecodeError",
]
