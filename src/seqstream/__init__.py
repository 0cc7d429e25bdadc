"""
Sequence id decorators for sentinel-terminated streams.

- make_sequence_validator: checks continuity of ids on values read
- make_sequence_assigner: stamps ids onto values written
- input_fold / output_fold: the resettable stateful folds both are built on

Anomalies are reported to handlers as SequenceIdError values rather than
raised; see ``seqstream.error_handlers`` for ready-made handlers.
"""

from .error_handlers import (
    SequenceErrorStats,
    combine_handlers,
    log_sequence_errors,
    publish_sequence_errors,
    raise_on_sequence_error,
)
from .exceptions import (
    ApplicationError,
    SequenceAnomalyError,
    SequenceArithmeticError,
    SequenceErrorDecodeError,
)
from .folding import async_input_fold, async_output_fold, input_fold, output_fold
from .resettable_cell import ResettableCell
from .sequence_assigner import make_async_sequence_assigner, make_sequence_assigner
from .sequence_id import (
    IntegerSequenceArithmetic,
    SequenceArithmetic,
    SequenceIdError,
    SequenceIdErrorType,
    WrappingSequenceArithmetic,
    check_seq_id,
    increment_seq_id,
    verify_arithmetic,
)
from .sequence_validator import make_async_sequence_validator, make_sequence_validator
from .streams import (
    AsyncInputStream,
    AsyncOutputStream,
    InputStream,
    OutputStream,
    from_iterable,
    list_output_stream,
)

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "AsyncInputStream",
    "AsyncOutputStream",
    "InputStream",
    "IntegerSequenceArithmetic",
    "OutputStream",
    "ResettableCell",
    "SequenceAnomalyError",
    "SequenceArithmetic",
    "SequenceArithmeticError",
    "SequenceErrorDecodeError",
    "SequenceErrorStats",
    "SequenceIdError",
    "SequenceIdErrorType",
    "WrappingSequenceArithmetic",
    "async_input_fold",
    "async_output_fold",
    "check_seq_id",
    "combine_handlers",
    "from_iterable",
    "increment_seq_id",
    "input_fold",
    "list_output_stream",
    "log_sequence_errors",
    "make_async_sequence_assigner",
    "make_async_sequence_validator",
    "make_sequence_assigner",
    "make_sequence_validator",
    "output_fold",
    "publish_sequence_errors",
    "raise_on_sequence_error",
    "verify_arithmetic",
]
