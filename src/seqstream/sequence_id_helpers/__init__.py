"""Helper modules for sequence id handling"""

from .arithmetic import IntegerSequenceArithmetic, SequenceArithmetic, WrappingSequenceArithmetic
from .codec import decode_sequence_error, encode_sequence_error
from .error_record import SequenceIdError, SequenceIdErrorType

__all__ = [
    "IntegerSequenceArithmetic",
    "SequenceArithmetic",
    "SequenceIdError",
    "SequenceIdErrorType",
    "WrappingSequenceArithmetic",
    "decode_sequence_error",
    "encode_sequence_error",
]
