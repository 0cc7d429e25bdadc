"""
Sequence id utilities shared by the sequenced stream adapters.

Sequence ids are plain integers. How two ids relate (contiguous, gapped or
duplicated) and what id comes next is decided by a SequenceArithmetic
collaborator; the module-level helpers use unbounded integer arithmetic.
"""

from typing import Iterable, Optional

from .exceptions import SequenceArithmeticError
from .sequence_id_helpers import (
    IntegerSequenceArithmetic,
    SequenceArithmetic,
    SequenceIdError,
    SequenceIdErrorType,
    WrappingSequenceArithmetic,
)

DEFAULT_ARITHMETIC = IntegerSequenceArithmetic()


def check_seq_id(last_seq_id: int, curr_seq_id: int) -> Optional[SequenceIdError]:
    """
    Classify ``curr_seq_id`` against the last seen id.

    Args:
        last_seq_id: Last sequence id seen
        curr_seq_id: Sequence id just received

    Returns:
        None when ``curr_seq_id`` is the successor of ``last_seq_id``,
        otherwise a DROPPED or DUPLICATED SequenceIdError

    Example:
        >>> check_seq_id(1, 2) is None
        True
        >>> check_seq_id(1, 4).error_type.value
        'dropped'
    """
    return DEFAULT_ARITHMETIC.check(last_seq_id, curr_seq_id)


def increment_seq_id(seq_id: int) -> int:
    """Return the id following ``seq_id``."""
    return DEFAULT_ARITHMETIC.increment(seq_id)


def resolve_arithmetic(arithmetic: Optional[SequenceArithmetic]) -> SequenceArithmetic:
    """Return ``arithmetic`` or the unbounded default."""
    if arithmetic is None:
        return DEFAULT_ARITHMETIC
    return arithmetic


def verify_arithmetic(arithmetic: SequenceArithmetic, sample_ids: Iterable[int]) -> None:
    """
    Check that ``arithmetic`` treats each sample's successor as contiguous.

    Args:
        arithmetic: Collaborator to verify
        sample_ids: Ids to probe

    Raises:
        SequenceArithmeticError: If ``check(seq_id, increment(seq_id))`` reports an anomaly
    """
    for seq_id in sample_ids:
        successor = arithmetic.increment(seq_id)
        error = arithmetic.check(seq_id, successor)
        if error is not None:
            raise SequenceArithmeticError(
                f"{arithmetic!r} reports {error.error_type.value} for successor {successor} of {seq_id}",
                seq_id=seq_id,
                successor=successor,
            )


__all__ = [
    "DEFAULT_ARITHMETIC",
    "IntegerSequenceArithmetic",
    "SequenceArithmetic",
    "SequenceIdError",
    "SequenceIdErrorType",
    "WrappingSequenceArithmetic",
    "check_seq_id",
    "increment_seq_id",
    "resolve_arithmetic",
    "verify_arithmetic",
]
