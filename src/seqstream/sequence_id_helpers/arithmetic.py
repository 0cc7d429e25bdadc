"""Sequence id arithmetic: classification, increment and ordering"""

from __future__ import annotations

from typing import Optional, Protocol

from ..exceptions import SequenceArithmeticError
from .error_record import SequenceIdError, SequenceIdErrorType


class SequenceArithmetic(Protocol):
    """Protocol for the arithmetic the sequence adapters delegate to.

    Implementations must satisfy ``check(last, increment(last)) is None``.
    """

    def check(self, last_seq_id: int, curr_seq_id: int) -> Optional[SequenceIdError]:
        """Classify ``curr_seq_id`` against ``last_seq_id``."""
        ...

    def increment(self, seq_id: int) -> int:
        """Return the id that follows ``seq_id``."""
        ...

    def latest(self, last_seq_id: int, curr_seq_id: int) -> int:
        """Return whichever of the two ids is newer."""
        ...


class IntegerSequenceArithmetic:
    """Unbounded integer sequence ids."""

    def check(self, last_seq_id: int, curr_seq_id: int) -> Optional[SequenceIdError]:
        if curr_seq_id == last_seq_id + 1:
            return None
        if curr_seq_id > last_seq_id:
            return SequenceIdError(SequenceIdErrorType.DROPPED, last_seq_id, curr_seq_id)
        return SequenceIdError(SequenceIdErrorType.DUPLICATED, last_seq_id, curr_seq_id)

    def increment(self, seq_id: int) -> int:
        return seq_id + 1

    def latest(self, last_seq_id: int, curr_seq_id: int) -> int:
        return max(curr_seq_id, last_seq_id)

    def __repr__(self) -> str:
        return "IntegerSequenceArithmetic()"


class WrappingSequenceArithmetic:
    """
    Fixed-width sequence ids that wrap to zero after ``2**bits - 1``.

    Ordering uses serial-number comparison: the forward distance
    ``d = (curr - last) mod 2**bits`` decides the relation. ``d == 1`` is the
    successor, ``1 < d < 2**(bits - 1)`` is newer with ``d - 1`` ids missing,
    and anything else (including ``d == 0``) is a duplicate or older id.
    """

    def __init__(self, bits: int):
        """
        Args:
            bits: Counter width, at least 2

        Raises:
            SequenceArithmeticError: If the width cannot express ordering
        """
        if not isinstance(bits, int) or isinstance(bits, bool) or bits < 2:
            raise SequenceArithmeticError(f"Wrapping sequence ids need at least 2 bits (got {bits!r})", bits=bits)
        self.bits = bits
        self.modulus = 1 << bits
        self._half = 1 << (bits - 1)

    def _distance(self, last_seq_id: int, curr_seq_id: int) -> int:
        return (curr_seq_id - last_seq_id) % self.modulus

    def _is_newer(self, distance: int) -> bool:
        return 0 < distance < self._half

    def check(self, last_seq_id: int, curr_seq_id: int) -> Optional[SequenceIdError]:
        distance = self._distance(last_seq_id, curr_seq_id)
        if distance == 1:
            return None
        if self._is_newer(distance):
            return SequenceIdError(SequenceIdErrorType.DROPPED, last_seq_id, curr_seq_id, self.modulus)
        return SequenceIdError(SequenceIdErrorType.DUPLICATED, last_seq_id, curr_seq_id, self.modulus)

    def increment(self, seq_id: int) -> int:
        return (seq_id + 1) % self.modulus

    def latest(self, last_seq_id: int, curr_seq_id: int) -> int:
        if self._is_newer(self._distance(last_seq_id, curr_seq_id)):
            return curr_seq_id
        return last_seq_id

    def __repr__(self) -> str:
        return f"WrappingSequenceArithmetic(bits={self.bits})"


__all__ = [
    "IntegerSequenceArithmetic",
    "SequenceArithmetic",
    "WrappingSequenceArithmetic",
]
