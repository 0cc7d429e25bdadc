"""Sequence anomaly records"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class SequenceIdErrorType(str, Enum):
    """Kinds of sequence anomaly."""

    DROPPED = "dropped"
    DUPLICATED = "duplicated"


@dataclass(frozen=True)
class SequenceIdError:
    """A sequence anomaly observed between two consecutive checked elements.

    Attributes:
        error_type: Whether ids were skipped or repeated
        last_seq_id: Last sequence id seen before the anomaly
        curr_seq_id: Sequence id that triggered the anomaly
        modulus: Counter modulus when ids wrap, None for unbounded ids
    """

    error_type: SequenceIdErrorType
    last_seq_id: int
    curr_seq_id: int
    modulus: Optional[int] = field(default=None, compare=False)

    @property
    def is_dropped(self) -> bool:
        return self.error_type is SequenceIdErrorType.DROPPED

    @property
    def is_duplicated(self) -> bool:
        return self.error_type is SequenceIdErrorType.DUPLICATED

    def missing_count(self, *, modulus: int | None = None) -> int:
        """
        Number of ids skipped between last_seq_id and curr_seq_id.

        Args:
            modulus: Counter modulus overriding the one recorded on the error

        Returns:
            Count of missing ids; always 0 for duplicates
        """
        if not self.is_dropped:
            return 0
        if modulus is None:
            modulus = self.modulus
        distance = self.curr_seq_id - self.last_seq_id
        if modulus is not None:
            distance %= modulus
        return max(distance - 1, 0)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "error_type": self.error_type.value,
            "last_seq_id": self.last_seq_id,
            "curr_seq_id": self.curr_seq_id,
        }
        if self.modulus is not None:
            data["modulus"] = self.modulus
        return data

    def __str__(self) -> str:
        return f"{self.error_type.value} sequence id: last {self.last_seq_id}, got {self.curr_seq_id}"


__all__ = ["SequenceIdError", "SequenceIdErrorType"]
