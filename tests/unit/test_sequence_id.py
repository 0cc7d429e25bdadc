"""Tests for the sequence id facade helpers."""

import pytest

from seqstream.exceptions import SequenceArithmeticError
from seqstream.sequence_id import (
    DEFAULT_ARITHMETIC,
    SequenceIdError,
    SequenceIdErrorType,
    WrappingSequenceArithmetic,
    check_seq_id,
    increment_seq_id,
    resolve_arithmetic,
    verify_arithmetic,
)


class _BrokenArithmetic:
    """Collaborator that never reports contiguity."""

    def check(self, last_seq_id, curr_seq_id):
        return SequenceIdError(SequenceIdErrorType.DROPPED, last_seq_id, curr_seq_id)

    def increment(self, seq_id):
        return seq_id + 1

    def latest(self, last_seq_id, curr_seq_id):
        return max(last_seq_id, curr_seq_id)


def test_check_seq_id_contract() -> None:
    for seq_id in (-5, 0, 1, 2**40):
        assert check_seq_id(seq_id, increment_seq_id(seq_id)) is None


def test_check_seq_id_reports_drop() -> None:
    assert check_seq_id(1, 4) == SequenceIdError(SequenceIdErrorType.DROPPED, 1, 4)


def test_resolve_arithmetic_defaults() -> None:
    custom = WrappingSequenceArithmetic(8)

    assert resolve_arithmetic(None) is DEFAULT_ARITHMETIC
    assert resolve_arithmetic(custom) is custom


def test_verify_arithmetic_accepts_well_formed() -> None:
    verify_arithmetic(WrappingSequenceArithmetic(4), range(16))
    verify_arithmetic(DEFAULT_ARITHMETIC, [0, 1, 99])


def test_verify_arithmetic_rejects_malformed() -> None:
    with pytest.raises(SequenceArithmeticError) as exc_info:
        verify_arithmetic(_BrokenArithmetic(), [3])

    assert exc_info.value.seq_id == 3
    assert exc_info.value.successor == 4
