"""
Sequence id assignment for output streams.

Wraps an OutputStream so that every value written is stamped with the next
sequence id before it is forwarded.
"""

from typing import Callable, Optional, Tuple, TypeVar

from .folding import ResetFn, async_output_fold, output_fold
from .sequence_id import SequenceArithmetic, resolve_arithmetic
from .streams import AsyncOutputStream, OutputStream

A = TypeVar("A")
B = TypeVar("B")


def _assigning_step(
    attach: Callable[[int, A], B],
    explicit_seq_id: Callable[[A], Optional[int]],
    arithmetic: SequenceArithmetic,
) -> Callable[[int, A], Tuple[int, B]]:
    def _step(counter: int, value: A) -> Tuple[int, B]:
        next_seq_id = explicit_seq_id(value)
        if next_seq_id is None:
            next_seq_id = arithmetic.increment(counter)
        # Explicit ids replace the counter, so later elements continue from them
        return next_seq_id, attach(next_seq_id, value)

    return _step


def _never_explicit(_value: object) -> Optional[int]:
    return None


def make_sequence_assigner(
    initial: int,
    attach: Callable[[int, A], B],
    explicit_seq_id: Optional[Callable[[A], Optional[int]]],
    stream: OutputStream[B],
    *,
    arithmetic: Optional[SequenceArithmetic] = None,
) -> Tuple[OutputStream[A], ResetFn]:
    """
    Wrap an OutputStream to give a sequence id to each element written.

    Args:
        initial: Counter value before the first element; the first
            auto-assigned id is its successor
        attach: Builds the forwarded payload from (sequence id, element)
        explicit_seq_id: Returns an id to use as-is for an element, or None to
            take the next counter value. Passing None always auto-assigns.
        stream: Stream receiving the stamped payloads
        arithmetic: Sequence arithmetic (unbounded integers by default)

    Returns:
        Tuple of (stream to write elements to, reset) where ``reset(seed)``
        returns the last id assigned and restarts the counter at ``seed``

    Example:
        >>> sink, flush = list_output_stream()
        >>> stamped, reset = make_sequence_assigner(0, lambda seq, x: (seq, x), None, sink)
        >>> stamped.write(6); stamped.write(7)
        >>> flush()
        [(1, 6), (2, 7)]
        >>> reset(0)
        2
    """
    chooser = explicit_seq_id if explicit_seq_id is not None else _never_explicit
    step = _assigning_step(attach, chooser, resolve_arithmetic(arithmetic))
    return output_fold(step, initial, stream)


def make_async_sequence_assigner(
    initial: int,
    attach: Callable[[int, A], B],
    explicit_seq_id: Optional[Callable[[A], Optional[int]]],
    stream: AsyncOutputStream[B],
    *,
    arithmetic: Optional[SequenceArithmetic] = None,
) -> Tuple[AsyncOutputStream[A], ResetFn]:
    """Asyncio twin of make_sequence_assigner."""
    chooser = explicit_seq_id if explicit_seq_id is not None else _never_explicit
    step = _assigning_step(attach, chooser, resolve_arithmetic(arithmetic))
    return async_output_fold(step, initial, stream)


__all__ = ["make_async_sequence_assigner", "make_sequence_assigner"]
