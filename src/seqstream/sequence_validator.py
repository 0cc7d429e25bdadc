"""
Sequence continuity checking for input streams.

Wraps an InputStream so that every value read is checked against the last
sequence id seen. Dropped and duplicated ids are reported to a caller-supplied
handler; the stream content is never altered and reading continues.
"""

from typing import Callable, Optional, Tuple, TypeVar

from .folding import ResetFn, async_input_fold, input_fold
from .sequence_id import SequenceArithmetic, SequenceIdError, resolve_arithmetic
from .streams import AsyncInputStream, InputStream

A = TypeVar("A")

SequenceErrorHandler = Callable[[SequenceIdError], None]


def _checking_step(
    get_seq_id: Callable[[A], int],
    should_check: Callable[[A], bool],
    on_error: SequenceErrorHandler,
    arithmetic: SequenceArithmetic,
) -> Callable[[int, A], int]:
    def _step(last_seq_id: int, value: A) -> int:
        if not should_check(value):
            return last_seq_id
        curr_seq_id = get_seq_id(value)
        error = arithmetic.check(last_seq_id, curr_seq_id)
        if error is not None:
            on_error(error)
        # state never rewinds to an older id
        return arithmetic.latest(last_seq_id, curr_seq_id)

    return _step


def make_sequence_validator(
    initial: int,
    get_seq_id: Callable[[A], int],
    should_check: Callable[[A], bool],
    on_error: SequenceErrorHandler,
    stream: InputStream[A],
    *,
    arithmetic: Optional[SequenceArithmetic] = None,
) -> Tuple[InputStream[A], ResetFn]:
    """
    Wrap an InputStream and check for dropped or duplicated sequence ids.

    Args:
        initial: Sequence id considered seen before the first element
        get_seq_id: Extracts the sequence id from an element
        should_check: Returns False for elements that carry no meaningful id;
            those never advance or break continuity tracking
        on_error: Called synchronously with each SequenceIdError while the
            state lock is held. It may call ``reset`` itself, but must not wait
            on another thread that calls ``reset``: that deadlocks.
        stream: Stream to check
        arithmetic: Sequence arithmetic (unbounded integers by default)

    Returns:
        Tuple of (pass-through stream, reset) where ``reset(seed)`` returns the
        last sequence id seen and restarts checking from ``seed``

    Example:
        >>> errors = []
        >>> checked, reset = make_sequence_validator(
        ...     0, lambda x: x, lambda x: True, errors.append, from_iterable([1, 2, 3, 4])
        ... )
        >>> checked.read(), checked.read(), checked.read()
        (1, 2, 3)
        >>> reset(0)
        3
        >>> checked.read()
        4
        >>> errors[0].last_seq_id, errors[0].curr_seq_id
        (0, 4)
    """
    step = _checking_step(get_seq_id, should_check, on_error, resolve_arithmetic(arithmetic))
    return input_fold(step, initial, stream)


def make_async_sequence_validator(
    initial: int,
    get_seq_id: Callable[[A], int],
    should_check: Callable[[A], bool],
    on_error: SequenceErrorHandler,
    stream: AsyncInputStream[A],
    *,
    arithmetic: Optional[SequenceArithmetic] = None,
) -> Tuple[AsyncInputStream[A], ResetFn]:
    """Asyncio twin of make_sequence_validator.

    ``on_error`` stays synchronous and runs under the same state lock.
    """
    step = _checking_step(get_seq_id, should_check, on_error, resolve_arithmetic(arithmetic))
    return async_input_fold(step, initial, stream)


__all__ = [
    "SequenceErrorHandler",
    "make_async_sequence_validator",
    "make_sequence_validator",
]
