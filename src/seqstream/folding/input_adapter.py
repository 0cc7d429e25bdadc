"""Fold a running state over the values pulled through an InputStream"""

from typing import Callable, Optional, Tuple, TypeVar

from ..resettable_cell import ResettableCell
from ..streams import InputStream

A = TypeVar("A")
S = TypeVar("S")

ResetFn = Callable[[S], S]


def input_fold(
    step: Callable[[S, A], S],
    seed: S,
    stream: InputStream[A],
) -> Tuple[InputStream[A], ResetFn]:
    """
    Wrap ``stream`` so every value read updates a running state.

    Values pass through unmodified. The sentinel leaves the state untouched.

    Args:
        step: Computes the next state from the current state and a value
        seed: Initial state
        stream: Stream to read from

    Returns:
        Tuple of (wrapped stream, reset) where ``reset(new_seed)`` returns the
        accumulated state and restarts the fold from ``new_seed``
    """
    cell: ResettableCell[S] = ResettableCell(seed)

    def _read() -> Optional[A]:
        value = stream.read()
        if value is None:
            return None
        cell.modify(lambda state: (step(state, value), None))
        return value

    return InputStream(_read), cell.fetch_and_reset


__all__ = ["ResetFn", "input_fold"]
