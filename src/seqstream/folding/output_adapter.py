"""Fold a running state over the values pushed through an OutputStream"""

from typing import Callable, Optional, Tuple, TypeVar

from ..resettable_cell import ResettableCell
from ..streams import OutputStream
from .input_adapter import ResetFn

A = TypeVar("A")
B = TypeVar("B")
S = TypeVar("S")


def output_fold(
    step: Callable[[S, A], Tuple[S, B]],
    seed: S,
    stream: OutputStream[B],
) -> Tuple[OutputStream[A], ResetFn]:
    """
    Wrap ``stream`` so every value written is transformed by a stateful step.

    Args:
        step: Maps (state, value) to (next state, value to forward)
        seed: Initial state
        stream: Stream receiving the transformed values

    Returns:
        Tuple of (wrapped stream, reset) where ``reset(new_seed)`` returns the
        accumulated state and restarts the fold from ``new_seed``
    """
    cell: ResettableCell[S] = ResettableCell(seed)

    def _write(value: Optional[A]) -> None:
        if value is None:
            stream.write(None)
            return
        transformed = cell.modify(lambda state: step(state, value))
        stream.write(transformed)

    return OutputStream(_write), cell.fetch_and_reset


__all__ = ["output_fold"]
