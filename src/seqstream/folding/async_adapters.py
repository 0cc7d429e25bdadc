"""Asyncio versions of input_fold and output_fold.

The step functions stay synchronous: only the wrapped read or write is
awaited, and nothing is awaited while the state cell is held.
"""

from typing import Callable, Optional, Tuple, TypeVar

from ..resettable_cell import ResettableCell
from ..streams import AsyncInputStream, AsyncOutputStream
from .input_adapter import ResetFn

A = TypeVar("A")
B = TypeVar("B")
S = TypeVar("S")


def async_input_fold(
    step: Callable[[S, A], S],
    seed: S,
    stream: AsyncInputStream[A],
) -> Tuple[AsyncInputStream[A], ResetFn]:
    cell: ResettableCell[S] = ResettableCell(seed)

    async def _read() -> Optional[A]:
        value = await stream.read()
        if value is None:
            return None
        cell.modify(lambda state: (step(state, value), None))
        return value

    return AsyncInputStream(_read), cell.fetch_and_reset


def async_output_fold(
    step: Callable[[S, A], Tuple[S, B]],
    seed: S,
    stream: AsyncOutputStream[B],
) -> Tuple[AsyncOutputStream[A], ResetFn]:
    cell: ResettableCell[S] = ResettableCell(seed)

    async def _write(value: Optional[A]) -> None:
        if value is None:
            await stream.write(None)
            return
        transformed = cell.modify(lambda state: step(state, value))
        await stream.write(transformed)

    return AsyncOutputStream(_write), cell.fetch_and_reset


__all__ = ["async_input_fold", "async_output_fold"]
