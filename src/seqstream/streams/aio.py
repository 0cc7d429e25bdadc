"""Asyncio counterparts of InputStream and OutputStream."""

from __future__ import annotations

import logging
from typing import AsyncIterable, AsyncIterator, Awaitable, Callable, Generic, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncInputStream(Generic[T]):
    """Single-element async pull source; None ends the stream."""

    def __init__(self, producer: Callable[[], Awaitable[Optional[T]]]):
        self._producer = producer
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    async def read(self) -> Optional[T]:
        if self._exhausted:
            return None
        value = await self._producer()
        if value is None:
            self._exhausted = True
        return value

    def __aiter__(self) -> AsyncIterator[T]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[T]:
        while True:
            value = await self.read()
            if value is None:
                return
            yield value


class AsyncOutputStream(Generic[T]):
    """Single-element async push sink; None ends the stream."""

    def __init__(self, consumer: Callable[[Optional[T]], Awaitable[None]]):
        self._consumer = consumer
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def write(self, value: Optional[T]) -> None:
        if self._closed:
            logger.debug("Ignoring write to closed async output stream: %r", value)
            return
        if value is None:
            self._closed = True
        await self._consumer(value)

    async def close(self) -> None:
        await self.write(None)


def make_async_input_stream(producer: Callable[[], Awaitable[Optional[T]]]) -> AsyncInputStream[T]:
    return AsyncInputStream(producer)


def make_async_output_stream(consumer: Callable[[Optional[T]], Awaitable[None]]) -> AsyncOutputStream[T]:
    return AsyncOutputStream(consumer)


def from_async_iterable(values: AsyncIterable[T]) -> AsyncInputStream[T]:
    """Wrap an async iterable (e.g. an async generator) as an AsyncInputStream."""
    iterator = values.__aiter__()

    async def _next() -> Optional[T]:
        try:
            return await iterator.__anext__()
        except StopAsyncIteration:
            return None

    return AsyncInputStream(_next)


def async_list_output_stream() -> Tuple[AsyncOutputStream[T], Callable[[], List[T]]]:
    """Build an AsyncOutputStream collecting values; flush returns and clears them."""
    collected: List[T] = []

    async def _consume(value: Optional[T]) -> None:
        if value is not None:
            collected.append(value)

    def _flush() -> List[T]:
        values = list(collected)
        collected.clear()
        return values

    return AsyncOutputStream(_consume), _flush


async def async_to_list(stream: AsyncInputStream[T]) -> List[T]:
    return [value async for value in stream]


async def async_connect(source: AsyncInputStream[T], sink: AsyncOutputStream[T]) -> None:
    """Copy every value from ``source`` into ``sink``, including the sentinel."""
    while True:
        value = await source.read()
        await sink.write(value)
        if value is None:
            return


__all__ = [
    "AsyncInputStream",
    "AsyncOutputStream",
    "async_connect",
    "async_list_output_stream",
    "async_to_list",
    "from_async_iterable",
    "make_async_input_stream",
    "make_async_output_stream",
]
