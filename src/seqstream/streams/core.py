"""
Pull and push streams terminated by a ``None`` sentinel.

An InputStream yields values until it returns ``None`` once; from then on it
keeps returning ``None`` without consulting its producer again. An
OutputStream accepts values until it is handed ``None``; later writes are
dropped.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InputStream(Generic[T]):
    """Single-element pull source."""

    def __init__(self, producer: Callable[[], Optional[T]]):
        """
        Args:
            producer: Returns the next value, or None at end of stream
        """
        self._producer = producer
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def read(self) -> Optional[T]:
        """Pull the next value, or None once the stream has ended."""
        if self._exhausted:
            return None
        value = self._producer()
        if value is None:
            self._exhausted = True
        return value

    def __iter__(self) -> Iterator[T]:
        while True:
            value = self.read()
            if value is None:
                return
            yield value


class OutputStream(Generic[T]):
    """Single-element push sink."""

    def __init__(self, consumer: Callable[[Optional[T]], None]):
        """
        Args:
            consumer: Receives each value, then None exactly once at end of stream
        """
        self._consumer = consumer
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, value: Optional[T]) -> None:
        """Push a value; pushing None ends the stream."""
        if self._closed:
            logger.debug("Ignoring write to closed output stream: %r", value)
            return
        if value is None:
            self._closed = True
        self._consumer(value)

    def write_all(self, values: Iterable[T]) -> None:
        """Push each value without ending the stream."""
        for value in values:
            self.write(value)

    def close(self) -> None:
        """Push the end-of-stream sentinel."""
        self.write(None)


def make_input_stream(producer: Callable[[], Optional[T]]) -> InputStream[T]:
    return InputStream(producer)


def make_output_stream(consumer: Callable[[Optional[T]], None]) -> OutputStream[T]:
    return OutputStream(consumer)


def from_iterable(values: Iterable[T]) -> InputStream[T]:
    """
    Wrap an iterable as an InputStream.

    Example:
        >>> stream = from_iterable([1, 2])
        >>> stream.read(), stream.read(), stream.read()
        (1, 2, None)
    """
    iterator = iter(values)

    def _next() -> Optional[T]:
        return next(iterator, None)

    return InputStream(_next)


def list_output_stream() -> Tuple[OutputStream[T], Callable[[], List[T]]]:
    """
    Build an OutputStream that collects values into a list.

    Returns:
        Tuple of (stream, flush) where flush returns the values written since
        the previous flush
    """
    collected: List[T] = []

    def _consume(value: Optional[T]) -> None:
        if value is not None:
            collected.append(value)

    def _flush() -> List[T]:
        values = list(collected)
        collected.clear()
        return values

    return OutputStream(_consume), _flush


def to_list(stream: InputStream[T]) -> List[T]:
    """Drain an InputStream into a list."""
    return list(stream)


def connect(source: InputStream[T], sink: OutputStream[T]) -> None:
    """Copy every value from ``source`` into ``sink``, including the sentinel."""
    while True:
        value = source.read()
        sink.write(value)
        if value is None:
            return


__all__ = [
    "InputStream",
    "OutputStream",
    "connect",
    "from_iterable",
    "list_output_stream",
    "make_input_stream",
    "make_output_stream",
    "to_list",
]
