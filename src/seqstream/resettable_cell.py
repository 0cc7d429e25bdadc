"""
Single-slot state cell with atomic fetch-and-reset.

The folding adapters keep their running state here. The fold step and an
external reset caller (for example a supervising thread) share one re-entrant
lock, so a reset never interleaves with a half-applied step.
"""

import logging
import threading
from typing import Callable, Generic, Tuple, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")
R = TypeVar("R")


class ResettableCell(Generic[S]):
    """Holds exactly one value of type S."""

    def __init__(self, seed: S):
        self._value = seed
        self._lock = threading.RLock()
        self._generation = 0

    def fetch_and_reset(self, new_seed: S) -> S:
        """
        Atomically return the current value and store ``new_seed``.

        Args:
            new_seed: Value installed in place of the current one

        Returns:
            The value held before the reset
        """
        with self._lock:
            previous = self._value
            self._value = new_seed
            self._generation += 1
        logger.debug(f"Cell reset: {previous!r} -> {new_seed!r}")
        return previous

    def modify(self, step: Callable[[S], Tuple[S, R]]) -> R:
        """
        Atomically replace the value with the first element of ``step(value)``.

        If ``step`` resets this cell itself (same thread, e.g. from an error
        handler), the reset wins and the state computed by ``step`` is dropped.

        Args:
            step: Maps the current value to (new value, result)

        Returns:
            The result half of ``step``'s return value
        """
        with self._lock:
            generation = self._generation
            new_value, result = step(self._value)
            if generation == self._generation:
                self._value = new_value
            return result

    def __repr__(self) -> str:
        with self._lock:
            return f"ResettableCell({self._value!r})"


__all__ = ["ResettableCell"]
