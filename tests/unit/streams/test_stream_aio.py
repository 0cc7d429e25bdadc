"""Tests for the asyncio stream primitives."""

import pytest

from seqstream.streams import (
    async_connect,
    async_list_output_stream,
    async_to_list,
    from_async_iterable,
    make_async_input_stream,
    make_async_output_stream,
)


async def _letters():
    for letter in "xyz":
        yield letter


class TestAsyncInputStream:
    """Tests for AsyncInputStream class."""

    @pytest.mark.asyncio
    async def test_async_iteration(self) -> None:
        stream = from_async_iterable(_letters())

        assert [value async for value in stream] == ["x", "y", "z"]
        assert stream.exhausted

    @pytest.mark.asyncio
    async def test_sentinel_is_sticky(self) -> None:
        calls = []

        async def _produce():
            calls.append(1)
            return None

        stream = make_async_input_stream(_produce)

        assert await stream.read() is None
        assert await stream.read() is None
        assert len(calls) == 1


class TestAsyncOutputStream:
    """Tests for AsyncOutputStream class."""

    @pytest.mark.asyncio
    async def test_writes_after_close_are_ignored(self) -> None:
        received = []

        async def _consume(value):
            received.append(value)

        stream = make_async_output_stream(_consume)
        await stream.write(1)
        await stream.close()
        await stream.write(2)

        assert received == [1, None]

    @pytest.mark.asyncio
    async def test_async_connect_and_collect(self) -> None:
        sink, flush = async_list_output_stream()

        await async_connect(from_async_iterable(_letters()), sink)

        assert flush() == ["x", "y", "z"]
        assert sink.closed
        assert await async_to_list(from_async_iterable(_letters())) == ["x", "y", "z"]
