"""
Sentinel-terminated streams.

Provides the pull (InputStream) and push (OutputStream) abstractions the
sequence adapters decorate, in both blocking and asyncio flavours. ``None``
is the terminal sentinel in every direction.
"""

from .aio import (
    AsyncInputStream,
    AsyncOutputStream,
    async_connect,
    async_list_output_stream,
    async_to_list,
    from_async_iterable,
    make_async_input_stream,
    make_async_output_stream,
)
from .core import (
    InputStream,
    OutputStream,
    connect,
    from_iterable,
    list_output_stream,
    make_input_stream,
    make_output_stream,
    to_list,
)

__all__ = [
    "AsyncInputStream",
    "AsyncOutputStream",
    "InputStream",
    "OutputStream",
    "async_connect",
    "async_list_output_stream",
    "async_to_list",
    "connect",
    "from_async_iterable",
    "from_iterable",
    "list_output_stream",
    "make_async_input_stream",
    "make_async_output_stream",
    "make_input_stream",
    "make_output_stream",
    "to_list",
]
