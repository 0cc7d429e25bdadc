"""Stateful fold combinators over sentinel-terminated streams."""

from .async_adapters import async_input_fold, async_output_fold
from .input_adapter import ResetFn, input_fold
from .output_adapter import output_fold

__all__ = [
    "ResetFn",
    "async_input_fold",
    "async_output_fold",
    "input_fold",
    "output_fold",
]
