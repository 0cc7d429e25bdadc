"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from typing import List

import pytest

from seqstream.config import runtime
from seqstream.sequence_id import SequenceIdError


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep SEQSTREAM_* variables and .env files from leaking into tests."""
    for name in list(os.environ):
        if name.startswith("SEQSTREAM_"):
            monkeypatch.delenv(name, raising=False)
    runtime._DOTENV_VALUES = {}
    yield
    runtime._DOTENV_VALUES = None


@pytest.fixture
def reported_errors() -> List[SequenceIdError]:
    """Provide a list that can be passed as ``on_error`` via ``.append``."""
    return []
