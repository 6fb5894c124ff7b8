# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import io

import pytest

from hstrings.pipeline import ScanContext

#: Two short runs around one printable sentence, split by 0x00 and 0x01.
SAMPLE_BLOB = b"abc\x00Hello, World!\x01xyz"


@pytest.fixture
def context() -> ScanContext:
    return ScanContext()


@pytest.fixture
def sample_stream() -> io.BytesIO:
    return io.BytesIO(SAMPLE_BLOB)
