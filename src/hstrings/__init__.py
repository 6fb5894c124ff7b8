"""Printable-string extraction ranked by resemblance to English text."""

from __future__ import annotations

import io

from hstrings._utils import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH
from hstrings.pipeline import ScanContext, ScoredString, format_summary
from hstrings.pipeline.orchestrator import scan
from hstrings.pipeline.scorer import score_candidate
from hstrings.scanner import StringScanner

__version__ = "1.0.0"
__all__ = [
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_MIN_LENGTH",
    "ScanContext",
    "ScoredString",
    "StringScanner",
    "extract",
    "format_summary",
    "scan",
    "score",
]

score = score_candidate


def extract(
    byte_str: bytes | bytearray,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
    context: ScanContext | None = None,
) -> list[ScoredString]:
    """Extract and score the printable strings in *byte_str*.

    Results come back in input order; sort on ``score`` to rank them.
    Pass a :class:`ScanContext` to read the byte total and truncation flag.
    """
    data = byte_str if isinstance(byte_str, bytes) else bytes(byte_str)
    return list(scan(io.BytesIO(data), min_length, max_length, context))
