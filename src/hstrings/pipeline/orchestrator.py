"""Pipeline orchestrator — pulls candidates from a stream and scores them."""

from __future__ import annotations

from typing import BinaryIO, Iterator

from hstrings._utils import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, _validate_length
from hstrings.pipeline import ScanContext, ScoredString
from hstrings.pipeline.scorer import score_candidate
from hstrings.pipeline.segmenter import iter_candidates


def scan(
    stream: BinaryIO,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
    context: ScanContext | None = None,
) -> Iterator[ScoredString]:
    """Scan *stream* and yield a scored result for each long-enough run.

    Runs shorter than *min_length* are skipped but their bytes still count
    toward ``context.total_bytes``.  A run that reaches *max_length* marks
    the context as truncated, whether or not it is emitted.

    Arguments are validated eagerly; the stream is only read as the
    returned iterator is consumed.

    :param stream: A binary file-like object.
    :param min_length: Shortest run to score and yield.
    :param max_length: Cap on the length of a single run.
    :param context: Run state to update.  Pass one in to read the totals
        afterwards or to accumulate them over several streams.
    :raises ValueError: If either length is not a positive integer.
    """
    _validate_length("min_length", min_length)
    _validate_length("max_length", max_length)
    if context is None:
        context = ScanContext()
    return _scan(stream, min_length, max_length, context)


def _scan(
    stream: BinaryIO, min_length: int, max_length: int, context: ScanContext
) -> Iterator[ScoredString]:
    for candidate in iter_candidates(stream, max_length, context):
        truncated = len(candidate) == max_length
        if truncated:
            context.truncated = True
        if len(candidate) >= min_length:
            yield ScoredString(score_candidate(candidate), candidate, truncated)
