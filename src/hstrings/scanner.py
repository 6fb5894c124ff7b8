"""StringScanner — push-style scanning for data that arrives in chunks."""

from __future__ import annotations

from hstrings._utils import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, _validate_length
from hstrings.pipeline import ScanContext, ScoredString
from hstrings.pipeline.scorer import score_candidate
from hstrings.pipeline.segmenter import is_candidate_byte


class StringScanner:
    """Streaming printable-string scanner.

    Implements a feed/close pattern: chunks of bytes are passed to
    :meth:`feed`, which returns the results completed so far, and
    :meth:`close` flushes the run still pending at the end of the input.
    Segmentation is identical to :func:`hstrings.scan` over the
    concatenated chunks, and the pending run never grows past
    *max_length*.
    """

    def __init__(
        self,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        """Initialize the scanner.

        :param min_length: Shortest run to score and return.
        :param max_length: Cap on the length of a single run.
        :raises ValueError: If either length is not a positive integer.
        """
        _validate_length("min_length", min_length)
        _validate_length("max_length", max_length)
        self._min_length = min_length
        self._max_length = max_length
        self._pending = bytearray()
        self._context = ScanContext()
        self._closed = False

    def feed(self, byte_str: bytes | bytearray) -> list[ScoredString]:
        """Feed a chunk of bytes to the scanner.

        :param byte_str: The next chunk of input.
        :returns: Results for every run that ended inside this chunk.
        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        results: list[ScoredString] = []
        self._context.total_bytes += len(byte_str)
        for b in byte_str:
            if not is_candidate_byte(b):
                self._emit(results)
                continue
            self._pending.append(b)
            if len(self._pending) == self._max_length:
                self._emit(results)
        return results

    def _emit(self, results: list[ScoredString]) -> None:
        """Finish the pending run, appending it to *results* if long enough."""
        length = len(self._pending)
        truncated = length == self._max_length
        if truncated:
            self._context.truncated = True
        if length >= self._min_length:
            text = self._pending.decode("ascii")
            results.append(ScoredString(score_candidate(text), text, truncated))
        self._pending = bytearray()

    def close(self) -> list[ScoredString]:
        """Finalize the scan and return the result for the trailing run, if any.

        Calling :meth:`close` again returns an empty list.
        """
        results: list[ScoredString] = []
        if not self._closed:
            self._closed = True
            if self._pending:
                self._emit(results)
        return results

    def reset(self) -> None:
        """Reset the scanner to its initial state for reuse."""
        self._pending = bytearray()
        self._context = ScanContext()
        self._closed = False

    @property
    def done(self) -> bool:
        """Whether :meth:`close` has been called."""
        return self._closed

    @property
    def context(self) -> ScanContext:
        """Byte total and truncation flag for the input seen so far."""
        return self._context
