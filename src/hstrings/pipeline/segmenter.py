"""Stage 1: Split a byte stream into runs of printable ASCII."""

from __future__ import annotations

from typing import BinaryIO, Iterator

from hstrings._utils import _validate_length
from hstrings.pipeline import ScanContext

# Printable ASCII: space (0x20) through tilde (0x7E).
_PRINTABLE_LOW = 0x20
_PRINTABLE_HIGH = 0x7E


def is_candidate_byte(b: int) -> bool:
    """Return True if byte value *b* may appear in a candidate."""
    return _PRINTABLE_LOW <= b <= _PRINTABLE_HIGH


def next_candidate(
    stream: BinaryIO, max_length: int, context: ScanContext
) -> str | None:
    """Read the next run of printable bytes from *stream*.

    Bytes are read one at a time.  The run ends at the first non-printable
    byte (which is consumed and dropped), at end-of-stream, or once it holds
    *max_length* characters.  The length is checked before each read, so a
    run cut at the cap loses nothing: its remainder starts the next call.

    :param stream: A binary file-like object supporting ``read(1)``.
    :param max_length: Upper bound on the candidate length.
    :param context: Run state; ``total_bytes`` is incremented per byte read.
    :returns: The candidate text, possibly empty, or ``None`` when the
        stream produced no byte at all.
    """
    _validate_length("max_length", max_length)
    buf = bytearray()
    while len(buf) < max_length:
        c = stream.read(1)
        if not c:
            # Any byte read earlier in this call is either in buf or was a
            # delimiter that already ended the loop.
            if not buf:
                return None
            break
        context.total_bytes += 1
        if not is_candidate_byte(c[0]):
            break
        buf.append(c[0])
    return buf.decode("ascii")


def iter_candidates(
    stream: BinaryIO, max_length: int, context: ScanContext
) -> Iterator[str]:
    """Yield every candidate in *stream*, including empty ones, until exhausted."""
    while (candidate := next_candidate(stream, max_length, context)) is not None:
        yield candidate
