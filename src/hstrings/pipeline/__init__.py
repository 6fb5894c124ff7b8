"""Scanning pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

#: Prefix used on summary lines.
PROGRAM_NAME = "hstrings"


@dataclasses.dataclass(frozen=True, slots=True)
class ScoredString:
    """A candidate string emitted by the scanner together with its score.

    ``truncated`` is set when the run was cut at the maximum candidate
    length instead of ending at a delimiter or at end-of-stream.
    """

    score: float
    text: str
    truncated: bool = False

    def format(self) -> str:
        """Render the result as an output line, e.g. ``(2.1): aaaa``."""
        return f"({self.score:.3g}): {self.text}"

    def to_dict(self) -> dict[str, str | float | bool]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'score'``, ``'text'``, and ``'truncated'`` keys.
        """
        return {
            "score": self.score,
            "text": self.text,
            "truncated": self.truncated,
        }


@dataclasses.dataclass(slots=True)
class ScanContext:
    """Per-run mutable state for a scan.

    Created by the caller (or by ``scan()`` when none is given) and threaded
    through the segmenter via function parameters.  ``total_bytes`` counts
    every byte read from the input, eligible or not.  ``truncated`` is
    sticky: once a candidate hits the length cap it stays set.
    """

    total_bytes: int = 0
    truncated: bool = False


def format_summary(context: ScanContext) -> list[str]:
    """Return the summary lines printed after the input is exhausted."""
    lines = [f"{PROGRAM_NAME}: Read {context.total_bytes}"]
    if context.truncated:
        lines.append(f"{PROGRAM_NAME}: Warning. Some lines were truncated")
    return lines
