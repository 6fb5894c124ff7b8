"""Internal shared utilities for hstrings."""

from __future__ import annotations

#: Shortest candidate that is scored and emitted.
DEFAULT_MIN_LENGTH: int = 4

#: Largest candidate the segmenter accumulates before cutting the run.
DEFAULT_MAX_LENGTH: int = 2 * 1024


def _validate_length(name: str, value: int) -> None:
    """Raise ValueError if *value* is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"{name} must be a positive integer"
        raise ValueError(msg)
