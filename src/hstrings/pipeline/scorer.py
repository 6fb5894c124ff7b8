"""Stage 2: English letter-frequency scoring."""

from __future__ import annotations

from hstrings.models import LETTER_WEIGHTS


def score_candidate(text: str) -> float:
    """Return the mean per-character English log-probability of *text*.

    ASCII letters are case-folded and looked up in the letter table; every
    other character adds nothing to the sum but still counts toward the
    divisor, so punctuation and digits pull the score toward zero.

    :param text: The candidate string.  May be empty.
    :returns: ``sum / len(text)``, or ``0.0`` for an empty string.
    """
    if not text:
        return 0.0
    total = 0.0
    for ch in text:
        total += LETTER_WEIGHTS.get(ch, 0.0)
    return total / len(text)
