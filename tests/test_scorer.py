# tests/test_scorer.py
from __future__ import annotations

import math

import pytest

from hstrings.models import LETTER_LOGPROB, LETTER_WEIGHTS
from hstrings.pipeline.scorer import score_candidate


def test_empty_string_scores_zero():
    assert score_candidate("") == 0.0


def test_no_letters_scores_zero():
    assert score_candidate("1234 !?#") == 0.0


def test_single_letter_is_exact():
    for i, expected in enumerate(LETTER_LOGPROB):
        letter = chr(ord("a") + i)
        assert score_candidate(letter) == expected


def test_repeated_letter_is_mean():
    assert score_candidate("aaaa") == pytest.approx(LETTER_LOGPROB[0])
    assert score_candidate("eeee") == pytest.approx(2.5417594613807832)


def test_case_folding():
    assert score_candidate("HELLO") == score_candidate("hello")
    assert score_candidate("Z") == LETTER_WEIGHTS["z"]


def test_non_letters_count_toward_divisor():
    assert score_candidate("e1") == pytest.approx(LETTER_WEIGHTS["e"] / 2)
    assert score_candidate("e   ") == pytest.approx(LETTER_WEIGHTS["e"] / 4)


def test_hello_world():
    text = "Hello, World!"
    expected = sum(LETTER_WEIGHTS[c] for c in "HelloWorld") / len(text)
    assert score_candidate(text) == pytest.approx(expected)


def test_english_beats_rare_letters():
    assert score_candidate("the quick brown") > score_candidate("xqzjxqzjxqzjxqz")


def test_rare_letters_score_negative():
    assert score_candidate("qxzj") < 0.0


def test_idempotent():
    text = "Some Reasonably English Sentence."
    assert score_candidate(text) == score_candidate(text)


def test_non_ascii_letters_ignored():
    assert score_candidate("é") == 0.0


def test_table_has_every_letter():
    assert len(LETTER_LOGPROB) == 26
    assert all(math.isfinite(v) for v in LETTER_LOGPROB)


def test_weights_cover_both_cases_only():
    assert len(LETTER_WEIGHTS) == 52
    assert LETTER_WEIGHTS["Q"] == LETTER_WEIGHTS["q"] == LETTER_LOGPROB[16]
    assert "1" not in LETTER_WEIGHTS
