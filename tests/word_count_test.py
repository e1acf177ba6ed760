"""Word counting and text helpers: whitespace handling and non-string input."""

import pytest

from marking.text import clamp_str, normalize_text, word_count


def test_blank_text_has_no_words():
    assert word_count("   ") == 0
    assert word_count("") == 0


def test_runs_of_whitespace_are_one_separator():
    assert word_count("a  b   c") == 3
    assert word_count("a\nb\tc") == 3
    assert word_count("\n\t  one two  \n") == 2


@pytest.mark.parametrize("value", [None, 42, 3.5, ["a", "b"], {"text": "a b"}])
def test_non_string_counts_as_empty(value):
    assert word_count(value) == 0


def test_punctuation_stays_attached_to_words():
    assert word_count("Role: tutor. Task: explain!") == 4


def test_normalize_text():
    assert normalize_text("  Act As A Tutor  ") == "act as a tutor"
    assert normalize_text("") == ""
    assert normalize_text(None) == ""


def test_clamp_str():
    assert clamp_str("abcdef", 3) == "abc"
    assert clamp_str("ab", 3) == "ab"
    assert clamp_str(None, 3) == ""
    assert clamp_str(123, 3) == ""
