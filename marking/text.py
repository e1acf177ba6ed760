"""Text normalization and word counting for submitted answers."""

import re

_WHITESPACE = re.compile(r"\s+")


def clamp_str(value, max_len: int) -> str:
    """Coerce to string (None/non-str -> "") and cut to max_len characters."""
    if not isinstance(value, str):
        return ""
    return value[:max_len]


def normalize_text(s) -> str:
    """Trim ends and lower-case. Non-strings normalize to empty."""
    if not s or not isinstance(s, str):
        return ""
    return s.strip().lower()


def word_count(text) -> int:
    """
    Count whitespace-delimited tokens.

    Leading/trailing whitespace is ignored, runs of whitespace count as a
    single separator. Missing or non-string input counts as zero words.
    """
    if not isinstance(text, str):
        return 0
    t = text.strip()
    if not t:
        return 0
    return len([tok for tok in _WHITESPACE.split(t) if tok])
