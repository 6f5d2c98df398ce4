"""String puzzles: case folding, vowels, subsequences and abbreviations."""

from __future__ import annotations

import string

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_VOWELS = frozenset("aeiouyAEIOUY")
_LUCKY_PATTERN = "abcd"
_GREETING = "hello"
_ABBREVIATE_OVER = 10


def _ascii_lower(text: str) -> str:
    return text.translate(_TO_LOWER)


def _ascii_upper(text: str) -> str:
    return text.translate(_TO_UPPER)


def lucky_string(n: int) -> str:
    """Return the lexicographically smallest lucky string of length ``n``.

    Equal letters stand a multiple of four apart, so the string repeats
    ``abcd``.
    """
    if n < 0:
        raise ValueError("length must not be negative")
    repeats = -(-n // len(_LUCKY_PATTERN))
    return (_LUCKY_PATTERN * repeats)[:n]


def compare_ignore_case(first: str, second: str) -> int:
    """Compare two strings ignoring ASCII letter case; return -1, 0 or 1."""
    a = _ascii_lower(first)
    b = _ascii_lower(second)
    return (a > b) - (a < b)


def string_task(s: str) -> str:
    """Drop vowels, put a dot before each other character and lower its case."""
    return "".join("." + _ascii_lower(ch) for ch in s if ch not in _VOWELS)


def says_hello(s: str) -> bool:
    """Tell whether ``hello`` can be read from ``s`` by deleting characters."""
    remaining = iter(s)
    return all(letter in remaining for letter in _GREETING)


def fix_word_case(word: str) -> str:
    """Put the word wholly in the case most of its letters already have.

    Ties go to lower case.
    """
    upper = sum(1 for ch in word if ch in string.ascii_uppercase)
    lower = sum(1 for ch in word if ch in string.ascii_lowercase)
    return _ascii_upper(word) if upper > lower else _ascii_lower(word)


def abbreviate(word: str) -> str:
    """Shorten words longer than ten characters to first, count, last."""
    if len(word) > _ABBREVIATE_OVER:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word