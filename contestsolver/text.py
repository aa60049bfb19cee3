"""Contest problems about words, names and short expressions."""

from __future__ import annotations

import string
from collections.abc import Iterable

IGNORE_HIM = "IGNORE HIM!"
CHAT_WITH_HER = "CHAT WITH HER!"

ABBREVIATION_LIMIT = 10

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _upper(text: str) -> str:
    return text.translate(_ASCII_UPPER)


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Final value of x after running statements such as ``X++`` or ``--X``."""
    value = 0
    for statement in statements:
        if "++" in statement:
            value += 1
        elif "--" in statement:
            value -= 1
    return value


def gender_by_name(name: str) -> str:
    """Verdict on a user name: odd count of distinct letters means a boy."""
    return IGNORE_HIM if len(set(name)) % 2 else CHAT_WITH_HER


def sum_sorted(expression: str) -> str:
    """Rewrite a sum of single digits such as ``3+1+2`` with the terms ascending."""
    characters = sorted(expression)
    return "+".join(characters[len(characters) // 2 :])


def is_pangram(n: int, text: str) -> bool:
    """Whether text of declared length n holds every Latin letter, any case."""
    if n < 26:
        return False
    return set(string.ascii_lowercase) <= set(_lower(text))


def compare_ignore_case(a: str, b: str) -> int:
    """Compare two strings ignoring letter case: -1, 0 or 1."""
    left, right = _lower(a), _lower(b)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def is_reverse(s: str, t: str) -> bool:
    """Whether t is s spelt backwards."""
    return s[::-1] == t


def xor_digits(a: str, b: str) -> str:
    """Digit-wise comparison of two binary strings: 1 where they differ."""
    if len(a) != len(b):
        raise ValueError("numbers must have the same length")
    return "".join("0" if x == y else "1" for x, y in zip(a, b))


def abbreviate(word: str) -> str:
    """Shorten words longer than ten letters to first letter, count, last letter."""
    if len(word) <= ABBREVIATION_LIMIT:
        return word
    return f"{word[0]}{len(word) - 2}{word[-1]}"


def fix_case(word: str) -> str:
    """Make the word all upper case if most letters are upper, else all lower."""
    upper = sum(1 for character in word if "A" <= character <= "Z")
    others = len(word) - upper
    return _upper(word) if upper > others else _lower(word)


def capitalize_first(word: str) -> str:
    """Upper-case the first letter and leave the rest untouched."""
    return _upper(word[:1]) + word[1:]