"""Algorithms over strings."""

from __future__ import annotations

import string
from itertools import zip_longest

_BINARY_DIGITS = frozenset("01")


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers written as strings and return the sum as a string."""
    if not _BINARY_DIGITS.issuperset(a) or not _BINARY_DIGITS.issuperset(b):
        raise ValueError("operands must contain only the digits 0 and 1")
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, bit = divmod(int(x) + int(y) + carry, 2)
        digits.append(str(bit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def column_title(column_number: int) -> str:
    """Return the spreadsheet column title for a 1-based column number."""
    letters: list[str] = []
    n = column_number
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters.append(string.ascii_uppercase[rem])
    return "".join(reversed(letters))


def column_number(title: str) -> int:
    """Return the 1-based column number for a spreadsheet column title."""
    result = 0
    for ch in title:
        index = string.ascii_uppercase.find(ch)
        if index < 0 or len(ch) != 1:
            raise ValueError(f"invalid column letter: {ch!r}")
        result = result * 26 + index + 1
    return result