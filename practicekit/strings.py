"""Exercises on strings."""

from __future__ import annotations

__all__ = [
    "InvalidRomanNumeral",
    "ALPHABET",
    "KEY",
    "str_str",
    "length_of_last_word",
    "longest_common_prefix",
    "roman_to_int",
    "substitute",
]

ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
KEY = "QWERTYUIOPLKJHGFDSAZXCVBNMqwertyuioplkjhgfdsazxcvbnm"
_CIPHER = str.maketrans(ALPHABET, KEY)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ROMAN_PAIRS = {"CD": 400, "CM": 900, "XL": 40, "XC": 90, "IV": 4, "IX": 9}
_ROMAN_CHARS = frozenset("IVXLCDMivxlcdm")


class InvalidRomanNumeral(ValueError):
    """Raised when a Roman numeral holds a character that is not a numeral."""


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    if not needle:
        return -1
    return haystack.find(needle)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word of ``s``."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def longest_common_prefix(strs: list[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        return ""
    prefix = strs[0]
    for text in strs[1:]:
        while not text.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral, in either case."""
    for ch in s:
        if ch not in _ROMAN_CHARS:
            raise InvalidRomanNumeral(f"invalid character {ch!r} in {s!r}")
    text = s.upper()
    total = 0
    index = 0
    while index < len(text):
        pair = text[index:index + 2]
        if pair in _ROMAN_PAIRS:
            total += _ROMAN_PAIRS[pair]
            index += 2
        else:
            total += _ROMAN_VALUES[text[index]]
            index += 1
    return total


def substitute(message: str) -> str:
    """Encrypt ``message`` with the fixed letter-substitution key."""
    return message.translate(_CIPHER)