"""Reading the numbers of a puzzle from command-line arguments.

Arguments may hold several numbers separated by spaces. Anything that is
not a well-formed list of distinct 32-bit integers is rejected with
:class:`InputError`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from itertools import takewhile

INT_MIN = -2147483648
INT_MAX = 2147483647

# Longest run of significant digits accepted before the value is even parsed.
_MAX_SIGNIFICANT_DIGITS = 11

_DIGITS = "0123456789"
_SIGNS = "+-"

# A sequence of spaces and numbers, each number a digit with an optional sign.
_WELL_FORMED = re.compile(r"(?: |[+-]?[0-9])*")
# A sign that does not follow a space (the first character is not looked at).
_GLUED_SIGN = re.compile(r"[^ ][+-]")


class InputError(ValueError):
    """The arguments do not describe a valid puzzle."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty pieces."""
    return [word for word in text.split(" ") if word]


def atol(text: str) -> int:
    """Read an optional sign and the digits that follow it; stop at anything else."""
    sign = 1
    if text[:1] in _SIGNS and text:
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, text))
    return sign * int(digits) if digits else 0


def count_numbers(args: Iterable[str]) -> int:
    """Count the space-separated words in ``args``.

    An empty argument or one made only of spaces raises :class:`InputError`.
    """
    count = 0
    for arg in args:
        if not arg.strip(" "):
            raise InputError()
        count += len(split_words(arg))
    return count


def check_digits(args: Iterable[str]) -> bool:
    """True if every argument holds only spaces and optionally signed digits."""
    return all(_WELL_FORMED.fullmatch(arg) for arg in args)


def check_after_sign(args: Iterable[str]) -> bool:
    """True if every sign past the first character follows a space."""
    return not any(_GLUED_SIGN.search(arg) for arg in args)


def _significant_length(word: str) -> int:
    if word[:1] in _SIGNS and word:
        word = word[1:]
    return len(word.lstrip("0"))


def check_overflow(args: Iterable[str]) -> bool:
    """True if no word has more than eleven digits once sign and leading zeros go."""
    return all(
        _significant_length(word) <= _MAX_SIGNIFICANT_DIGITS
        for arg in args
        for word in split_words(arg)
    )


def check_int_range(numbers: Iterable[int]) -> bool:
    """True if every number fits in a signed 32-bit integer."""
    return all(INT_MIN <= number <= INT_MAX for number in numbers)


def check_duplicates(numbers: Sequence[int]) -> bool:
    """True if no number appears twice."""
    return len(set(numbers)) == len(numbers)


def is_sorted(numbers: Sequence[int]) -> bool:
    """True if ``numbers`` is in ascending order."""
    return list(numbers) == sorted(numbers)


def parse_numbers(args: Sequence[str]) -> list[int]:
    """Turn the arguments into the list of numbers for stack ``a``.

    Raises :class:`InputError` when any argument is empty or blank, holds
    something other than signed integers, a number is too long or outside
    the 32-bit range, or a number is repeated.
    """
    args = list(args)
    count_numbers(args)
    numbers = [atol(word) for arg in args for word in split_words(arg)]
    if not (check_digits(args) and check_after_sign(args) and check_overflow(args)):
        raise InputError()
    if not check_duplicates(numbers):
        raise InputError()
    if not check_int_range(numbers):
        raise InputError()
    return numbers