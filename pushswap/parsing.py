"""Parsing of the integer arguments given to the sorter and the checker."""

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_SORTER_NUMBER = re.compile(r"[+-]?[0-9]*")
_CHECKER_NUMBER = re.compile(r"-?[0-9]*")


class InputError(ValueError):
    """Raised when the program arguments are not a valid list of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(text: str) -> int:
    """Read a 32-bit signed integer from the start of ``text``.

    Leading whitespace and one sign are skipped and reading stops at the
    first non-digit.  A value outside the 32-bit range raises InputError.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    return value


def parse_sorter_arguments(args: Iterable[str]) -> list[int]:
    """Parse the sorter's arguments, top of stack a first.

    Each argument must be an optional ``+`` or ``-`` followed only by digits.
    Duplicates are not checked here.
    """
    values = []
    for arg in args:
        value = parse_int(arg)
        if not _SORTER_NUMBER.fullmatch(arg):
            raise InputError()
        values.append(value)
    return values


def parse_checker_arguments(args: Iterable[str]) -> list[int]:
    """Parse the checker's arguments, top of stack a first.

    Each argument must be non-empty, an optional ``-`` followed only by
    digits, and no value may appear twice.
    """
    values = []
    for arg in args:
        value = parse_int(arg)
        if not arg or not _CHECKER_NUMBER.fullmatch(arg):
            raise InputError()
        values.append(value)
    if len(set(values)) != len(values):
        raise InputError()
    return values