"""Value parsers shared by all property stores."""

from __future__ import annotations

import re

from netnaming.core.errors import InvalidValueError

_TRUE_VALUES = frozenset({"1", "yes", "y", "true", "t", "on"})
_FALSE_VALUES = frozenset({"0", "no", "n", "false", "f", "off"})

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1
UINT_MAX = (1 << 32) - 1

_DIGITS_RE = {
    8: re.compile(r"[0-7]+"),
    10: re.compile(r"[0-9]+"),
    16: re.compile(r"[0-9a-fA-F]+"),
}


def parse_boolean(value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise InvalidValueError(f"'{value}' is not a boolean")


def _parse_c_integer(value: str) -> int:
    """Parse like strtol() with base 0: 0x for hex, a leading 0 for octal.

    Leading whitespace is skipped, trailing characters of any kind are rejected.
    """
    text = value.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]

    if text[:2].lower() == "0x":
        digits, base = text[2:], 16
    elif len(text) > 1 and text[0] == "0":
        digits, base = text[1:], 8
    else:
        digits, base = text, 10

    if not _DIGITS_RE[base].fullmatch(digits):
        raise InvalidValueError(f"'{value}' is not an integer")
    return sign * int(digits, base)


def parse_int(value: str) -> int:
    number = _parse_c_integer(value)
    if number < INT_MIN or number > INT_MAX:
        raise InvalidValueError(f"'{value}' is out of range for an int")
    return number


def parse_unsigned(value: str) -> int:
    if value.lstrip().startswith("-"):
        raise InvalidValueError(f"'{value}' is not an unsigned integer")
    number = _parse_c_integer(value)
    if number > UINT_MAX:
        raise InvalidValueError(f"'{value}' is out of range for an unsigned int")
    return number
