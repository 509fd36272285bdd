"""Reading and validating the numbers handed to the programs."""

from __future__ import annotations

import re
from collections.abc import Sequence

_INT_BITS = 32
_LEADING = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_ALLOWED = frozenset("0123456789+-")


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct 32-bit integers."""


def _wrap_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def c_atoi(text: str) -> int:
    """Read a leading integer the way C's atoi does, wrapping to 32 bits.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit; no digits gives 0.
    """
    match = _LEADING.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def split_words(text: str, separator: str = " ") -> list[str]:
    """Split ``text`` on ``separator``, dropping empty words."""
    return [word for word in text.split(separator) if word]


def check_characters(tokens: Sequence[str]) -> None:
    """Reject any token holding a character other than digits and signs."""
    for token in tokens:
        if not set(token) <= _ALLOWED:
            raise InputError(f"not a number: {token!r}")


def _canonical_form_matches(token: str) -> bool:
    rendered = str(c_atoi(token))
    arg = token
    skip = 0
    if arg.startswith("-"):
        skip = 1
        if rendered.startswith("-"):
            arg = arg[1:]
    while arg.startswith("0") and len(arg) > 1:
        arg = arg[1:]
    return arg == rendered[skip:]


def check_int_range(tokens: Sequence[str]) -> None:
    """Reject tokens that do not read back as the same 32-bit integer.

    This also rejects an explicit ``+`` sign, ``-0``, empty tokens and
    anything with trailing characters.
    """
    for token in tokens:
        if not _canonical_form_matches(token):
            raise InputError(f"not a 32-bit integer: {token!r}")


def check_duplicates(tokens: Sequence[str]) -> None:
    """Reject tokens that read as the same integer more than once."""
    seen: set[int] = set()
    for token in tokens:
        value = c_atoi(token)
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)


def validate(tokens: Sequence[str]) -> None:
    """Run every check on ``tokens``, raising InputError on the first failure."""
    check_characters(tokens)
    check_int_range(tokens)
    check_duplicates(tokens)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments (without the program name) into numbers.

    A single argument is split on spaces; several arguments are taken one
    number each. No arguments give an empty list.
    """
    if not args:
        return []
    tokens = split_words(args[0], " ") if len(args) == 1 else list(args)
    validate(tokens)
    return [c_atoi(token) for token in tokens]