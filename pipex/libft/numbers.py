"""Lenient number parsing and integer formatting."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    """Reduce to a signed two's-complement integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse_integer(text: str, bits: int) -> int:
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = _wrap(value * 10 + (ord(ch) - 48), bits)
    return _wrap(value * sign, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping as a 32-bit int.

    Leading whitespace and one optional sign are accepted; parsing stops
    at the first non-digit. Text without digits gives 0.
    """
    return _parse_integer(text, 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping as a 64-bit long."""
    return _parse_integer(text, 64)


def atof(text: str) -> float:
    """Parse a decimal number with an optional fractional part.

    Leading whitespace is skipped and any run of signs is accepted, each
    minus flipping the sign. Every character up to the point, and every
    character after it, is taken as a digit without further checking.
    """
    text = text.split("\0", 1)[0]
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    while rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -sign
        rest = rest[1:]
    whole, _, fraction = rest.partition(".")
    int_part = 0.0
    for ch in whole:
        int_part = int_part * 10 + (ord(ch) - 48)
    frac_part = 0.0
    scale = 1.0
    for ch in fraction:
        scale /= 10
        frac_part += (ord(ch) - 48) * scale
    return (int_part + frac_part) * sign


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading minus when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)