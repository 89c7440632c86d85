"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The predicates return booleans. The case converters give back the same
kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _like(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space included (32 to 126)."""
    return 32 <= _code(c) <= 126


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        return _like(c, code + 32)
    return c


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        return _like(c, code - 32)
    return c