"""String length, search, comparison and copying with C-string semantics.

Strings are ordinary Python ``str`` objects. As with C strings, a string
ends at its first NUL character: anything after it is ignored. Search
functions return an index into the string, or None when nothing matches.
The index of the terminator is the string's length.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]


def _cstr(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    return s.split("\0", 1)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_count(n: int, what: str) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{what} must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def strlen(s: Optional[str]) -> int:
    """Length of ``s`` up to its terminator; None counts as empty."""
    if s is None:
        return 0
    return len(_cstr(s))


def strchr(s: Optional[str], c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL gives the index of the terminator.
    """
    if s is None:
        return None
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL gives the index of the terminator.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _difference(a: str, b: str, limit: Optional[int]) -> int:
    a = _cstr(a) + "\0"
    b = _cstr(b) + "\0"
    last = min(len(a), len(b)) - 1
    if limit is not None:
        last = min(last, limit - 1)
    i = 0
    while i < last and a[i] == b[i]:
        i += 1
    return ord(a[i]) - ord(b[i])


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the sign of the result orders them.

    The result is the difference of the first pair of unequal characters,
    the terminator counting as 0.
    """
    return _difference(s1, s2, None)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    _check_count(n, "count")
    if n == 0:
        return 0
    return _difference(s1, s2, n)


def strdup(s: str) -> str:
    """A copy of ``s`` up to its terminator."""
    return _cstr(s)


def strndup(s: str, n: int) -> str:
    """A copy of at most the first ``n`` characters of ``s``."""
    _check_count(n, "length")
    return _cstr(s)[:n]


def strnstr(haystack: str, needle: Optional[str], n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly in the first ``n`` characters.

    An empty needle matches at index 0; no match gives None.
    """
    _check_count(n, "count")
    if not needle or not _cstr(needle):
        return 0
    index = _cstr(haystack)[:n].find(_cstr(needle))
    return None if index < 0 else index


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives the empty string; None gives None.
    """
    if s is None:
        return None
    _check_count(start, "start")
    _check_count(length, "length")
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start:start + length]