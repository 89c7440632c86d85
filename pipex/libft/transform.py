"""Building new strings: splitting, joining, trimming, mapping and line input.

Strings follow C-string rules: a string ends at its first NUL character,
and anything after it is ignored.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, MutableSequence, Optional, TextIO, Tuple, Union

CharLike = Union[str, int]


def _cstr(s: str) -> str:
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


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an integer, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def split(s: Optional[str], c: CharLike) -> Optional[list[str]]:
    """Split ``s`` on the separator ``c``, dropping empty pieces.

    None gives None.
    """
    if s is None:
        return None
    sep = _char(c)
    text = _cstr(s)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def _is_terminator(item: Any) -> bool:
    return item == 0 or item == "\0"


def striteri(s: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` for each item of ``s`` before its terminator.

    ``s`` is a mutable sequence such as a list of characters or a
    ``bytearray``. When ``f`` returns something other than None, the item
    is replaced with it in place.
    """
    for index, item in enumerate(list(s)):
        if _is_terminator(item):
            break
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(_cstr(s)))


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """``s1`` followed by ``s2``; None if either is None."""
    if s1 is None or s2 is None:
        return None
    return _cstr(s1) + _cstr(s2)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, so truncation shows as a length of ``size`` or more.
    """
    _check_size(size)
    text = _cstr(src)
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create: the
    length of ``dst`` (capped at ``size``) plus the length of ``src``.
    """
    _check_size(size)
    head = _cstr(dst)
    tail = _cstr(src)
    if size == 0:
        return head, len(tail)
    used = min(len(head), size)
    if used < size:
        head = head + tail[:max(size - 1 - used, 0)]
    return head, used + len(tail)


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``s`` with every character of ``charset`` removed from both ends.

    None for either argument gives None.
    """
    if s is None or charset is None:
        return None
    chars = _cstr(charset)
    text = _cstr(s)
    if not chars:
        return text
    return text.strip(chars)


def read_line(stream: Optional[TextIO] = None) -> Optional[str]:
    """Read one line, newline included, from ``stream`` (standard input by default).

    A last line without a newline is returned as it is; None at end of input.
    """
    source = sys.stdin if stream is None else stream
    line = source.readline()
    if isinstance(line, (bytes, bytearray)):
        line = bytes(line).decode("utf-8", errors="replace")
    if not line:
        return None
    return line


def remove_newline(line: str) -> str:
    """``line`` without one trailing newline, if it has one."""
    text = _cstr(line)
    if text.endswith("\n"):
        return text[:-1]
    return text