"""Writing characters, strings and numbers to a file descriptor.

The destination is either an integer file descriptor or a binary stream
with a ``write`` method. Every function returns the number of bytes written.
"""

from __future__ import annotations

import os
from typing import BinaryIO, Optional, Union

Sink = Union[int, BinaryIO]

_DECIMAL = "0123456789"
_HEX = "0123456789abcdef"


def _write(data: bytes, fd: Sink) -> int:
    if isinstance(fd, bool):
        raise TypeError("expected a file descriptor or a binary stream, got bool")
    if isinstance(fd, int):
        view = memoryview(data)
        while view:
            written = os.write(fd, view)
            view = view[written:]
        return len(data)
    fd.write(data)
    return len(data)


def _digits(n: int, base: str) -> str:
    radix = len(base)
    out = []
    while True:
        n, rem = divmod(n, radix)
        out.append(base[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def put_char(c: Union[str, int], fd: Sink = 1) -> int:
    """Write one character; an integer is written as its low byte."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer, got bool")
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return _write(c.encode("utf-8"), fd)
    if isinstance(c, int):
        return _write(bytes((c & 0xFF,)), fd)
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def put_str(s: Optional[str], fd: Sink = 1) -> int:
    """Write a string; None is written as ``(null)``."""
    if s is None:
        s = "(null)"
    return _write(s.encode("utf-8"), fd)


def put_endl(s: Optional[str], fd: Sink = 1) -> int:
    """Write a string followed by a newline."""
    return put_str(s, fd) + put_char("\n", fd)


def put_nbr(n: int, fd: Sink = 1) -> int:
    """Write a signed integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    text = ("-" if n < 0 else "") + _digits(abs(n), _DECIMAL)
    return _write(text.encode("ascii"), fd)


def put_nbr_unsigned(n: int, fd: Sink = 1) -> int:
    """Write an integer as a 32-bit unsigned decimal number."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return _write(_digits(n & 0xFFFFFFFF, _DECIMAL).encode("ascii"), fd)


def put_nbr_base(n: int, base: str, fd: Sink = 1) -> int:
    """Write an integer as a 64-bit unsigned number in the given digit set."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if len(base) < 2:
        raise ValueError("a base needs at least two digits")
    text = _digits(n & 0xFFFFFFFFFFFFFFFF, base)
    return _write(text.encode("utf-8"), fd)


def put_ptr(address: Optional[int], fd: Sink = 1) -> int:
    """Write an address as ``0x`` and lower-case hex; a null address as ``(nil)``."""
    if not address:
        return put_str("(nil)", fd)
    return put_str("0x", fd) + put_nbr_base(address, _HEX, fd)