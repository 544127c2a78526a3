"""String and memory routines with C semantics.

Strings may be given as ``str`` (Latin-1 characters) or bytes.  String
functions stop at the first NUL character, as C strings do; memory
functions look at exactly the number of bytes asked for.  Positions are
returned as indexes, and ``None`` stands for "not found".
"""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Optional, Union

StrLike = Union[str, bytes, bytearray, memoryview]

_DECIMAL = re.compile(rb"[ \t]*([+-]?)([0-9]*)")


def _bytes(s: StrLike) -> bytes:
    if isinstance(s, str):
        return s.encode("latin-1")
    return bytes(s)


def _cstr(s: StrLike) -> bytes:
    data = _bytes(s)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _char(c: Union[int, str]) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _check_span(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of {len(buf)} bytes")


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def memchr(data: StrLike, c: Union[int, str], n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``."""
    buf = _bytes(data)
    _check_span(n, buf)
    target = _char(c)
    if not 0 <= target <= 255:
        return None
    found = buf.find(target, 0, n)
    return None if found < 0 else found


def memcmp(a: StrLike, b: StrLike, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    ua, ub = _bytes(a), _bytes(b)
    _check_span(n, ua, ub)
    for x, y in zip(ua[:n], ub[:n]):
        if x != y:
            return x - y
    return 0


def strcmp(a: StrLike, b: StrLike) -> int:
    """Compare two strings.

    Returns the difference of the first unequal pair of bytes, 0 when the
    strings are equal, and -1 or 1 when one is a proper prefix of the other
    (-1 when ``a`` is the shorter).
    """
    ua, ub = _cstr(a), _cstr(b)
    for x, y in zip(ua, ub):
        if x != y:
            return x - y
    if len(ua) == len(ub):
        return 0
    return -1 if len(ua) < len(ub) else 1


def strncmp(a: StrLike, b: StrLike, n: int) -> int:
    """Compare at most ``n`` characters, returning -1, 0 or 1.

    A string that ends before the other compares greater.
    """
    ua, ub = _cstr(a), _cstr(b)
    for x, y in zip_longest(ua[:n], ub[:n], fillvalue=0):
        if x == 0:
            return 1
        if y == 0:
            return -1
        if x != y:
            return -1 if x < y else 1
    return 0


def strnlen(s: StrLike, maxlen: int) -> int:
    """Return the length of ``s``, but at most ``maxlen``."""
    return min(len(_cstr(s)), maxlen)


def strstr(haystack: StrLike, needle: StrLike) -> Optional[int]:
    """Return the index of the first occurrence of ``needle`` in ``haystack``.

    An empty haystack never matches, not even an empty needle.
    """
    hay, pattern = _cstr(haystack), _cstr(needle)
    if not hay:
        return None
    found = hay.find(pattern)
    return None if found < 0 else found


def index(s: StrLike, c: Union[int, str]) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``; for NUL, the string's length."""
    data = _cstr(s)
    target = _char(c)
    if target == 0:
        return len(data)
    if not 0 <= target <= 255:
        return None
    found = data.find(target)
    return None if found < 0 else found


def rindex(s: StrLike, c: Union[int, str]) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``; for NUL, the string's length."""
    data = _cstr(s)
    target = _char(c)
    if target == 0:
        return len(data)
    if not 0 <= target <= 255:
        return None
    found = data.rfind(target)
    return None if found < 0 else found


def _parse_decimal(s: StrLike) -> int:
    match = _DECIMAL.match(_cstr(s))
    sign, digits = match.group(1), match.group(2)
    total = int(digits) if digits else 0
    return -total if sign == b"-" else total


def atoi(s: StrLike) -> int:
    """Parse a decimal integer after blanks and an optional sign, as a 32-bit int."""
    return _to_signed(_parse_decimal(s), 32)


def atol(s: StrLike) -> int:
    """Parse a decimal integer after blanks and an optional sign, as a 64-bit long."""
    return _to_signed(_parse_decimal(s), 64)