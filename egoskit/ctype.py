"""Character classification over the range EOF (-1) to 255."""

from __future__ import annotations

import enum


class CType(enum.IntFlag):
    """Classification bits held for each character."""

    PUNCT = 1 << 0
    LOWER = 1 << 1
    UPPER = 1 << 2
    DIGIT = 1 << 3
    XDIGIT = 1 << 4
    BLANK = 1 << 5
    SPACE = 1 << 6
    CNTRL = 1 << 7
    PRINTABLE_SPACE = 1 << 8


EOF = -1
_NONE = CType(0)


def _classify(code: int) -> CType:
    if code == EOF or 0 <= code <= 8 or 14 <= code <= 31 or code == 127:
        return CType.CNTRL
    if code == 9:
        return CType.CNTRL | CType.SPACE | CType.BLANK
    if code in (10, 11, 12):
        return CType.CNTRL | CType.SPACE
    if code == 13:
        return CType.SPACE
    if code == 32:
        return CType.SPACE | CType.BLANK | CType.PRINTABLE_SPACE
    if 48 <= code <= 57:
        return CType.DIGIT | CType.XDIGIT
    if 65 <= code <= 90:
        return CType.UPPER | (CType.XDIGIT if code <= 70 else _NONE)
    if 97 <= code <= 122:
        return CType.LOWER | (CType.XDIGIT if code <= 102 else _NONE)
    if 33 <= code <= 126:
        return CType.PUNCT
    return _NONE


_TABLE: tuple[CType, ...] = tuple(_classify(code) for code in range(EOF, 256))


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    if not EOF <= c <= 255:
        raise ValueError(f"character code {c} out of range")
    return c


def ctype_flags(c: int | str) -> CType:
    """Return the classification bits of ``c`` (a code from -1 to 255 or a character)."""
    return _TABLE[_code(c) + 1]


def _has(c: int | str, mask: CType) -> bool:
    return bool(ctype_flags(c) & mask)


def isascii(c: int | str) -> bool:
    code = _code(c)
    return 0 <= code < 128


def islower(c: int | str) -> bool:
    return _has(c, CType.LOWER)


def isupper(c: int | str) -> bool:
    return _has(c, CType.UPPER)


def isalpha(c: int | str) -> bool:
    return _has(c, CType.LOWER | CType.UPPER)


def isdigit(c: int | str) -> bool:
    return _has(c, CType.DIGIT)


def isxdigit(c: int | str) -> bool:
    return _has(c, CType.XDIGIT)


def isalnum(c: int | str) -> bool:
    return _has(c, CType.LOWER | CType.UPPER | CType.DIGIT)


def isspace(c: int | str) -> bool:
    return _has(c, CType.SPACE)


def isblank(c: int | str) -> bool:
    return _has(c, CType.BLANK)


def isgraph(c: int | str) -> bool:
    return _has(c, CType.PUNCT | CType.DIGIT | CType.LOWER | CType.UPPER)


def isprint(c: int | str) -> bool:
    return _has(
        c,
        CType.PUNCT | CType.DIGIT | CType.LOWER | CType.UPPER | CType.PRINTABLE_SPACE,
    )


def ispunct(c: int | str) -> bool:
    return _has(c, CType.PUNCT)


def iscntrl(c: int | str) -> bool:
    return _has(c, CType.CNTRL)


def toascii(c: int | str) -> int:
    """Return ``c`` with all but the low seven bits cleared."""
    return _code(c) & 0x7F


def tolower(c: int | str) -> int:
    """Return the lower-case code for an upper-case letter, else ``c`` unchanged."""
    code = _code(c)
    return code - ord("A") + ord("a") if isupper(code) else code


def toupper(c: int | str) -> int:
    """Return the upper-case code for a lower-case letter, else ``c`` unchanged."""
    code = _code(c)
    return code - ord("a") + ord("A") if islower(code) else code