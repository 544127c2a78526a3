"""Number parsing and a small linear congruential random generator."""

from __future__ import annotations

from typing import Optional, Tuple

from egoskit.ctype import isalnum, isdigit, islower, isspace

_SPACE_CHARS = "".join(chr(code) for code in range(256) if isspace(code))


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _skip_space(text: str, pos: int) -> int:
    rest = text[pos:]
    return pos + len(rest) - len(rest.lstrip(_SPACE_CHARS))


def _digit_value(ch: str) -> Optional[int]:
    code = ord(ch)
    if code > 255 or not isalnum(code):
        return None
    if isdigit(code):
        return code - ord("0")
    if islower(code):
        return code - ord("a") + 10
    return code - ord("A") + 10


def strtol(text: str, base: int = 10) -> Tuple[int, int]:
    """Parse a signed integer in ``base``.

    Leading white space is skipped, then an optional sign, then white space
    again, then digits valid for the base.  Returns the value (as a 64-bit
    long) and the index just past what was consumed.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")
    pos = _skip_space(text, 0)
    sign = 1
    if text[pos:pos + 1] == "+":
        pos += 1
    elif text[pos:pos + 1] == "-":
        sign = -1
        pos += 1
    pos = _skip_space(text, pos)
    value = 0
    for ch in text[pos:]:
        digit = _digit_value(ch)
        if digit is None or digit >= base:
            break
        value = value * base + digit
        pos += 1
    return _to_signed(sign * value, 64), pos


def strtoul(text: str, base: int = 10) -> Tuple[int, int]:
    """Like :func:`strtol`, with the value taken as an unsigned 64-bit long."""
    value, end = strtol(text, base)
    return value & ((1 << 64) - 1), end


class Random:
    """Pseudo-random numbers from 0 to 32767 by a linear congruential rule."""

    def __init__(self, seed: int = 0) -> None:
        self._state = 0
        self.srand(seed)

    def srand(self, seed: int) -> None:
        """Restart the sequence from ``seed``."""
        self._state = _to_signed(seed & 0xFFFFFFFF, 32)

    def rand(self) -> int:
        """Return the next number of the sequence."""
        self._state = _to_signed(self._state * 214013 + 2531011, 32)
        return (self._state >> 16) & 0x7FFF