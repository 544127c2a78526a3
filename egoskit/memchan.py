"""Growable text channel with a small printf-style formatter.

The formatter understands ``%c``, ``%d``, ``%i``, ``%s``, ``%u``, ``%x`` and
``%X`` with no flags, widths or precisions.  Any other character after ``%``
is written as it stands (so ``%%`` gives ``%``), and a ``%`` at the very end
of the format is dropped.  ``%d``/``%i``/``%u``/``%x`` take 32-bit values,
``%X`` takes a 64-bit unsigned value.
"""

from __future__ import annotations

import io
import operator
from typing import Any, Iterator, Sequence, Tuple, Union

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _unsigned_text(value: int, base: int, caps: bool) -> str:
    if not 2 <= base <= 16:
        return "<bad base>"
    if value == 0:
        return "0"
    chars = _UPPER_DIGITS if caps else _LOWER_DIGITS
    digits = []
    while value:
        value, rem = divmod(value, base)
        digits.append(chars[rem])
    return "".join(reversed(digits))


def _signed_text(value: int, base: int, caps: bool) -> str:
    if value < 0:
        return "-" + _unsigned_text(-value, base, caps)
    return _unsigned_text(value, base, caps)


def _as_char(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


class MemChannel:
    """An in-memory text buffer that is appended to."""

    def __init__(self) -> None:
        self._buf = io.StringIO()
        self._size = 0

    def put(self, data: str) -> None:
        """Append ``data`` as it stands."""
        self._buf.write(data)
        self._size += len(data)

    def putc(self, c: Union[int, str]) -> None:
        """Append one character, given as a character or a byte value."""
        self.put(_as_char(c))

    def puts(self, s: str) -> None:
        """Append ``s`` up to (not including) its first NUL character."""
        self.put(s.split("\0", 1)[0])

    def printf(self, fmt: str, *args: Any) -> None:
        """Append ``fmt`` with its conversions filled in from ``args``."""
        pending: Iterator[Any] = iter(args)

        def next_arg(conv: str) -> Any:
            try:
                return next(pending)
            except StopIteration:
                raise ValueError(f"missing argument for %{conv}") from None

        def next_int(conv: str) -> int:
            arg = next_arg(conv)
            try:
                return operator.index(arg)
            except TypeError:
                raise TypeError(f"%{conv} needs an integer, got {arg!r}") from None

        chars = iter(fmt.split("\0", 1)[0])
        for ch in chars:
            if ch != "%":
                self.putc(ch)
                continue
            conv = next(chars, None)
            if conv is None:
                break
            if conv == "c":
                self.putc(next_arg(conv))
            elif conv in ("d", "i"):
                self.put(_signed_text(_wrap(next_int(conv), 32, True), 10, False))
            elif conv == "s":
                text = next_arg(conv)
                if not isinstance(text, str):
                    raise TypeError(f"%s needs a string, got {text!r}")
                self.puts(text)
            elif conv == "u":
                self.put(_unsigned_text(_wrap(next_int(conv), 32, False), 10, False))
            elif conv == "x":
                self.put(_unsigned_text(_wrap(next_int(conv), 32, False), 16, False))
            elif conv == "X":
                self.put(_unsigned_text(_wrap(next_int(conv), 64, False), 16, True))
            else:
                self.putc(conv)

    def getvalue(self) -> str:
        """Return everything appended so far."""
        return self._buf.getvalue()

    def __len__(self) -> int:
        return self._size


def vformat(fmt: str, args: Sequence[Any]) -> str:
    """Return ``fmt`` formatted with the sequence ``args``."""
    channel = MemChannel()
    channel.printf(fmt, *args)
    return channel.getvalue()


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` formatted with ``args``."""
    return vformat(fmt, args)


def snprintf(size: int, fmt: str, *args: Any) -> Tuple[str, int]:
    """Format into a buffer of ``size`` characters, counting the terminating NUL.

    Returns the text that fits and the full length the output would have had.
    """
    if size < 0:
        raise ValueError(f"negative buffer size {size}")
    text = vformat(fmt, args)
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)