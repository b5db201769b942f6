"""A record whose second member is an int/short union, packed natively."""

from __future__ import annotations

import struct
from typing import Optional

from cbench.log import get_logger

__all__ = ["Foo", "main"]

_INT = struct.Struct("=i")
_SHORT = struct.Struct("=h")
_LONG = struct.Struct("=q")


def _pack(layout: struct.Struct, value: int) -> bytes:
    try:
        return layout.pack(value)
    except struct.error as exc:
        raise ValueError(f"{value} does not fit: {exc}") from exc


class Foo:
    """An int ``field1`` followed by a union of int ``field2`` and short ``field3``."""

    def __init__(self, field1: int = 0, field2: int = 0) -> None:
        self.field1 = field1
        self._union = bytearray(_INT.size)
        self.field2 = field2

    @property
    def field2(self) -> int:
        return _INT.unpack(self._union)[0]

    @field2.setter
    def field2(self, value: int) -> None:
        self._union[:] = _pack(_INT, value)

    @property
    def field3(self) -> int:
        return _SHORT.unpack_from(self._union)[0]

    @field3.setter
    def field3(self, value: int) -> None:
        self._union[: _SHORT.size] = _pack(_SHORT, value)

    def pack(self) -> bytes:
        """Return the 8-byte native memory image of the record."""
        return _pack(_INT, self.field1) + bytes(self._union)

    def as_long(self) -> int:
        """Return the record's memory read as one signed native 64-bit integer."""
        return _LONG.unpack(self.pack())[0]

    def __repr__(self) -> str:
        return f"Foo(field1={self.field1}, field2={self.field2})"


def main(argv: Optional[list[str]] = None) -> int:
    """Log the layout demonstration; returns the process exit status."""
    log = get_logger()
    foo = Foo(field1=1)
    foo.field3 = 3
    log.info("0x%x", foo.as_long() & 0xFFFFFFFFFFFFFFFF)
    log.info("%d %d", foo.field1, foo.field3)

    bar_field = -1
    log.info("%d", bar_field)
    return 0