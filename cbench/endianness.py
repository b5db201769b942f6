"""Report the byte order of the running machine."""

from __future__ import annotations

import struct
from typing import Optional

from cbench.log import get_logger

__all__ = ["byte_order", "describe", "main"]


def byte_order() -> str:
    """Return "little" or "big" by inspecting the first byte of a native int."""
    first = struct.pack("=i", 0x01020304)[0]
    return "little" if first == 0x04 else "big"


def describe(order: str) -> str:
    """Return the message printed for a byte order."""
    if order == "little":
        return "little endianness"
    if order == "big":
        return "big endianness"
    raise ValueError(f"unknown byte order: {order!r}")


def main(argv: Optional[list[str]] = None) -> int:
    """Log the machine's byte order; returns the process exit status."""
    get_logger().info("%s", describe(byte_order()))
    return 0