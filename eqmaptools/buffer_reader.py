"""Bounds-checked sequential reading of little-endian binary data."""

from __future__ import annotations

import struct
from typing import Any, Tuple


class BufferUnderrun(ValueError):
    """Raised when a read would run past the end of the buffer."""


def _normalise(fmt: str) -> str:
    if fmt and fmt[0] in "@=<>!":
        return fmt
    return "<" + fmt


class BufferReader:
    """Reads values from a byte buffer, advancing an offset; the offset is untouched on failure."""

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self.data = bytes(data)
        if offset < 0 or offset > len(self.data):
            raise ValueError(f"offset {offset} outside buffer of {len(self.data)} bytes")
        self.offset = offset

    def remaining(self) -> int:
        """Bytes left after the current offset."""
        return len(self.data) - self.offset

    def _require(self, size: int) -> None:
        if self.offset + size > len(self.data):
            raise BufferUnderrun(
                f"need {size} bytes at offset {self.offset}, {self.remaining()} available"
            )

    def _unpack(self, fmt: str) -> Tuple[Tuple[Any, ...], int]:
        layout = struct.Struct(_normalise(fmt))
        self._require(layout.size)
        return layout.unpack_from(self.data, self.offset), layout.size

    def read_struct(self, fmt: str) -> Tuple[Any, ...]:
        """Read a record laid out as ``fmt`` (little-endian unless stated) and return its fields."""
        values, size = self._unpack(fmt)
        self.offset += size
        return values

    def read_value(self, fmt: str) -> Any:
        """Read a single value laid out as ``fmt``."""
        values, size = self._unpack(fmt)
        if len(values) != 1:
            raise ValueError(f"format {fmt!r} does not describe a single value")
        self.offset += size
        return values[0]

    def read_bytes(self, length: int) -> bytes:
        """Read ``length`` raw bytes."""
        if length < 0:
            raise ValueError("length must not be negative")
        self._require(length)
        chunk = self.data[self.offset : self.offset + length]
        self.offset += length
        return chunk

    def read_string(self) -> str:
        """Read a NUL-terminated string, consuming the terminator."""
        end = self.data.find(b"\0", self.offset)
        if end < 0:
            raise BufferUnderrun(f"unterminated string at offset {self.offset}")
        text = self.data[self.offset : end].decode("latin-1")
        self.offset = end + 1
        return text