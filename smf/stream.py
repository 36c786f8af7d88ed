"""Bounds-checked cursor over a window of an SMF buffer."""

from __future__ import annotations

import struct

from .errors import UnexpectedEof
from .vlq import decode_vlq


class ByteStream:
    """Read bytes from ``data[start:end]`` without copying.

    Positions are absolute indices into ``data`` so that errors raised from
    nested windows (a track body inside the file) still point at the right
    byte of the original buffer.
    """

    __slots__ = ("_data", "_position", "_end")

    def __init__(self, data, start: int = 0, end: int | None = None):
        view = memoryview(data).cast("B")
        if end is None:
            end = len(view)
        if not 0 <= start <= end <= len(view):
            raise ValueError(f"invalid window [{start}:{end}] over {len(view)} bytes")
        self._data = view
        self._position = start
        self._end = end

    @property
    def remaining(self) -> int:
        return self._end - self._position

    def at_end(self) -> bool:
        return self._position >= self._end

    def tell(self) -> int:
        return self._position

    def _require(self, size: int, what: str) -> None:
        if self.remaining < size:
            raise UnexpectedEof(
                f"{what} needs {size} bytes, {self.remaining} remain", self._position
            )

    def read_exact(self, size: int, what: str = "read") -> memoryview:
        self._require(size, what)
        start = self._position
        self._position += size
        return self._data[start : self._position]

    def peek_u8(self) -> int:
        self._require(1, "peek")
        return self._data[self._position]

    def read_u8(self, what: str = "byte") -> int:
        self._require(1, what)
        value = self._data[self._position]
        self._position += 1
        return value

    def read_u32(self, what: str = "u32") -> int:
        self._require(4, what)
        (value,) = struct.unpack_from(">I", self._data, self._position)
        self._position += 4
        return value

    def read_vlq(self) -> int:
        value, consumed = decode_vlq(self._data[: self._end], self._position)
        self._position += consumed
        return value
