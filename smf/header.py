"""The fixed fields of the ``MThd`` chunk."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional

from .errors import UnexpectedEof

HEADER_SIZE = 6


@dataclass(frozen=True)
class Header:
    length: int  # declared body length; informational only
    format: int  # 0 single track, 1 simultaneous tracks, 2 independent patterns
    track_count: int
    division: int

    @property
    def uses_smpte(self) -> bool:
        return bool(self.division & 0x8000)

    @property
    def ticks_per_quarter(self) -> Optional[int]:
        if self.uses_smpte:
            return None
        return self.division & 0x7FFF

    @property
    def smpte_frames(self) -> Optional[int]:
        """Frames per second (24, 25, 29 or 30), stored as a negative high byte."""
        if not self.uses_smpte:
            return None
        return 256 - (self.division >> 8)

    @property
    def ticks_per_frame(self) -> Optional[int]:
        if not self.uses_smpte:
            return None
        return self.division & 0xFF


def decode_header(
    body: bytes | memoryview, length: Optional[int] = None, offset: int = 0
) -> Header:
    """Decode ``format``, ``track_count`` and ``division`` from an MThd body.

    Bytes past the first six are ignored; ``length`` defaults to ``len(body)``.
    ``offset`` is only used to locate errors.
    """
    if len(body) < HEADER_SIZE:
        raise UnexpectedEof(
            f"MThd body is {len(body)} bytes, need {HEADER_SIZE}", offset
        )
    format_, track_count, division = struct.unpack_from(">HHH", body)
    return Header(
        length=len(body) if length is None else length,
        format=format_,
        track_count=track_count,
        division=division,
    )
