"""Event types found inside an ``MTrk`` chunk.

Three payload shapes exist:

  ChannelEvent — status byte plus one or two data bytes
  MetaEvent    — 0xFF, kind byte, VLQ length, payload
  SysexEvent   — 0xF0 or 0xF7, VLQ length, payload

Each payload is wrapped in ``Midi``, ``Meta`` or ``Sysex`` together with the
delta-time that preceded it.  ``data`` fields are ``memoryview`` slices of
the buffer that was parsed; call ``bytes()`` on them to detach a copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from .errors import UnreachableStatus

# Data bytes following a channel status, keyed by the status high nibble.
CHANNEL_DATA_LENGTHS = {
    0x80: 2,  # note off
    0x90: 2,  # note on
    0xA0: 2,  # polyphonic key pressure
    0xB0: 2,  # control change / channel mode
    0xC0: 1,  # program change
    0xD0: 1,  # channel pressure
    0xE0: 2,  # pitch bend
}


class MetaKind(IntEnum):
    SEQUENCE_NUMBER = 0x00
    TEXT = 0x01
    COPYRIGHT = 0x02
    TRACK_NAME = 0x03
    INSTRUMENT_NAME = 0x04
    LYRIC = 0x05
    MARKER = 0x06
    CUE_POINT = 0x07
    CHANNEL_PREFIX = 0x20
    END_OF_TRACK = 0x2F
    SET_TEMPO = 0x51
    SMPTE_OFFSET = 0x54
    TIME_SIGNATURE = 0x58
    KEY_SIGNATURE = 0x59
    SEQUENCER_SPECIFIC = 0x7F


def channel_data_length(status: int, offset: Optional[int] = None) -> int:
    """Return how many data bytes follow ``status``."""
    try:
        return CHANNEL_DATA_LENGTHS[status & 0xF0]
    except KeyError:
        raise UnreachableStatus(
            f"status 0x{status:02X} has no channel data length", offset
        ) from None


@dataclass(frozen=True)
class ChannelEvent:
    status: int
    data: memoryview

    @property
    def message_type(self) -> int:
        return self.status & 0xF0

    @property
    def channel(self) -> int:
        return self.status & 0x0F

    @property
    def data1(self) -> int:
        return self.data[0]

    @property
    def data2(self) -> Optional[int]:
        """Second data byte, or None for program change and channel pressure."""
        return self.data[1] if len(self.data) > 1 else None

    def __repr__(self) -> str:
        return f"ChannelEvent(status=0x{self.status:02X}, data={bytes(self.data).hex()})"


@dataclass(frozen=True)
class MetaEvent:
    kind: int
    data: memoryview

    def __repr__(self) -> str:
        return f"MetaEvent(kind=0x{self.kind:02X}, data={bytes(self.data).hex()})"


@dataclass(frozen=True)
class SysexEvent:
    start: bool  # introduced by 0xF0 rather than 0xF7
    end: bool  # payload ends in 0xF7
    data: memoryview

    def __repr__(self) -> str:
        return (
            f"SysexEvent(start={self.start}, end={self.end}, "
            f"data={bytes(self.data).hex()})"
        )


@dataclass(frozen=True)
class Midi:
    delta: int
    event: ChannelEvent


@dataclass(frozen=True)
class Meta:
    delta: int
    event: MetaEvent


@dataclass(frozen=True)
class Sysex:
    delta: int
    event: SysexEvent


Event = Union[Midi, Meta, Sysex]
