"""Decode the body of an ``MTrk`` chunk into events.

The decoder walks the body once.  The only state carried between events is
the running status: the last explicit channel status byte, which a later
channel event may omit.  Meta events leave it alone, sysex events clear it,
and it never outlives a single ``decode_track`` call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .errors import MissingRunningStatus
from .events import (
    ChannelEvent,
    Event,
    Meta,
    MetaEvent,
    Midi,
    Sysex,
    SysexEvent,
    channel_data_length,
)
from .stream import ByteStream

META_PREFIX = 0xFF
SYSEX_START = 0xF0
SYSEX_CONTINUE = 0xF7


@dataclass(frozen=True)
class TrackChunk:
    events: Tuple[Event, ...]


# Only MTrk chunks are materialized.
Chunk = Union[TrackChunk]


def decode_channel_event(stream: ByteStream, status: int) -> ChannelEvent:
    """Read the data bytes for ``status``; the status byte itself is already consumed."""
    length = channel_data_length(status, stream.tell())
    data = stream.read_exact(length, f"channel event 0x{status:02X}")
    return ChannelEvent(status=status, data=data)


def decode_meta_event(stream: ByteStream) -> MetaEvent:
    """Read kind, length and payload following a 0xFF introducer."""
    kind = stream.read_u8("meta event kind")
    length = stream.read_vlq()
    data = stream.read_exact(length, f"meta event 0x{kind:02X} payload")
    return MetaEvent(kind=kind, data=data)


def decode_sysex_event(stream: ByteStream, introducer: int) -> SysexEvent:
    """Read length and payload following a 0xF0 or 0xF7 introducer."""
    length = stream.read_vlq()
    data = stream.read_exact(length, "sysex payload")
    return SysexEvent(
        start=introducer == SYSEX_START,
        end=len(data) > 0 and data[-1] == SYSEX_CONTINUE,
        data=data,
    )


def decode_track(body: Union[bytes, memoryview, ByteStream]) -> TrackChunk:
    """Decode every event in a track body.

    ``body`` may be raw bytes or a ``ByteStream`` window over a larger
    buffer; the latter keeps error offsets relative to the whole file.
    """
    stream = body if isinstance(body, ByteStream) else ByteStream(body)
    events: List[Event] = []
    running_status: Optional[int] = None

    while not stream.at_end():
        delta = stream.read_vlq()
        lead = stream.peek_u8()

        if lead == META_PREFIX:
            stream.read_u8()
            events.append(Meta(delta, decode_meta_event(stream)))
        elif lead in (SYSEX_START, SYSEX_CONTINUE):
            stream.read_u8()
            running_status = None
            events.append(Sysex(delta, decode_sysex_event(stream, lead)))
        elif lead & 0x80:
            stream.read_u8()
            running_status = lead
            events.append(Midi(delta, decode_channel_event(stream, lead)))
        else:
            # Data byte: reuse the previous status; lead is the first data byte.
            if running_status is None:
                raise MissingRunningStatus(
                    f"data byte 0x{lead:02X} with no running status", stream.tell()
                )
            events.append(Midi(delta, decode_channel_event(stream, running_status)))

    return TrackChunk(events=tuple(events))
