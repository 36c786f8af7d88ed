"""Decode Standard MIDI Files into headers, tracks and events."""

from .chunks import (  # noqa: F401
    FRAME_HEADER_SIZE,
    HEADER_TAG,
    TRACK_TAG,
    ChunkFrame,
    iter_chunk_frames,
    read_chunk_frame,
)
from .errors import (  # noqa: F401
    MalformedTag,
    MalformedVarLength,
    MissingHeader,
    MissingRunningStatus,
    ParseError,
    TrailingGarbage,
    UnexpectedEof,
    UnreachableStatus,
)
from .events import (  # noqa: F401
    CHANNEL_DATA_LENGTHS,
    ChannelEvent,
    Event,
    Meta,
    MetaEvent,
    MetaKind,
    Midi,
    Sysex,
    SysexEvent,
    channel_data_length,
)
from .header import HEADER_SIZE, Header, decode_header  # noqa: F401
from .midi_file import Document, parse  # noqa: F401
from .stream import ByteStream  # noqa: F401
from .track import (  # noqa: F401
    Chunk,
    TrackChunk,
    decode_channel_event,
    decode_meta_event,
    decode_sysex_event,
    decode_track,
)
from .vlq import MAX_VLQ_BYTES, MAX_VLQ_VALUE, decode_vlq  # noqa: F401
