"""Assemble a whole Standard MIDI File from its chunks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .chunks import FRAME_HEADER_SIZE, HEADER_TAG, TRACK_TAG, read_chunk_frame
from .errors import MissingHeader
from .header import Header, decode_header
from .stream import ByteStream
from .track import Chunk, TrackChunk, decode_track

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """Parsed file: the MThd fields plus every MTrk chunk in file order.

    Payload slices inside the events borrow from the parsed buffer, so a
    ``bytearray`` should not be modified while the document is in use.
    Writable views cannot be hashed: ``hash()`` works on documents parsed
    from ``bytes`` and raises ``ValueError`` for ``bytearray`` input.
    """

    header: Header
    chunks: Tuple[Chunk, ...]

    @property
    def tracks(self) -> List[TrackChunk]:
        return [chunk for chunk in self.chunks if isinstance(chunk, TrackChunk)]

    @classmethod
    def from_bytes(cls, data, *, strict_tags: bool = False) -> "Document":
        stream = ByteStream(data)
        if stream.remaining < FRAME_HEADER_SIZE:
            raise MissingHeader(
                f"buffer too short for an MThd chunk ({stream.remaining} bytes)", 0
            )

        first = read_chunk_frame(stream, strict_tags=strict_tags)
        if first.tag != HEADER_TAG:
            raise MissingHeader(f"first chunk is {first.tag!r}, expected {HEADER_TAG!r}", 0)
        header = decode_header(first.body, first.length, first.offset)

        chunks: List[Chunk] = []
        while not stream.at_end():
            frame = read_chunk_frame(stream, strict_tags=strict_tags)
            if frame.tag == TRACK_TAG:
                window = ByteStream(data, frame.offset, frame.end)
                chunks.append(decode_track(window))
            else:
                logger.debug(
                    "Skipping %r chunk (%d bytes) at offset 0x%X",
                    frame.tag,
                    frame.length,
                    frame.offset - FRAME_HEADER_SIZE,
                )

        logger.debug(
            "Decoded %d of %d declared tracks", len(chunks), header.track_count
        )
        return cls(header=header, chunks=tuple(chunks))


def parse(data, *, strict_tags: bool = False) -> Document:
    """Decode ``data`` (bytes, bytearray or memoryview) into a ``Document``.

    Raises a ``smf.ParseError`` subclass on malformed input; there is no
    partial result.
    """
    return Document.from_bytes(data, strict_tags=strict_tags)
