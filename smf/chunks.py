"""Top-level chunk framing: ``<4-byte tag> <u32 length> <length bytes>``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .errors import MalformedTag, TrailingGarbage
from .stream import ByteStream

HEADER_TAG = b"MThd"
TRACK_TAG = b"MTrk"
FRAME_HEADER_SIZE = 8


@dataclass(frozen=True)
class ChunkFrame:
    """One length-delimited chunk; ``offset`` is where its body starts."""

    tag: bytes
    length: int
    offset: int
    body: memoryview

    @property
    def end(self) -> int:
        return self.offset + self.length

    def __repr__(self) -> str:
        return f"ChunkFrame(tag={self.tag!r}, length={self.length}, offset={self.offset})"


def _check_tag(tag: bytes, offset: int) -> None:
    if not all(0x20 <= b <= 0x7E for b in tag):
        raise MalformedTag(f"chunk tag {tag.hex()} is not printable ASCII", offset)


def read_chunk_frame(stream: ByteStream, *, strict_tags: bool = False) -> ChunkFrame:
    """Read the chunk at the cursor and step past its body."""
    start = stream.tell()
    if stream.remaining < FRAME_HEADER_SIZE:
        raise TrailingGarbage(
            f"{stream.remaining} bytes left over, too few for a chunk header", start
        )
    tag = bytes(stream.read_exact(4))
    if strict_tags:
        _check_tag(tag, start)
    length = stream.read_u32()
    offset = stream.tell()
    body = stream.read_exact(length, f"{tag!r} chunk body")
    return ChunkFrame(tag=tag, length=length, offset=offset, body=body)


def iter_chunk_frames(
    stream: ByteStream, *, strict_tags: bool = False
) -> Iterator[ChunkFrame]:
    while not stream.at_end():
        yield read_chunk_frame(stream, strict_tags=strict_tags)
