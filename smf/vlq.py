"""Variable-length quantities as used for delta-times and payload lengths.

Each byte carries seven value bits, most significant group first; a set high
bit means another byte follows.  SMF caps these at four bytes, so the largest
representable value is 0x0FFFFFFF.
"""

from __future__ import annotations

from typing import Tuple

from .errors import MalformedVarLength, UnexpectedEof

MAX_VLQ_BYTES = 4
MAX_VLQ_VALUE = 0x0FFFFFFF


def decode_vlq(data: bytes | memoryview, offset: int = 0) -> Tuple[int, int]:
    """Decode the quantity starting at ``data[offset]``.

    Returns ``(value, consumed)``.  Error offsets are indices into ``data``.
    """
    value = 0
    for i in range(MAX_VLQ_BYTES):
        pos = offset + i
        if pos >= len(data):
            raise UnexpectedEof("variable-length quantity runs past end of data", pos)
        byte = data[pos]
        value = (value << 7) | (byte & 0x7F)
        if byte & 0x80 == 0:
            return value, i + 1
    raise MalformedVarLength(
        f"variable-length quantity longer than {MAX_VLQ_BYTES} bytes", offset
    )
