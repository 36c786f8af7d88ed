"""Exceptions raised while decoding a Standard MIDI File.

Every decoder raises at the byte where decoding failed and nothing inside the
package catches these; the first error aborts the whole parse.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for all SMF decoding failures.

    ``offset`` is the absolute position in the input buffer where decoding
    failed, or ``None`` when no single byte is to blame.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message, offset)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} (at offset 0x{self.offset:X})"


class MissingHeader(ParseError):
    """The buffer does not start with an ``MThd`` chunk."""


class MalformedTag(ParseError):
    """A chunk tag contains bytes outside printable ASCII."""


class UnexpectedEof(ParseError):
    """A declared length or a partial event runs past the available bytes."""


class MalformedVarLength(ParseError):
    """A variable-length quantity needs more than four bytes."""


class MissingRunningStatus(ParseError):
    """A data byte appeared where a status byte was required."""


class UnreachableStatus(ParseError):
    """A status byte reached the channel decoder without a data-length entry."""


class TrailingGarbage(ParseError):
    """Bytes remain after the last chunk that cannot form a chunk frame."""
