"""Exceptions raised by the packet codec and its sub-grammars."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fidopkt.header import PacketHeader
    from fidopkt.message import Message


class FidoError(ValueError):
    """Base class for all fidopkt errors."""


class AddressFormatError(FidoError):
    """Address text does not match zone:net/node[.point][@domain] or overflows 16 bits."""


class UnsupportedCharacterError(FidoError):
    """A character has no representation in the legacy codepage."""

    def __init__(self, character: str, position: int) -> None:
        super().__init__(
            f"Character {character!r} (U+{ord(character):04X}) at position {position} "
            f"cannot be encoded in the legacy codepage"
        )
        self.character = character
        self.position = position


class FieldTooLargeError(FidoError):
    """An encoded variable field exceeds its declared maximum and truncation is disabled."""

    def __init__(self, field: str, size: int, limit: int) -> None:
        super().__init__(f"Field {field!r} is {size} bytes, limit is {limit} including terminator")
        self.field = field
        self.size = size
        self.limit = limit


class DateRangeError(FidoError):
    """A message date falls outside the years a two-digit year can carry."""

    def __init__(self, value: datetime, first_year: int, last_year: int) -> None:
        super().__init__(
            f"Message date {value:%Y-%m-%d %H:%M:%S} is outside {first_year}..{last_year}"
        )
        self.value = value
        self.first_year = first_year
        self.last_year = last_year


class PacketDecodeError(FidoError):
    """A packet could not be decoded.

    ``header`` and ``messages`` hold whatever was decoded before the failure,
    so callers can salvage the readable part of a damaged packet.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message if offset is None else f"{message} (offset 0x{offset:04X})")
        self.offset = offset
        self.header: PacketHeader | None = None
        self.messages: list[Message] = []


class TruncatedHeaderError(PacketDecodeError):
    """Stream ended inside the fixed packet header."""


class TruncatedRecordError(PacketDecodeError):
    """Stream ended inside a message record or where a sentinel was expected."""


class DateFormatError(PacketDecodeError):
    """The fixed 20-byte message date does not match the expected layout."""


class InvalidHeaderError(PacketDecodeError):
    """A fixed header decoded to values outside their allowed ranges."""
