"""Packet header and message sub-header wire records."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, Field, field_validator

from fidopkt.address import Address
from fidopkt.charset import decode_legacy, encode_legacy
from fidopkt.config import CodecConfig
from fidopkt.constants import DATE_TIME_SIZE, FILLED_SIZE, PACKET_TYPE, PASSWORD_SIZE
from fidopkt.deserializer import Deserializer
from fidopkt.errors import TruncatedHeaderError, TruncatedRecordError
from fidopkt.serializer import Serializer
from fidopkt.types import U8, U16, FixedBytes, UInt16


def _fit(value: Any, size: int) -> Any:
    if isinstance(value, str):
        value = encode_legacy(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value[:size]).ljust(size, b"\x00")
    return value


class PacketHeader(BaseModel):
    """58-byte packet header.

    Wire layout (little-endian):
        Bytes  0..24: uint16 orig_node, dest_node, year, month (0-11), day,
                      hour, minute, second, baud, packet_type, orig_net, dest_net
        Bytes 24..26: uint8 product_code, serial_no
        Bytes 26..34: 8-byte session password, NUL padded
        Bytes 34..38: uint16 orig_zone, dest_zone
        Bytes 38..58: reserved fill

    A text password that cannot be encoded makes direct construction fail
    with a ValidationError wrapping UnsupportedCharacterError.
    """

    orig_node: U16 = 0
    dest_node: U16 = 0
    year: U16 = 0
    month: Annotated[int, UInt16, Field(ge=0, le=11)] = 0
    day: U16 = 0
    hour: U16 = 0
    minute: U16 = 0
    second: U16 = 0
    baud: U16 = 0
    packet_type: U16 = PACKET_TYPE
    orig_net: U16 = 0
    dest_net: U16 = 0
    product_code: U8 = 0
    serial_no: U8 = 0
    password: Annotated[bytes, FixedBytes(PASSWORD_SIZE)] = bytes(PASSWORD_SIZE)
    orig_zone: U16 = 0
    dest_zone: U16 = 0
    filled: Annotated[bytes, FixedBytes(FILLED_SIZE)] = bytes(FILLED_SIZE)

    @field_validator("password", mode="before")
    @classmethod
    def fit_password(cls, value: Any) -> Any:
        return _fit(value, PASSWORD_SIZE)

    @field_validator("filled", mode="before")
    @classmethod
    def fit_filled(cls, value: Any) -> Any:
        return _fit(value, FILLED_SIZE)

    @classmethod
    def create(
        cls,
        orig: Address,
        dest: Address,
        created: datetime | None = None,
        password: str | bytes = b"",
        config: CodecConfig | None = None,
        **fields: Any,
    ) -> PacketHeader:
        """Build a header for a packet from ``orig`` to ``dest``.

        ``created`` uses calendar months (1-12); the header stores them 0-based.
        ``config`` supplies product_code and baud unless ``fields`` sets them.
        A text password is encoded here, so an unencodable character raises
        UnsupportedCharacterError rather than a ValidationError.
        """
        created = created or datetime.now()
        if isinstance(password, str):
            password = encode_legacy(password)
        fields = {**(config or CodecConfig()).header_defaults(), **fields}
        return cls(
            orig_node=orig.node,
            dest_node=dest.node,
            orig_net=orig.network,
            dest_net=dest.network,
            orig_zone=orig.zone,
            dest_zone=dest.zone,
            year=created.year,
            month=created.month - 1,
            day=created.day,
            hour=created.hour,
            minute=created.minute,
            second=created.second,
            password=password,
            **fields,
        )

    @property
    def created(self) -> datetime:
        return datetime(self.year, self.month + 1, self.day, self.hour, self.minute, self.second)

    @property
    def password_text(self) -> str:
        """The password as text, all 8 bytes including any NUL padding."""
        return decode_legacy(self.password)

    @property
    def orig_address(self) -> Address:
        return Address(zone=self.orig_zone, network=self.orig_net, node=self.orig_node)

    @property
    def dest_address(self) -> Address:
        return Address(zone=self.dest_zone, network=self.dest_net, node=self.dest_node)

    def encode(self) -> bytes:
        ser = Serializer()
        ser.write_model(self)
        return ser.finalize()

    @classmethod
    def decode(cls, data: bytes | bytearray, offset: int = 0) -> PacketHeader:
        return Deserializer.from_bytes(data, offset).read_model(cls, TruncatedHeaderError)


class MessageHeader(BaseModel):
    """32-byte message sub-header that follows each sentinel.

    Wire layout (little-endian):
        Bytes  0..12: uint16 orig_node, dest_node, orig_net, dest_net,
                      attributes, cost
        Bytes 12..32: date text "DD Mon YY  HH:MM:SS" and NUL
    """

    orig_node: U16 = 0
    dest_node: U16 = 0
    orig_net: U16 = 0
    dest_net: U16 = 0
    attributes: U16 = 0
    cost: U16 = 0
    date_time: Annotated[bytes, FixedBytes(DATE_TIME_SIZE)] = bytes(DATE_TIME_SIZE)

    @field_validator("date_time", mode="before")
    @classmethod
    def fit_date_time(cls, value: Any) -> Any:
        return _fit(value, DATE_TIME_SIZE)

    def encode(self) -> bytes:
        ser = Serializer()
        ser.write_model(self)
        return ser.finalize()

    @classmethod
    def decode(cls, data: bytes | bytearray, offset: int = 0) -> MessageHeader:
        return Deserializer.from_bytes(data, offset).read_model(cls, TruncatedRecordError)
