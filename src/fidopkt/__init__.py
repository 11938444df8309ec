"""FidoNet .pkt packet codec, address grammar and kludge extraction."""

from fidopkt.address import Address, compose_address, parse_address
from fidopkt.charset import decode_legacy, encode_legacy
from fidopkt.codec import (
    serialize_message,
    deserialize_message,
    serialize_packet,
    deserialize_packet,
    read_packet,
    write_packet,
    read_packet_file,
    write_packet_file,
)
from fidopkt.config import CodecConfig, load_config
from fidopkt.constants import (
    MESSAGE_SENTINEL,
    PACKET_TERMINATOR,
    PACKET_HEADER_SIZE,
    MESSAGE_HEADER_SIZE,
    USER_NAME_SIZE,
    SUBJECT_SIZE,
    TEXT_SIZE,
)
from fidopkt.errors import (
    FidoError,
    AddressFormatError,
    UnsupportedCharacterError,
    FieldTooLargeError,
    DateRangeError,
    PacketDecodeError,
    TruncatedHeaderError,
    TruncatedRecordError,
    DateFormatError,
    InvalidHeaderError,
)
from fidopkt.header import MessageHeader, PacketHeader
from fidopkt.kludges import collect_kludges, extract_kludges, strip_kludges
from fidopkt.message import Message
from fidopkt.types import MessageAttribute

__all__ = [
    "Address",
    "parse_address",
    "compose_address",
    "decode_legacy",
    "encode_legacy",
    "serialize_message",
    "deserialize_message",
    "serialize_packet",
    "deserialize_packet",
    "read_packet",
    "write_packet",
    "read_packet_file",
    "write_packet_file",
    "CodecConfig",
    "load_config",
    "MESSAGE_SENTINEL",
    "PACKET_TERMINATOR",
    "PACKET_HEADER_SIZE",
    "MESSAGE_HEADER_SIZE",
    "USER_NAME_SIZE",
    "SUBJECT_SIZE",
    "TEXT_SIZE",
    "FidoError",
    "AddressFormatError",
    "UnsupportedCharacterError",
    "FieldTooLargeError",
    "DateRangeError",
    "PacketDecodeError",
    "TruncatedHeaderError",
    "TruncatedRecordError",
    "DateFormatError",
    "InvalidHeaderError",
    "MessageHeader",
    "PacketHeader",
    "collect_kludges",
    "extract_kludges",
    "strip_kludges",
    "Message",
    "MessageAttribute",
]
