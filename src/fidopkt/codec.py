"""Top-level read/write functions for packets and messages."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterable

from fidopkt.address import Address
from fidopkt.charset import decode_legacy, encode_legacy
from fidopkt.config import CodecConfig
from fidopkt.constants import (
    MESSAGE_SENTINEL,
    PACKET_TERMINATOR,
    SUBJECT_SIZE,
    TEXT_SIZE,
    USER_NAME_SIZE,
)
from fidopkt.dates import format_message_date, parse_message_date
from fidopkt.deserializer import Deserializer
from fidopkt.errors import PacketDecodeError, TruncatedHeaderError, TruncatedRecordError
from fidopkt.header import MessageHeader, PacketHeader
from fidopkt.message import Message
from fidopkt.serializer import Serializer

logger = logging.getLogger(__name__)

# Variable fields in wire order with their maximum size (NUL included)
TEXT_FIELDS = (
    ("to_name", USER_NAME_SIZE),
    ("from_name", USER_NAME_SIZE),
    ("subject", SUBJECT_SIZE),
    ("text", TEXT_SIZE),
)


def _encode_field(text: str, config: CodecConfig) -> bytes:
    if config.convert_line_endings:
        text = text.replace("\r\n", "\r").replace("\n", "\r")
    return encode_legacy(text)


def serialize_message(message: Message, config: CodecConfig | None = None) -> bytes:
    """Serialize one message record: sentinel, sub-header and the four text fields."""
    config = config or CodecConfig()
    header = MessageHeader(
        orig_node=message.from_addr.node,
        dest_node=message.to_addr.node,
        orig_net=message.from_addr.network,
        dest_net=message.to_addr.network,
        attributes=message.attributes,
        cost=message.cost,
        date_time=format_message_date(message.date_time),
    )

    ser = Serializer()
    ser.write_bytes(MESSAGE_SENTINEL)
    ser.write_model(header)
    for field, limit in TEXT_FIELDS:
        raw = _encode_field(getattr(message, field), config)
        ser.write_cstring(raw, limit, field, truncate=config.truncate_fields)
    return ser.finalize()


def _read_message(de: Deserializer, header: PacketHeader) -> Message:
    record = de.read_model(MessageHeader, TruncatedRecordError)
    fields = {field: decode_legacy(de.read_cstring(limit)) for field, limit in TEXT_FIELDS}
    date_time = parse_message_date(record.date_time)

    return Message(
        from_addr=Address(zone=header.orig_zone, network=record.orig_net, node=record.orig_node),
        to_addr=Address(zone=header.dest_zone, network=record.dest_net, node=record.dest_node),
        date_time=date_time,
        attributes=record.attributes,
        cost=record.cost,
        **fields,
    )


def deserialize_message(data: bytes | bytearray, header: PacketHeader) -> Message:
    """Deserialize one sentinel-prefixed message record.

    ``header`` supplies the zones for the message addresses.
    """
    de = Deserializer.from_bytes(data)
    marker = de.read_exact(len(MESSAGE_SENTINEL), what="message sentinel")
    if marker != MESSAGE_SENTINEL:
        raise PacketDecodeError(f"Expected message sentinel, got {marker.hex()}", 0)
    return _read_message(de, header)


def write_packet(
    stream: BinaryIO,
    header: PacketHeader,
    messages: Iterable[Message],
    config: CodecConfig | None = None,
) -> int:
    """Write a packet to a binary stream. Returns the number of bytes written.

    Messages are encoded one at a time, so an encoding error leaves the
    header and earlier messages in ``stream``.
    """
    config = config or CodecConfig()
    written = stream.write(header.encode())
    count = 0
    for message in messages:
        if message.from_addr.zone != header.orig_zone or message.to_addr.zone != header.dest_zone:
            logger.warning(
                f"Message {message.from_addr} -> {message.to_addr} zones differ from packet "
                f"header {header.orig_zone} -> {header.dest_zone}; header zones will be read back"
            )
        written += stream.write(serialize_message(message, config))
        count += 1
        logger.debug(f"Wrote message {count}: {message.from_name!r} -> {message.to_name!r}")
    written += stream.write(PACKET_TERMINATOR)
    logger.debug(f"Wrote packet with {count} messages, {written} bytes")
    return written


def serialize_packet(
    header: PacketHeader,
    messages: Iterable[Message],
    config: CodecConfig | None = None,
) -> bytes:
    """Serialize a packet header and messages to bytes."""
    buf = io.BytesIO()
    write_packet(buf, header, messages, config)
    return buf.getvalue()


def read_packet(stream: BinaryIO) -> tuple[PacketHeader, list[Message]]:
    """Read a packet from a binary stream.

    Reading stops at the first 2-byte marker that is not the message
    sentinel; bytes after it are left in the stream. On a decode error the
    raised PacketDecodeError carries the header and the messages decoded so far.
    """
    de = Deserializer(stream)
    header = de.read_model(PacketHeader, TruncatedHeaderError)
    logger.debug(
        f"Packet {header.orig_address} -> {header.dest_address}, type {header.packet_type}"
    )

    messages: list[Message] = []
    try:
        while True:
            marker = de.read_exact(len(MESSAGE_SENTINEL), what="message sentinel")
            if marker != MESSAGE_SENTINEL:
                logger.debug(f"End of messages, marker {marker.hex()} at 0x{de.pos - 2:04X}")
                break
            message = _read_message(de, header)
            messages.append(message)
            logger.debug(f"Read message {len(messages)}: {message.from_name!r} -> {message.to_name!r}")
    except PacketDecodeError as exc:
        exc.header = header
        exc.messages = messages
        raise

    return header, messages


def deserialize_packet(data: bytes | bytearray) -> tuple[PacketHeader, list[Message]]:
    """Parse packet bytes into (header, messages)."""
    return read_packet(io.BytesIO(data))


def read_packet_file(path: str | Path) -> tuple[PacketHeader, list[Message]]:
    with open(path, "rb") as f:
        header, messages = read_packet(f)
    logger.info(f"Read {len(messages)} messages from {path}")
    return header, messages


def write_packet_file(
    path: str | Path,
    header: PacketHeader,
    messages: Iterable[Message],
    config: CodecConfig | None = None,
) -> int:
    """Write a packet file. Returns the number of bytes written.

    The whole packet is encoded before the file is opened, so an encoding
    error leaves no partial packet on disk.
    """
    data = serialize_packet(header, messages, config)
    with open(path, "wb") as f:
        written = f.write(data)
    logger.info(f"Wrote packet {path} ({written} bytes)")
    return written
