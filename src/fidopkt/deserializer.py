"""Deserializer: packet byte stream → pydantic wire models and text fields."""

from __future__ import annotations

import io
import struct
from typing import BinaryIO, Type, TypeVar

from pydantic import BaseModel, ValidationError

from fidopkt.errors import InvalidHeaderError, PacketDecodeError, TruncatedRecordError
from fidopkt.types import field_wire_type, wire_size

T = TypeVar("T", bound=BaseModel)


class Deserializer:
    """Reads values sequentially from a binary stream using the packet wire format.

    Only the bytes a read asks for are consumed, so anything after the end of
    the message sequence stays in the stream for the caller.
    """

    def __init__(self, stream: BinaryIO, pos: int = 0) -> None:
        self.stream = stream
        self.pos = pos

    @classmethod
    def from_bytes(cls, data: bytes | bytearray, offset: int = 0) -> Deserializer:
        stream = io.BytesIO(data)
        stream.seek(offset)
        return cls(stream, offset)

    def read_exact(
        self,
        size: int,
        error: Type[PacketDecodeError] = TruncatedRecordError,
        what: str = "record",
    ) -> bytes:
        data = self.stream.read(size)
        if data is None or len(data) < size:
            got = 0 if data is None else len(data)
            raise error(f"Unexpected EOF: {what} needs {size} bytes, got {got}", self.pos)
        self.pos += size
        return data

    def read_model(
        self,
        model_type: Type[T],
        error: Type[PacketDecodeError] = TruncatedRecordError,
    ) -> T:
        """Unpack a fixed-layout model; ``error`` is raised if the stream runs short."""
        start = self.pos
        data = self.read_exact(wire_size(model_type), error, model_type.__name__)

        kwargs = {}
        offset = 0
        for field_name, field_info in model_type.model_fields.items():
            wt = field_wire_type(field_info)
            (kwargs[field_name],) = struct.unpack_from(wt.fmt, data, offset)
            offset += wt.size

        try:
            return model_type(**kwargs)
        except ValidationError as exc:
            raise InvalidHeaderError(f"Invalid {model_type.__name__}: {exc}", start) from exc

    def read_cstring(self, limit: int) -> bytes:
        """Read a NUL-terminated field of at most ``limit`` bytes.

        The NUL is consumed but not returned. Hitting ``limit`` without a NUL
        ends the field there. CR bytes are returned as LF.
        """
        result = bytearray()
        for _ in range(limit):
            byte = self.stream.read(1)
            if not byte:
                raise TruncatedRecordError("Unexpected EOF inside a text field", self.pos)
            self.pos += 1
            if byte == b"\x00":
                break
            result.extend(b"\n" if byte == b"\r" else byte)
        return bytes(result)
