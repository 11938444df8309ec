"""Serializer: pydantic wire models and text fields → packet bytes."""

from __future__ import annotations

import logging
import struct
from typing import Any

from pydantic import BaseModel

from fidopkt.errors import FieldTooLargeError
from fidopkt.types import field_wire_type

logger = logging.getLogger(__name__)


class Serializer:
    """Writes values into a bytearray using the packet wire format.

    Multi-byte integers are little-endian and fields are packed back to back
    with no alignment padding.
    """

    def __init__(self) -> None:
        self.buf = bytearray()
        self.pos = 0

    def finalize(self) -> bytes:
        return bytes(self.buf)

    def _write_primitive(self, fmt: str, size: int, value: Any) -> None:
        self.buf.extend(struct.pack(fmt, value))
        self.pos += size

    def write_bytes(self, data: bytes | bytearray) -> None:
        self.buf.extend(data)
        self.pos += len(data)

    def write_model(self, model: BaseModel) -> None:
        """Pack every field of a fixed-layout model in declaration order."""
        for field_name, field_info in type(model).model_fields.items():
            wt = field_wire_type(field_info)
            self._write_primitive(wt.fmt, wt.size, getattr(model, field_name))

    def write_cstring(self, data: bytes, limit: int, field: str, truncate: bool = True) -> None:
        """Write a NUL-terminated field occupying at most ``limit`` bytes.

        Embedded NUL bytes would end the field early on the reading side and
        are dropped. Content longer than ``limit - 1`` bytes is truncated, or
        rejected with FieldTooLargeError when ``truncate`` is False.
        """
        if b"\x00" in data:
            logger.warning(f"Dropped {data.count(0)} NUL bytes from {field}")
            data = data.replace(b"\x00", b"")

        max_content = limit - 1
        if len(data) > max_content:
            if not truncate:
                raise FieldTooLargeError(field, len(data) + 1, limit)
            logger.warning(f"Truncated {field} from {len(data)} to {max_content} bytes")
            data = data[:max_content]

        self.write_bytes(data)
        self.buf.append(0)
        self.pos += 1
