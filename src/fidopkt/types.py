"""Type annotation helpers for mapping pydantic fields to wire types."""

from __future__ import annotations

from enum import IntFlag
from typing import Annotated, Any, get_args

from pydantic import BaseModel, Field
from pydantic.fields import FieldInfo


class WireType:
    """Marker for explicit wire type annotation."""

    def __init__(self, fmt: str, size: int):
        self.fmt = fmt
        self.size = size

    def __repr__(self) -> str:
        return f"WireType({self.fmt!r}, {self.size})"


UInt8 = WireType("<B", 1)
UInt16 = WireType("<H", 2)


def FixedBytes(size: int) -> WireType:
    """Fixed-size byte array; struct pads short values with NUL and truncates long ones."""
    return WireType(f"<{size}s", size)


# Field declarations used throughout the packet models.
# Users annotate fields like:  orig_node: U16
U8 = Annotated[int, UInt8, Field(ge=0, le=0xFF)]
U16 = Annotated[int, UInt16, Field(ge=0, le=0xFFFF)]


def get_wire_type(annotation: Any) -> WireType | None:
    """Extract WireType from Annotated[int, UInt16] style annotations."""
    if isinstance(annotation, WireType):
        return annotation
    for arg in get_args(annotation):
        if isinstance(arg, WireType):
            return arg
    return None


def field_wire_type(field_info: FieldInfo) -> WireType:
    """Get the WireType of a model field, checking pydantic metadata first."""
    for m in field_info.metadata:
        if isinstance(m, WireType):
            return m
    wt = get_wire_type(field_info.annotation)
    if wt is None:
        raise TypeError(f"Cannot resolve wire format for {field_info.annotation}")
    return wt


def wire_size(model_type: type[BaseModel]) -> int:
    """Total packed size in bytes of a fixed-layout model."""
    return sum(field_wire_type(fi).size for fi in model_type.model_fields.values())


class MessageAttribute(IntFlag):
    """Message attribute word bits (FTS-0001)."""

    PRIVATE = 0x0001
    CRASH = 0x0002
    RECEIVED = 0x0004
    SENT = 0x0008
    FILE_ATTACHED = 0x0010
    IN_TRANSIT = 0x0020
    ORPHAN = 0x0040
    KILL_SENT = 0x0080
    LOCAL = 0x0100
    HOLD = 0x0200
    UNUSED = 0x0400
    FILE_REQUEST = 0x0800
    RETURN_RECEIPT_REQUEST = 0x1000
    IS_RETURN_RECEIPT = 0x2000
    AUDIT_REQUEST = 0x4000
    FILE_UPDATE_REQUEST = 0x8000
