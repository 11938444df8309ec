"""Logical (decoded) message."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from fidopkt.address import Address
from fidopkt.kludges import extract_kludges, strip_kludges
from fidopkt.types import U16, MessageAttribute


class Message(BaseModel):
    """A message as carried in a packet, with text fields in Unicode.

    Addresses read from a packet combine the packet header zone with the
    message net/node; their point is always 0.
    """

    from_name: str = ""
    from_addr: Address
    to_name: str = ""
    to_addr: Address
    subject: str = ""
    text: str = ""
    date_time: datetime
    attributes: U16 = 0
    cost: U16 = 0

    @property
    def kludges(self) -> dict[str, str]:
        return extract_kludges(self.text)

    @property
    def body(self) -> str:
        return strip_kludges(self.text)

    @property
    def area(self) -> str | None:
        """Echomail area tag, or None for netmail."""
        return self.kludges.get("AREA")

    def has_attribute(self, flag: MessageAttribute) -> bool:
        return bool(self.attributes & flag)
