"""FidoNet address model: zone:network/node[.point][@domain]."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from fidopkt.errors import AddressFormatError
from fidopkt.types import U16

# Zone covers the full 16-bit range of the packet header zone fields.
ADDRESS_PATTERN = re.compile(
    r"(?P<zone>[0-9]{1,5}):(?P<network>[0-9]{1,5})/(?P<node>[0-9]{1,5})"
    r"(?:\.(?P<point>[0-9]{1,5}))?(?:@(?P<domain>[a-z]*))?"
)


class Address(BaseModel):
    """A FidoNet node or point. ``point == 0`` addresses the node itself."""

    model_config = ConfigDict(frozen=True)

    zone: U16
    network: U16
    node: U16
    point: U16 = 0
    domain: str = Field(default="", pattern=r"^[a-z]*$")

    @classmethod
    def parse(cls, text: str) -> Address:
        return parse_address(text)

    def __str__(self) -> str:
        return compose_address(self)

    @property
    def is_point(self) -> bool:
        return self.point != 0

    def node_address(self) -> Address:
        """The boss node of this address (point dropped)."""
        return self.model_copy(update={"point": 0})


def parse_address(text: str) -> Address:
    """Parse ``zone:network/node[.point][@domain]``.

    Raises AddressFormatError if the text does not match or a component
    does not fit in 16 bits.
    """
    match = ADDRESS_PATTERN.fullmatch(text)
    if match is None:
        raise AddressFormatError(f"FidoNet address pattern didn't match: {text!r}")

    values = {}
    for name in ("zone", "network", "node", "point"):
        group = match.group(name)
        value = int(group) if group else 0
        if value > 0xFFFF:
            raise AddressFormatError(f"Address component {name}={value} overflows 16 bits: {text!r}")
        values[name] = value

    return Address(domain=match.group("domain") or "", **values)


def compose_address(addr: Address) -> str:
    text = f"{addr.zone}:{addr.network}/{addr.node}"
    if addr.point != 0:
        text += f".{addr.point}"
    if addr.domain:
        text += f"@{addr.domain}"
    return text
