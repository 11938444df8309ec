"""Golden tests: a hand-assembled type 2 packet and its decoded form."""

from datetime import datetime

from fidopkt import (
    Address,
    Message,
    MessageAttribute,
    PacketHeader,
    deserialize_packet,
    serialize_packet,
)


# ── Expected values ───────────────────────────────────────────────────

ORIG = Address(zone=2, network=5020, node=1)
DEST = Address(zone=2, network=5020, node=2)
CREATED = datetime(2020, 1, 15, 12, 30, 45)

HEADER = PacketHeader.create(ORIG, DEST, created=CREATED, password="secret")

MESSAGE = Message(
    from_name="Sysop",
    from_addr=ORIG,
    to_name="All",
    to_addr=DEST,
    subject="Hi",
    text="Hello\n",
    date_time=CREATED,
    attributes=MessageAttribute.PRIVATE | MessageAttribute.LOCAL,
)


# ── Golden byte vectors ──────────────────────────────────────────────

HEADER_BYTES = bytes(
    [
        0x01, 0x00, 0x02, 0x00, 0xE4, 0x07, 0x00, 0x00,  # nodes, year 2020, month 0
        0x0F, 0x00, 0x0C, 0x00, 0x1E, 0x00, 0x2D, 0x00,  # 15th 12:30:45
        0x00, 0x00, 0x02, 0x00, 0x9C, 0x13, 0x9C, 0x13,  # baud, type 2, nets 5020
        0x00, 0x00,                                      # product code, serial
        0x73, 0x65, 0x63, 0x72, 0x65, 0x74, 0x00, 0x00,  # "secret"
        0x02, 0x00, 0x02, 0x00,                          # zones
    ]
) + bytes(20)

MESSAGE_BYTES = (
    bytes(
        [
            0x02, 0x00,                                      # sentinel
            0x01, 0x00, 0x02, 0x00, 0x9C, 0x13, 0x9C, 0x13,  # nodes, nets
            0x01, 0x01, 0x00, 0x00,                          # attributes, cost
        ]
    )
    + b"15 Jan 20  12:30:45\x00"
    + b"All\x00"
    + b"Sysop\x00"
    + b"Hi\x00"
    + b"Hello\r\x00"
)

PACKET_BYTES = HEADER_BYTES + MESSAGE_BYTES + bytes([0x00, 0x00])


# ── Tests ─────────────────────────────────────────────────────────────


def test_header_matches_expected_wire_bytes():
    data = HEADER.encode()
    assert len(data) == 58
    assert data == HEADER_BYTES, _diff(HEADER_BYTES, data)


def test_packet_matches_expected_wire_bytes():
    pkt = serialize_packet(HEADER, [MESSAGE])
    assert pkt == PACKET_BYTES, _diff(PACKET_BYTES, pkt)


def test_packet_decodes_to_expected_values():
    header, messages = deserialize_packet(PACKET_BYTES)
    assert header == HEADER
    assert header.created == CREATED
    assert header.password_text == "secret\x00\x00"
    assert len(messages) == 1

    msg = messages[0]
    assert msg.from_name == "Sysop"
    assert msg.to_name == "All"
    assert msg.subject == "Hi"
    assert msg.text == "Hello\n"
    assert msg.from_addr == ORIG
    assert msg.to_addr == DEST
    assert msg.date_time == CREATED
    assert msg.has_attribute(MessageAttribute.PRIVATE)
    assert not msg.has_attribute(MessageAttribute.CRASH)


def test_cp866_text_on_the_wire():
    msg = MESSAGE.model_copy(update={"subject": "Привет"})
    pkt = serialize_packet(HEADER, [msg])
    assert bytes([0x8F, 0xE0, 0xA8, 0xA2, 0xA5, 0xE2, 0x00]) in pkt
    _, messages = deserialize_packet(pkt)
    assert messages[0].subject == "Привет"


# ── Helpers ───────────────────────────────────────────────────────────


def _diff(expected: bytes, actual: bytes) -> str:
    lines = ["Byte mismatch:"]
    max_len = max(len(expected), len(actual))
    for i in range(max_len):
        e = f"0x{expected[i]:02X}" if i < len(expected) else "---"
        a = f"0x{actual[i]:02X}" if i < len(actual) else "---"
        marker = " <<" if e != a else ""
        lines.append(f"  [{i:3d}] expected={e}  actual={a}{marker}")
    lines.append(f"  expected len={len(expected)}, actual len={len(actual)}")
    return "\n".join(lines)
