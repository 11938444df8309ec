"""Basic example: build a netmail packet, hex-dump it, and read it back."""

from datetime import datetime

from fidopkt import (
    Message,
    MessageAttribute,
    PacketHeader,
    deserialize_packet,
    parse_address,
    serialize_packet,
)


def hex_dump(data: bytes, label: str = "") -> None:
    if label:
        print(f"\n  {label}")
    for i in range(0, len(data), 16):
        chunk = data[i : i + 16]
        hex_values = " ".join(f"{b:02x}" for b in chunk)
        text = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        print(f"  {i:04x}: {hex_values:<47}  {text}")


def main() -> None:
    orig = parse_address("2:5020/1")
    dest = parse_address("2:5020/2")
    now = datetime.now().replace(microsecond=0)

    header = PacketHeader.create(orig, dest, created=now, password="secret")
    message = Message(
        from_name="Sysop",
        from_addr=orig,
        to_name="Всем",
        to_addr=dest,
        subject="Привет",
        text="\x01MSGID: 2:5020/1 00000001\nHello from fidopkt.\n",
        date_time=now,
        attributes=MessageAttribute.PRIVATE | MessageAttribute.LOCAL,
    )

    print("=" * 60)
    print("  fidopkt: type 2 packet")
    print(f"  {orig} -> {dest}")
    print("=" * 60)

    pkt = serialize_packet(header, [message])
    hex_dump(pkt, f"Packet ({len(pkt)} bytes)")

    rt_header, messages = deserialize_packet(pkt)
    assert rt_header == header
    for msg in messages:
        print(f"\n  From:    {msg.from_name} ({msg.from_addr})")
        print(f"  To:      {msg.to_name} ({msg.to_addr})")
        print(f"  Subject: {msg.subject}")
        print(f"  Date:    {msg.date_time}")
        print(f"  Kludges: {msg.kludges}")
        print(f"  Body:    {msg.body!r}")


if __name__ == "__main__":
    main()
