"""Print the header and messages of a .pkt file.

Usage: python dump.py PACKET [PACKET ...]
"""

import logging
import sys

from fidopkt import PacketDecodeError, read_packet_file


def dump(path: str) -> None:
    try:
        header, messages = read_packet_file(path)
    except PacketDecodeError as e:
        print(f"{path}: {e}")
        if e.header is None:
            return
        header, messages = e.header, e.messages
        print(f"  salvaged {len(messages)} messages")

    print(f"{path}: {header.orig_address} -> {header.dest_address}, "
          f"created {header.created}, password {header.password_text.rstrip(chr(0))!r}")
    for n, msg in enumerate(messages, 1):
        area = msg.area or "netmail"
        print(f"  [{n}] {area}: {msg.from_name} ({msg.from_addr}) -> "
              f"{msg.to_name} ({msg.to_addr}) {msg.date_time:%Y-%m-%d %H:%M:%S}")
        print(f"      {msg.subject}")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)
    for path in sys.argv[1:]:
        dump(path)


if __name__ == "__main__":
    main()
