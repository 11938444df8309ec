"""Wire format constants."""

PACKET_HEADER_SIZE = 58
MESSAGE_HEADER_SIZE = 32
PACKET_TYPE = 2

MESSAGE_SENTINEL = bytes([0x02, 0x00])
PACKET_TERMINATOR = bytes([0x00, 0x00])

PASSWORD_SIZE = 8
FILLED_SIZE = 20
DATE_TIME_SIZE = 20
DATE_TIME_TEXT_SIZE = 19  # "DD Mon YY  HH:MM:SS", NUL fills the 20th byte

# Maximum field sizes, NUL terminator included
USER_NAME_SIZE = 36
SUBJECT_SIZE = 72
TEXT_SIZE = 65535

LEGACY_CODEPAGE = "cp866"
