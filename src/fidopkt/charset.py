"""Legacy codepage (CP866) transcoding for message text fields."""

from __future__ import annotations

from fidopkt.constants import LEGACY_CODEPAGE
from fidopkt.errors import UnsupportedCharacterError

# CYRILLIC CAPITAL LETTER EN is written as LATIN CAPITAL LETTER H.
# Some FidoNet software treats byte 0x8D as a control code.
_SUBSTITUTIONS = str.maketrans({"\u041d": "H"})


def decode_legacy(data: bytes | bytearray) -> str:
    """Decode legacy codepage bytes to text. CP866 maps all 256 byte values."""
    return bytes(data).decode(LEGACY_CODEPAGE)


def encode_legacy(text: str) -> bytes:
    """Encode text to the legacy codepage.

    Raises UnsupportedCharacterError for characters outside the codepage.
    """
    text = text.translate(_SUBSTITUTIONS)
    try:
        return text.encode(LEGACY_CODEPAGE)
    except UnicodeEncodeError as exc:
        raise UnsupportedCharacterError(exc.object[exc.start], exc.start) from exc
