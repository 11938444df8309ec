"""Codec options, optionally loaded from an INI file."""

from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from fidopkt.types import U8, U16

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "packet"


class CodecConfig(BaseModel):
    """Options for packet encoding.

    truncate_fields: cut oversized variable fields to their declared maximum;
        when False an oversized field raises FieldTooLargeError.
    convert_line_endings: write LF line endings as CR.
    product_code, baud: defaults for headers built by ``PacketHeader.create``.
    """

    truncate_fields: bool = True
    convert_line_endings: bool = True
    product_code: U8 = 0
    baud: U16 = 0

    def header_defaults(self) -> dict[str, Any]:
        return {"product_code": self.product_code, "baud": self.baud}


def load_config(path: str | Path, section: str = DEFAULT_SECTION) -> CodecConfig:
    """Read codec options from ``[section]`` of an INI file.

    A missing file or section yields the defaults.
    """
    parser = configparser.ConfigParser()
    read = parser.read(str(path))
    if not read:
        logger.debug(f"Config file {path} not found, using defaults")
        return CodecConfig()
    if not parser.has_section(section):
        logger.debug(f"No [{section}] section in {path}, using defaults")
        return CodecConfig()

    options = parser[section]
    defaults = CodecConfig()
    return CodecConfig(
        truncate_fields=options.getboolean("truncate_fields", fallback=defaults.truncate_fields),
        convert_line_endings=options.getboolean(
            "convert_line_endings", fallback=defaults.convert_line_endings
        ),
        product_code=options.getint("product_code", fallback=defaults.product_code),
        baud=options.getint("baud", fallback=defaults.baud),
    )
