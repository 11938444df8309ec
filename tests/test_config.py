"""Tests for codec options."""

from datetime import datetime

from fidopkt import Address, CodecConfig, PacketHeader, load_config


def test_defaults():
    config = CodecConfig()
    assert config.truncate_fields is True
    assert config.convert_line_endings is True
    assert config.header_defaults() == {"product_code": 0, "baud": 0}


def test_load_config(tmp_path):
    path = tmp_path / "fidopkt.ini"
    path.write_text(
        "[packet]\n"
        "truncate_fields = no\n"
        "product_code = 254\n"
        "baud = 9600\n"
    )
    config = load_config(path)
    assert config.truncate_fields is False
    assert config.convert_line_endings is True
    assert config.product_code == 254
    assert config.baud == 9600


def test_load_config_missing_file_or_section(tmp_path):
    assert load_config(tmp_path / "missing.ini") == CodecConfig()
    path = tmp_path / "other.ini"
    path.write_text("[other]\nbaud = 1\n")
    assert load_config(path) == CodecConfig()


def test_config_supplies_header_defaults():
    config = CodecConfig(product_code=0xFE, baud=2400)
    orig = Address(zone=1, network=2, node=3)
    dest = Address(zone=1, network=2, node=4)
    created = datetime(2024, 2, 29, 0, 0, 0)

    header = PacketHeader.create(orig, dest, created=created, config=config)
    assert header.product_code == 0xFE
    assert header.baud == 2400

    header = PacketHeader.create(orig, dest, created=created, config=config, baud=300)
    assert header.product_code == 0xFE
    assert header.baud == 300

    header = PacketHeader.create(orig, dest, created=created)
    assert (header.product_code, header.baud) == (0, 0)
