"""Tests for FidoNet address parsing and composition."""

import pytest
from pydantic import ValidationError

from fidopkt import Address, AddressFormatError, compose_address, parse_address


def test_parse_node_address():
    assert parse_address("5:6/7") == Address(zone=5, network=6, node=7, point=0, domain="")


def test_parse_point_with_domain():
    addr = parse_address("5:6/7.8@fidonet")
    assert (addr.zone, addr.network, addr.node, addr.point, addr.domain) == (5, 6, 7, 8, "fidonet")
    assert addr.is_point
    assert addr.node_address() == Address(zone=5, network=6, node=7, domain="fidonet")


@pytest.mark.parametrize(
    "text",
    [
        "bad-address",
        "",
        "5:6",
        "5:6/",
        "123456:1/1",
        "1:123456/1",
        "1:2/3.",
        "1:2/3@FidoNet",   # domain is lowercase letters
        "1:2/3@fido.net",
        "1:2/3\n",
        " 1:2/3",
    ],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(AddressFormatError):
        parse_address(text)


def test_parse_rejects_16_bit_overflow():
    with pytest.raises(AddressFormatError, match="overflows"):
        parse_address("1:65536/1")
    with pytest.raises(AddressFormatError, match="overflows"):
        parse_address("65536:1/1")
    assert parse_address("1:65535/65535.65535").point == 65535


def test_compose_omits_zero_point_and_empty_domain():
    assert compose_address(Address(zone=2, network=5020, node=1)) == "2:5020/1"
    assert str(Address(zone=2, network=5020, node=1, point=3)) == "2:5020/1.3"
    assert str(Address(zone=2, network=5020, node=1, domain="fidonet")) == "2:5020/1@fidonet"


def test_compose_canonicalizes_redundant_suffixes():
    assert str(parse_address("1:2/3.0@")) == "1:2/3"
    assert parse_address("1:2/3.0@") == parse_address("1:2/3")


@pytest.mark.parametrize(
    "addr",
    [
        Address(zone=1, network=2, node=3),
        Address(zone=2, network=5020, node=1, point=12),
        Address(zone=21, network=1, node=100, domain="fsxnet"),
        Address(zone=9999, network=65535, node=65535, point=65535, domain="z"),
        Address(zone=0, network=0, node=0),
        Address(zone=10000, network=2, node=3),
        Address(zone=65535, network=1, node=1, domain="fidonet"),
    ],
)
def test_parse_compose_roundtrip(addr):
    assert Address.parse(str(addr)) == addr


def test_address_is_immutable_and_hashable():
    addr = Address(zone=1, network=2, node=3)
    with pytest.raises(ValidationError):
        addr.node = 4
    assert {addr, Address(zone=1, network=2, node=3)} == {addr}


def test_address_rejects_out_of_range_fields():
    with pytest.raises(ValidationError):
        Address(zone=1, network=70000, node=1)


@pytest.mark.parametrize("domain", ["FidoNet", "fido.net", "fido1", " "])
def test_address_rejects_domains_that_cannot_be_parsed(domain):
    with pytest.raises(ValidationError):
        Address(zone=1, network=2, node=3, domain=domain)
