import struct

import pytest

from eqmaptools.endian import host_to_network_order, network_to_host_order


@pytest.mark.parametrize(
    "fmt, value",
    [("I", 0x01020304), ("H", 0xABCD), ("i", -123456), ("Q", 0x0102030405060708), ("h", -2)],
)
def test_network_to_host_matches_big_endian_layout(fmt, value):
    converted = network_to_host_order(value, fmt)
    assert struct.pack("=" + fmt, converted) == struct.pack(">" + fmt, value)


@pytest.mark.parametrize("fmt, value", [("I", 0xDEADBEEF), ("H", 0x1234), ("q", -99)])
def test_host_to_network_matches_big_endian_layout(fmt, value):
    converted = host_to_network_order(value, fmt)
    assert struct.pack(">" + fmt, converted) == struct.pack("=" + fmt, value)


@pytest.mark.parametrize("fmt, value", [("I", 0x11223344), ("h", 300), ("q", 1 << 40)])
def test_round_trip(fmt, value):
    assert network_to_host_order(host_to_network_order(value, fmt), fmt) == value


def test_single_byte_is_unchanged():
    assert network_to_host_order(0x7F, "B") == 0x7F
    assert host_to_network_order(-5, "b") == -5


@pytest.mark.parametrize("fmt", ["", "II", "s", 4])
def test_bad_format(fmt):
    with pytest.raises(ValueError):
        network_to_host_order(1, fmt)


def test_out_of_range_value():
    with pytest.raises(ValueError):
        host_to_network_order(70000, "H")