import struct

import pytest

from eqmaptools.buffer_reader import BufferReader, BufferUnderrun


def test_read_value_advances_offset():
    reader = BufferReader(struct.pack("<If", 7, 1.5))
    assert reader.read_value("I") == 7
    assert reader.offset == 4
    assert reader.read_value("f") == 1.5
    assert reader.remaining() == 0


def test_read_value_is_little_endian_by_default():
    reader = BufferReader(b"\x01\x00")
    assert reader.read_value("H") == 1


def test_explicit_byte_order_is_kept():
    reader = BufferReader(b"\x00\x01")
    assert reader.read_value(">H") == 1


def test_underrun_leaves_offset_unchanged():
    reader = BufferReader(b"\x01\x02\x03")
    with pytest.raises(BufferUnderrun):
        reader.read_value("I")
    assert reader.offset == 0
    assert reader.read_bytes(3) == b"\x01\x02\x03"


def test_read_value_rejects_multiple_fields():
    reader = BufferReader(struct.pack("<II", 1, 2))
    with pytest.raises(ValueError):
        reader.read_value("II")
    assert reader.offset == 0


def test_read_struct():
    reader = BufferReader(struct.pack("<Ihf", 9, -3, 0.25) + b"rest")
    assert reader.read_struct("Ihf") == (9, -3, 0.25)
    assert reader.read_bytes(4) == b"rest"


def test_read_bytes_bounds():
    reader = BufferReader(b"abcd", offset=2)
    with pytest.raises(BufferUnderrun):
        reader.read_bytes(3)
    with pytest.raises(ValueError):
        reader.read_bytes(-1)
    assert reader.read_bytes(2) == b"cd"


def test_read_strings():
    reader = BufferReader(b"abc\0\0def\0")
    assert reader.read_string() == "abc"
    assert reader.read_string() == ""
    assert reader.read_string() == "def"
    assert reader.remaining() == 0


def test_unterminated_string_raises():
    reader = BufferReader(b"abc")
    with pytest.raises(BufferUnderrun):
        reader.read_string()
    assert reader.offset == 0


def test_bad_start_offset():
    with pytest.raises(ValueError):
        BufferReader(b"ab", offset=3)