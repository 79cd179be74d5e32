"""
Tests for integer and string decoding
"""

import struct

import pytest

from pyacping.errors import MalformedStringError, OutOfRangeError
from pyacping.protocol.cursor import ByteCursor
from pyacping.protocol.scalars import read_int, read_string, strip_colors


class TestReadInt:
    """Escape-coded signed integers"""

    def test_single_byte_values(self):
        """Test every value outside the escape codes fits in one byte"""
        for value in range(-126, 128):
            cursor = ByteCursor(struct.pack('<b', value))
            assert read_int(cursor) == value
            assert cursor.pos == 1

    def test_single_byte_is_signed(self):
        """Test single bytes decode as signed values"""
        assert read_int(ByteCursor(b'\xff')) == -1
        assert read_int(ByteCursor(b'\xf6')) == -10

    @pytest.mark.parametrize("value", [-32768, -129, -128, -127, 128, 186, 1201, 32767])
    def test_16bit_escape(self, value):
        """Test 0x80 followed by a little-endian signed short"""
        cursor = ByteCursor(b'\x80' + struct.pack('<h', value))
        assert read_int(cursor) == value
        assert cursor.pos == 3

    def test_16bit_little_endian(self):
        """Test the protocol number from a real standard pong"""
        assert read_int(ByteCursor(b'\x80\xb1\x04')) == 1201

    @pytest.mark.parametrize("value", [-2147483648, -100000, 0x12345678, 2147483647])
    def test_32bit_escape(self, value):
        """Test 0x81 followed by a little-endian signed int"""
        cursor = ByteCursor(b'\x81' + struct.pack('<i', value))
        assert read_int(cursor) == value
        assert cursor.pos == 5

    def test_32bit_uses_every_byte(self):
        """Test each of the four payload bytes lands in its own position"""
        assert read_int(ByteCursor(b'\x81\x01\x02\x03\x04')) == 0x04030201

    def test_escape_byte_inside_payload_is_literal(self):
        """Test 0x80 inside an escaped payload is plain data"""
        assert read_int(ByteCursor(b'\x80\x80\x00')) == 128
        assert read_int(ByteCursor(b'\x80\x00\x80')) == -32768
        assert read_int(ByteCursor(b'\x81\x80\x80\x80\x80')) == -2139062144

    def test_consecutive_ints(self):
        """Test mixed-width ints read back to back"""
        cursor = ByteCursor(b'\x05\x80\xe8\x03\xfe')
        assert [read_int(cursor), read_int(cursor), read_int(cursor)] == [5, 1000, -2]
        assert not cursor.peekable()

    @pytest.mark.parametrize("data", [b'', b'\x80', b'\x80\x01', b'\x81\x01\x02\x03'])
    def test_truncated(self, data):
        """Test a missing byte anywhere in the int fails"""
        with pytest.raises(OutOfRangeError):
            read_int(ByteCursor(data))


class TestReadString:
    """NUL terminated strings with colour codes"""

    def test_plain_string(self):
        """Test the cursor stops just past the terminator"""
        cursor = ByteCursor(b'ac_desert3\x00\x10')
        assert read_string(cursor) == "ac_desert3"
        assert cursor.pos == 11

    def test_color_code_stripped(self):
        """Test a leading colour code is dropped"""
        cursor = ByteCursor(bytes([0x0C, 0x02]) + b'hi\x00')
        assert read_string(cursor) == "hi"
        assert cursor.pos == 5

    def test_color_codes_mid_string(self):
        """Test colour codes between characters are dropped"""
        assert read_string(ByteCursor(b'a\x0c3b\x0cRc\x00')) == "abc"

    def test_color_byte_may_be_form_feed(self):
        """Test the colour byte is never treated as a new escape"""
        assert read_string(ByteCursor(b'\x0c\x0cab\x00')) == "ab"

    def test_empty_string(self):
        """Test back to back empty strings"""
        cursor = ByteCursor(b'\x00\x00')
        assert read_string(cursor) == ""
        assert read_string(cursor) == ""
        assert not cursor.peekable()

    def test_latin1(self):
        """Test high bytes decode as latin-1"""
        assert read_string(ByteCursor(b'caf\xe9\x00')) == "café"

    def test_missing_terminator(self):
        """Test a string running off the payload fails"""
        cursor = ByteCursor(b'abc')
        with pytest.raises(OutOfRangeError):
            read_string(cursor)
        assert cursor.pos == 0

    def test_trailing_color_escape(self):
        """Test a colour escape without its colour byte fails"""
        with pytest.raises(MalformedStringError):
            read_string(ByteCursor(b'hi\x0c\x00'))

    def test_strip_colors_without_escapes(self):
        """Test plain text passes through untouched"""
        assert strip_colors(b'plain') == b'plain'
