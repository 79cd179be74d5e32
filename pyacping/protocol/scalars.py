"""
Scalar decoding for the ping/pong protocol

Integers use a signed escape scheme: a single signed byte holds the value
directly, except for two escape codes.

    0x80 (-128)  value follows as 2 bytes, little-endian signed
    0x81 (-127)  value follows as 4 bytes, little-endian signed

Strings are NUL terminated. A form feed (``\\f``) followed by one byte selects
a text colour; both bytes are dropped from the decoded text.
"""

import struct

from ..errors import MalformedStringError
from .constants import COLOR_ESCAPE, INT_ESCAPE_16, INT_ESCAPE_32, STRING_ENCODING
from .cursor import ByteCursor


def _signed_byte(value: int) -> int:
    return value - 256 if value >= 128 else value


def read_int(cursor: ByteCursor) -> int:
    """Read one escape-coded signed integer"""
    c = _signed_byte(cursor.next_byte())
    if c == INT_ESCAPE_16:
        return struct.unpack('<h', cursor.read_bytes(2))[0]
    elif c == INT_ESCAPE_32:
        return struct.unpack('<i', cursor.read_bytes(4))[0]
    else:
        return c


def strip_colors(raw: bytes) -> bytes:
    """Drop colour escapes (form feed plus colour byte) from raw string bytes"""
    out = bytearray()
    i = 0
    while i < len(raw):
        if raw[i] == COLOR_ESCAPE:
            if i + 1 >= len(raw):
                raise MalformedStringError(f"Colour escape without colour byte in {raw!r}")
            i += 2
            continue
        out.append(raw[i])
        i += 1
    return bytes(out)


def read_string(cursor: ByteCursor) -> str:
    """Read a NUL terminated string and strip its colour codes"""
    end = cursor.find(0)
    raw = cursor.read_bytes(end - cursor.pos)
    cursor.next_byte()  # terminator
    return strip_colors(raw).decode(STRING_ENCODING)
