"""
Sequential byte cursor used by every pong decoder
"""

from ..errors import OutOfRangeError


class ByteCursor:
    """Reads a payload front to back, tracking the read position"""

    def __init__(self, data: bytes, pos: int = 0):
        if pos < 0 or pos > len(data):
            raise OutOfRangeError(f"Start position {pos} outside payload of {len(data)} bytes")
        self.data = data
        self.pos = pos

    def __repr__(self) -> str:
        return f"ByteCursor(pos={self.pos}, size={len(self.data)})"

    def peekable(self) -> bool:
        """True while unread bytes remain"""
        return self.pos < len(self.data)

    def remaining(self) -> int:
        """Bytes remaining to read"""
        return len(self.data) - self.pos

    def next_byte(self) -> int:
        """Read a single byte"""
        if self.pos >= len(self.data):
            raise OutOfRangeError(f"Read past end of payload at offset {self.pos}")
        value = self.data[self.pos]
        self.pos += 1
        return value

    def read_bytes(self, size: int) -> bytes:
        """Read a fixed number of bytes"""
        if self.remaining() < size:
            raise OutOfRangeError(
                f"Need {size} bytes at offset {self.pos}, only {self.remaining()} left"
            )
        chunk = self.data[self.pos:self.pos + size]
        self.pos += size
        return chunk

    def find(self, value: int) -> int:
        """Index of the next occurrence of a byte value, without advancing"""
        index = self.data.find(bytes([value]), self.pos)
        if index == -1:
            raise OutOfRangeError(f"No byte {value:#04x} after offset {self.pos}")
        return index

    def skip_remaining(self) -> int:
        """Consume all unread bytes and return how many there were"""
        count = self.remaining()
        self.pos = len(self.data)
        return count
