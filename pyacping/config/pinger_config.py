"""
Pinger Configuration
"""

from dataclasses import dataclass, fields
from typing import Dict, Any

from ..protocol.constants import DEFAULT_BUFFER_SIZE, DEFAULT_READ_TIMEOUT, PORT_OFFSET
from .validation import (
    ConfigValidationError, validate_buffer_size, validate_timeout
)


@dataclass
class PingerConfig:
    """Pinger configuration settings"""

    # Network
    read_timeout: float = DEFAULT_READ_TIMEOUT
    buffer_size: int = DEFAULT_BUFFER_SIZE
    port_offset: int = PORT_OFFSET

    # Logging
    log_level: str = "INFO"
    debug_packets: bool = False

    def resolve_timeout(self, timeout: float = 0) -> float:
        """Per-call timeout, where 0 means use the configured default"""
        if not timeout:
            return validate_timeout(self.read_timeout)
        return validate_timeout(timeout)

    def validate(self) -> 'PingerConfig':
        """Check every field, raising ConfigValidationError on the first bad one"""
        validate_timeout(self.read_timeout)
        validate_buffer_size(self.buffer_size)
        if not isinstance(self.port_offset, int) or self.port_offset < 0:
            raise ConfigValidationError("Port offset must be a non-negative integer")
        if str(self.log_level).upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigValidationError(f"Unknown log level: {self.log_level}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'read_timeout': self.read_timeout,
            'buffer_size': self.buffer_size,
            'port_offset': self.port_offset,
            'log_level': self.log_level,
            'debug_packets': self.debug_packets,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PingerConfig':
        """Create from dictionary, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def update(self, **kwargs):
        """Update configuration values"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
