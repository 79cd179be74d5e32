"""
Configuration validation utilities
"""

from ..errors import PingError
from ..protocol.constants import PORT_OFFSET


class ConfigValidationError(PingError):
    """Raised when configuration validation fails"""
    pass


def validate_host(host: str) -> str:
    """Validate host address"""
    if not host or not isinstance(host, str):
        raise ConfigValidationError("Host must be a non-empty string")

    if len(host.strip()) == 0:
        raise ConfigValidationError("Host cannot be empty or whitespace")

    return host.strip()


def validate_port(port: int, offset: int = PORT_OFFSET) -> int:
    """Validate a game port; its status port (port + offset) must be valid too"""
    if not isinstance(port, int) or isinstance(port, bool):
        raise ConfigValidationError("Port must be an integer")

    if port < 1 or port + offset > 65535:
        raise ConfigValidationError(f"Port must be between 1 and {65535 - offset}")

    return port


def validate_timeout(timeout: float) -> float:
    """Validate timeout value"""
    if not isinstance(timeout, (int, float)) or isinstance(timeout, bool):
        raise ConfigValidationError("Timeout must be a number")

    if timeout <= 0:
        raise ConfigValidationError("Timeout must be greater than 0")

    return float(timeout)


def validate_buffer_size(size: int) -> int:
    """Validate receive buffer size"""
    if not isinstance(size, int) or isinstance(size, bool):
        raise ConfigValidationError("Buffer size must be an integer")

    if size < 64 or size > 65535:
        raise ConfigValidationError("Buffer size must be between 64 and 65535")

    return size
