"""
pyacping - A client for the game server UDP ping/pong status protocol

Usage:
    from pyacping import ping_std, ping_ext

    pong = ping_std("127.0.0.1", 28763)
    print(f"{pong.description}: {pong.player_count}/{pong.max_clients} on {pong.current_map}")

    pong = ping_ext("127.0.0.1", 28763, timeout=5)
    for player in pong.players:
        print(f"{player.name} ({player.team}) from {player.ip}")

The port is always the game port; the status port (game port + 1) is derived
from it. A timeout of 0 uses the default of 3 seconds per datagram.
"""

__version__ = "1.0.0"

from .errors import (
    PingError,
    TransportError,
    PingTimeoutError,
    ProtocolError,
    OutOfRangeError,
    MalformedStringError,
)
from .models import StdPong, ExtPong, Player
from .config import PingerConfig, ConfigValidationError
from .pinger import ping_std, ping_ext

__all__ = [
    "ping_std",
    "ping_ext",
    "StdPong",
    "ExtPong",
    "Player",
    "PingerConfig",
    "PingError",
    "TransportError",
    "PingTimeoutError",
    "ProtocolError",
    "OutOfRangeError",
    "MalformedStringError",
    "ConfigValidationError",
]
