"""
Status records decoded from pong replies
"""

from dataclasses import dataclass, field
from typing import List, Optional

# Flags bitfield of the standard pong
MASTERMODE_SHIFT = 6
PASSWORD_FLAG = 0x01


@dataclass(frozen=True)
class StdPong:
    """Reply to the standard ping"""

    protocol: int
    mode: int
    player_count: int
    minutes_remaining: int
    current_map: str
    description: str
    max_clients: int
    flags: int

    @property
    def mastermode(self) -> int:
        return self.flags >> MASTERMODE_SHIFT

    @property
    def password(self) -> bool:
        """True when the server is password protected"""
        return bool(self.flags & PASSWORD_FLAG)

    def __str__(self) -> str:
        return (f"{self.description} [{self.current_map}] "
                f"{self.player_count}/{self.max_clients} players")


@dataclass(frozen=True)
class Player:
    """One connected player from an extended pong"""

    client_number: int
    ping: int
    name: str
    team: str
    frags: int
    flagscore: int
    deaths: int
    teamkills: int
    accuracy: int
    health: int
    armour: int
    gun_selected: int
    role: int
    state: int
    ip: str  # masked to the /24 network, e.g. "1.2.3.0/24"

    def __str__(self) -> str:
        return f"{self.name} ({self.team}) {self.frags}/{self.deaths} - {self.ping}ms"


@dataclass
class ExtPong:
    """Reply to the extended ping, merged from several datagrams"""

    ack: int = 0
    version: int = 0
    error_flag: int = 0
    ids_marker: Optional[int] = None
    stats_marker: Optional[int] = None
    player_count: int = 0
    players: List[Player] = field(default_factory=list)

    @property
    def has_server_info(self) -> bool:
        return self.ids_marker is not None
