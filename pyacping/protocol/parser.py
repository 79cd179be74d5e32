"""
Pong parsers

Standard pongs fit in one datagram. Extended pongs arrive as one server info
datagram plus one datagram per player, in no guaranteed order, so they are
merged by ExtPongAssembler until both the info packet and every announced
player have been seen.
"""

import ipaddress
import logging

from ..errors import ProtocolError
from ..models import ExtPong, Player, StdPong
from .constants import EXT_PLAYERSTATS_RESP_IDS
from .cursor import ByteCursor
from .scalars import read_int, read_string

logger = logging.getLogger(__name__)


def parse_std_pong(payload: bytes) -> StdPong:
    """Decode a standard pong (echoed request already removed)"""
    cursor = ByteCursor(payload)
    return StdPong(
        protocol=read_int(cursor),
        mode=read_int(cursor),
        player_count=read_int(cursor),
        minutes_remaining=read_int(cursor),
        current_map=read_string(cursor),
        description=read_string(cursor),
        max_clients=read_int(cursor),
        flags=read_int(cursor),
    )


def read_masked_ip(cursor: ByteCursor) -> str:
    """Read the three transmitted octets as a /24 network"""
    octets = cursor.read_bytes(3)
    network = ipaddress.ip_network(f"{octets[0]}.{octets[1]}.{octets[2]}.0/24")
    return str(network)


def parse_player(cursor: ByteCursor) -> Player:
    """Decode one player block"""
    return Player(
        client_number=read_int(cursor),
        ping=read_int(cursor),
        name=read_string(cursor),
        team=read_string(cursor),
        frags=read_int(cursor),
        flagscore=read_int(cursor),
        deaths=read_int(cursor),
        teamkills=read_int(cursor),
        accuracy=read_int(cursor),
        health=read_int(cursor),
        armour=read_int(cursor),
        gun_selected=read_int(cursor),
        role=read_int(cursor),
        state=read_int(cursor),
        ip=read_masked_ip(cursor),
    )


class ExtPongAssembler:
    """Merges extended pong datagrams into one ExtPong"""

    def __init__(self):
        self.pong = ExtPong()
        self.packets_seen = 0

    @property
    def complete(self) -> bool:
        """Server info received and every announced player received"""
        return self.pong.has_server_info and len(self.pong.players) >= self.pong.player_count

    def feed(self, payload: bytes) -> None:
        """Decode one datagram (echoed request already removed) and merge it

        The payload is fully decoded before anything is merged, so a decode
        error leaves the previously assembled state untouched.
        """
        cursor = ByteCursor(payload)
        ack = read_int(cursor)
        version = read_int(cursor)
        error_flag = read_int(cursor)
        player_stats_resp = read_int(cursor)

        if player_stats_resp == EXT_PLAYERSTATS_RESP_IDS:
            # Remaining bytes carry one entry per client, only the count matters
            player_count = cursor.skip_remaining()
            player = None
        else:
            player_count = None
            player = parse_player(cursor)

        pong = self.pong
        pong.ack = ack
        pong.version = version
        pong.error_flag = error_flag
        if player is None:
            if pong.has_server_info:
                logger.debug(f"Duplicate server info packet, player count {pong.player_count} -> {player_count}")
            pong.ids_marker = player_stats_resp
            pong.player_count = player_count
        else:
            pong.stats_marker = player_stats_resp
            if any(p.client_number == player.client_number for p in pong.players):
                logger.debug(f"Duplicate player packet for client {player.client_number} dropped")
            else:
                pong.players.append(player)
        self.packets_seen += 1

        expected = pong.player_count if pong.has_server_info else "?"
        logger.debug(f"Extended pong packet {self.packets_seen} merged: {len(pong.players)}/{expected} players")

    def result(self) -> ExtPong:
        """The assembled pong; only valid once complete"""
        if not self.complete:
            raise ProtocolError(
                f"Extended pong incomplete after {self.packets_seen} packets"
            )
        return self.pong
