"""
Ping operations

Both operations open their own transport, so any number of pings, even to the
same server, can run concurrently from different threads.
"""

import logging
from typing import Optional

from .config import PingerConfig
from .config.validation import validate_host, validate_port
from .models import ExtPong, StdPong
from .protocol.constants import EXT_PING_MSG, STD_PING_MSG
from .protocol.parser import ExtPongAssembler, parse_std_pong
from .transport import PingTransport

logger = logging.getLogger(__name__)


def ping_std(host: str, port: int, timeout: float = 0,
             config: Optional[PingerConfig] = None) -> StdPong:
    """Send the standard ping and parse the reply

    Args:
        host: Server hostname or IP
        port: Game port (the status port is one above it)
        timeout: Read timeout in seconds, 0 for the configured default
        config: Pinger configuration (defaults if omitted)

    Raises:
        TransportError: socket failure or timeout (PingTimeoutError)
        ProtocolError: malformed reply
    """
    config = (config or PingerConfig()).validate()
    host = validate_host(host)
    validate_port(port, config.port_offset)
    read_timeout = config.resolve_timeout(timeout)

    with PingTransport(host, port, config) as transport:
        transport.send(STD_PING_MSG)
        pong = parse_std_pong(transport.receive(read_timeout))

    logger.info(f"{host}:{port} - {pong}")
    return pong


def ping_ext(host: str, port: int, timeout: float = 0,
             config: Optional[PingerConfig] = None) -> ExtPong:
    """Send the extended ping and assemble the reply with all players

    The timeout applies to each datagram, not to the whole exchange.
    """
    config = (config or PingerConfig()).validate()
    host = validate_host(host)
    validate_port(port, config.port_offset)
    read_timeout = config.resolve_timeout(timeout)

    assembler = ExtPongAssembler()
    with PingTransport(host, port, config) as transport:
        transport.send(EXT_PING_MSG)
        # A player packet may arrive before the server info packet
        while not assembler.complete:
            assembler.feed(transport.receive(read_timeout))

    pong = assembler.result()
    logger.info(f"{host}:{port} - {pong.player_count} players in {assembler.packets_seen} packets")
    return pong
