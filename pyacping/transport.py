"""
UDP transport for the ping/pong protocol

One PingTransport owns one socket for the lifetime of one ping. Servers echo
the request in front of every reply, so receive() strips it before handing the
payload to a parser.

The socket is left unconnected: an ICMP port-unreachable from a host with no
listener is never reported, so a missing server always runs into the read
deadline and raises PingTimeoutError. Datagrams from any other address are
dropped.
"""

import logging
import socket
import time
from typing import Optional

from .config import PingerConfig
from .config.validation import validate_timeout
from .errors import OutOfRangeError, PingTimeoutError, TransportError
from .utils.logging_config import hexdump

logger = logging.getLogger(__name__)


class PingTransport:
    """UDP socket talking to a server's status port

    Usage:
        with PingTransport("127.0.0.1", 28763) as transport:
            transport.send(STD_PING_MSG)
            payload = transport.receive(3.0)
    """

    def __init__(self, host: str, port: int, config: Optional[PingerConfig] = None):
        """
        Args:
            host: Server hostname or IP
            port: Game port; the status port is port + config.port_offset
            config: Pinger configuration (defaults if omitted)
        """
        self.config = config or PingerConfig()
        self.host = host
        self.port = port
        self.status_port = port + self.config.port_offset
        self._socket: Optional[socket.socket] = None
        self._request = b''
        self._address = None

    @property
    def is_open(self) -> bool:
        return self._socket is not None

    @property
    def local_address(self):
        """Address replies are sent to; bound by the first send"""
        if self._socket is None:
            raise TransportError("Transport is not open")
        return self._socket.getsockname()

    def open(self) -> None:
        """Resolve the status address and create the socket"""
        if self._socket is not None:
            raise TransportError("Transport is already open")

        try:
            infos = socket.getaddrinfo(self.host, self.status_port, type=socket.SOCK_DGRAM)
        except socket.gaierror as e:
            raise TransportError(f"Cannot resolve {self.host}: {e}") from e

        family, socktype, proto, _, address = infos[0]
        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as e:
            raise TransportError(f"Cannot create socket: {e}") from e

        self._socket = sock
        self._address = address
        logger.debug(f"Opened UDP socket for {address[0]}:{address[1]}")

    def close(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None
            logger.debug(f"Closed UDP socket to {self.host}:{self.status_port}")

    def __enter__(self) -> 'PingTransport':
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def send(self, request: bytes) -> None:
        """Send a request payload; replies are expected to echo it"""
        if self._socket is None:
            raise TransportError("Transport is not open")

        try:
            self._socket.sendto(request, self._address)
        except OSError as e:
            raise TransportError(f"Send to {self.host}:{self.status_port} failed: {e}") from e

        self._request = request
        if self.config.debug_packets:
            logger.debug(f"Sent {len(request)} bytes: {hexdump(request)}")

    def receive(self, timeout: float) -> bytes:
        """Receive one reply datagram with the echoed request removed"""
        if self._socket is None:
            raise TransportError("Transport is not open")

        timeout = validate_timeout(timeout)
        deadline = time.monotonic() + timeout
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise PingTimeoutError(
                    f"No reply from {self.host}:{self.status_port} within {timeout}s"
                )

            self._socket.settimeout(remaining)
            try:
                data, sender = self._socket.recvfrom(self.config.buffer_size)
            except socket.timeout as e:
                raise PingTimeoutError(
                    f"No reply from {self.host}:{self.status_port} within {timeout}s"
                ) from e
            except (ConnectionRefusedError, ConnectionResetError) as e:
                # Some platforms still surface ICMP errors on unconnected sockets
                logger.debug(f"Ignoring {e} while waiting for {self.host}:{self.status_port}")
                continue
            except OSError as e:
                raise TransportError(f"Receive from {self.host}:{self.status_port} failed: {e}") from e

            if sender[:2] != self._address[:2]:
                logger.debug(f"Dropped {len(data)} bytes from {sender[0]}:{sender[1]}")
                continue
            break

        if self.config.debug_packets:
            logger.debug(f"Received {len(data)} bytes: {hexdump(data)}")

        if len(data) < len(self._request):
            raise OutOfRangeError(
                f"Reply of {len(data)} bytes shorter than echoed request of {len(self._request)}"
            )
        return data[len(self._request):]
