"""
Command line pinger

    pyacping 127.0.0.1 28763
    pyacping 127.0.0.1 28763 --extended
"""

import argparse
import logging
import sys

from . import __version__
from .config import PingerConfig
from .errors import PingError
from .models import ExtPong, StdPong
from .pinger import ping_ext, ping_std
from .protocol.constants import DEFAULT_GAME_PORT
from .utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def print_std(pong: StdPong):
    print(f"Description:  {pong.description}")
    print(f"Map:          {pong.current_map}")
    print(f"Mode:         {pong.mode}")
    print(f"Players:      {pong.player_count}/{pong.max_clients}")
    print(f"Minutes left: {pong.minutes_remaining}")
    print(f"Protocol:     {pong.protocol}")
    print(f"Mastermode:   {pong.mastermode}")
    print(f"Password:     {'yes' if pong.password else 'no'}")


def print_ext(pong: ExtPong):
    print(f"Version: {pong.version}  Players: {pong.player_count}")
    if not pong.players:
        return

    print("=" * 72)
    print(f"{'CN':<4} {'Name':<16} {'Team':<6} {'Frags':>6} {'Deaths':>7} {'Ping':>6}  {'Network':<18}")
    print("=" * 72)
    for p in sorted(pong.players, key=lambda p: p.client_number):
        print(f"{p.client_number:<4} {p.name[:16]:<16} {p.team[:6]:<6} "
              f"{p.frags:>6} {p.deaths:>7} {p.ping:>6}  {p.ip:<18}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyacping",
        description="Query a game server's status over the UDP ping protocol",
    )
    parser.add_argument("host", help="server hostname or IP")
    parser.add_argument("port", nargs="?", type=int, default=DEFAULT_GAME_PORT,
                        help=f"game port (default {DEFAULT_GAME_PORT}); the status port is one above")
    parser.add_argument("-e", "--extended", action="store_true",
                        help="request the extended pong with player stats")
    parser.add_argument("-t", "--timeout", type=float, default=0,
                        help="read timeout in seconds (default %.0f)" % PingerConfig.read_timeout)
    parser.add_argument("-d", "--debug", action="store_true",
                        help="log packets")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = PingerConfig(log_level="DEBUG" if args.debug else "WARNING",
                          debug_packets=args.debug)
    configure_logging(getattr(logging, config.log_level))

    try:
        if args.extended:
            print_ext(ping_ext(args.host, args.port, args.timeout, config))
        else:
            print_std(ping_std(args.host, args.port, args.timeout, config))
    except PingError as e:
        logger.debug("Ping failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
