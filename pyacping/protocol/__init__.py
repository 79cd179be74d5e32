"""
Wire protocol for the ping/pong status query
"""

from .cursor import ByteCursor
from .scalars import read_int, read_string, strip_colors
from .parser import ExtPongAssembler, parse_player, parse_std_pong

__all__ = [
    'ByteCursor',
    'read_int',
    'read_string',
    'strip_colors',
    'ExtPongAssembler',
    'parse_player',
    'parse_std_pong',
]
