"""
Testing helpers for pyacping
"""

from .mock_server import MockPongServer, build_ext_info, build_ext_player, build_int, build_std_reply

__all__ = [
    'MockPongServer',
    'build_ext_info',
    'build_ext_player',
    'build_int',
    'build_std_reply',
]
