"""
pyacping Utilities
"""

from .logging_config import PrefixFormatter, configure_logging, hexdump, prefix_for

__all__ = [
    'PrefixFormatter',
    'configure_logging',
    'hexdump',
    'prefix_for',
]
