"""
Logging setup for pyacping

Library modules only create loggers with ``logging.getLogger(__name__)``.
Applications that want output call configure_logging(), which puts a single
handler on the ``pyacping`` package logger; each line is tagged with the
sub-package that produced it.
"""

import logging
from typing import Optional, TextIO

PACKAGE_LOGGER = 'pyacping'

# Longest matching logger name wins
PREFIXES = {
    'pyacping.protocol': '[PROTO]',
    'pyacping.transport': '[NET]',
    'pyacping.pinger': '[PING]',
    'pyacping.testing': '[MOCK]',
    'pyacping.cli': '[CLI]',
}


def prefix_for(name: str) -> str:
    """Tag for a logger name, e.g. '[PROTO]' for pyacping.protocol.parser"""
    matches = [key for key in PREFIXES if name == key or name.startswith(key + '.')]
    if not matches:
        return '[PYACPING]'
    return PREFIXES[max(matches, key=len)]


class PrefixFormatter(logging.Formatter):
    """Adds the sub-package tag of the emitting logger as %(prefix)s"""

    def format(self, record):
        record.prefix = prefix_for(record.name)
        return super().format(record)


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """Send pyacping log records to stream (stderr by default)

    Calling it again replaces the previous handler instead of adding another.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler.formatter, PrefixFormatter):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(PrefixFormatter(
        fmt='%(asctime)s - %(prefix)s %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger


def hexdump(data: bytes) -> str:
    """Space separated hex bytes, for packet debugging"""
    return ' '.join(f'{b:02x}' for b in data)
