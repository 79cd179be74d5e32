"""
Exceptions raised by pyacping
"""


class PingError(Exception):
    """Base exception for every failure of a ping operation"""
    pass


class TransportError(PingError):
    """Raised when the socket cannot be created, used or resolved"""
    pass


class PingTimeoutError(TransportError):
    """Raised when no reply datagram arrives before the read deadline"""
    pass


class ProtocolError(PingError):
    """Base exception for malformed replies"""
    pass


class OutOfRangeError(ProtocolError):
    """Raised when a decoder reads past the end of a payload"""
    pass


class MalformedStringError(ProtocolError):
    """Raised when a string ends with a colour escape missing its colour byte"""
    pass
