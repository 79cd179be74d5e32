"""
Protocol constants for pyacping
"""

# The status port is always the game port + 1
PORT_OFFSET = 1

# Anything other than 0 requests the standard pong
STD_PING_MSG = b'\x01'

# 0 = extended pong, 1 = include player stats, -1 = all players
# (instead of a single client number)
EXT_PING_MSG = b'\x00\x01\xff'

# Integer escape codes, as signed byte values
INT_ESCAPE_16 = -128  # 0x80
INT_ESCAPE_32 = -127  # 0x81

# Extended pong discriminators, as decoded signed ints
EXT_PLAYERSTATS_RESP_IDS = -10    # 0xF6, server info packet
EXT_PLAYERSTATS_RESP_STATS = -11  # 0xF5, one player per packet

# Colour codes are "\f" followed by the colour index
COLOR_ESCAPE = 0x0C

STRING_ENCODING = 'latin-1'

# Defaults
DEFAULT_READ_TIMEOUT = 3.0
DEFAULT_BUFFER_SIZE = 1024
DEFAULT_GAME_PORT = 28763
