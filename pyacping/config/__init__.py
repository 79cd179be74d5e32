"""
Configuration system for pyacping
"""

from .pinger_config import PingerConfig
from .validation import ConfigValidationError

__all__ = ['PingerConfig', 'ConfigValidationError']
