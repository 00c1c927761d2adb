"""Adalight LED Strip Python Driver"""

from .color import BLACK, Color, hsv_to_rgb, lerp_color
from .constants import DEFAULT_BAUD, HEADER_SIZE, MAX_HEADER_COUNT
from .controller import LedController, WriteResult, get_controller
from .exceptions import (
    AdalightError,
    ConfigurationError,
    ConnectionError,
    IndexRangeError,
    LengthMismatchError,
    NotOpenError,
    TransportError,
    ValidationError,
)
from .frame import FrameBuffer

__all__ = [
    "AdalightError",
    "BLACK",
    "Color",
    "ConfigurationError",
    "ConnectionError",
    "DEFAULT_BAUD",
    "FrameBuffer",
    "HEADER_SIZE",
    "IndexRangeError",
    "LedController",
    "LengthMismatchError",
    "MAX_HEADER_COUNT",
    "NotOpenError",
    "TransportError",
    "ValidationError",
    "WriteResult",
    "get_controller",
    "hsv_to_rgb",
    "lerp_color",
]
__version__ = "0.1.0"
