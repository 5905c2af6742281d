# style/colors.py

import re
from typing import Tuple

from ..errors import InvalidColorFormat

HEX_RE = re.compile(r'#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})')

# 6x6x6 color cube occupying palette indices 16-231
CUBE_OFFSET = 16
CUBE_LEVELS = 5

def parse_hex(value: str) -> Tuple[int, int, int]:
    """
    Parse a 3- or 6-digit hex color into an (r, g, b) tuple.

    Args:
        value: Color such as '#f00', 'ff0000' or '#FF0000'

    Returns:
        Channel values in the range 0-255
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(f"Hex color must be a string, got {type(value).__name__}")
    match = HEX_RE.fullmatch(value.strip())
    if not match:
        raise InvalidColorFormat(f"Invalid hex color '{value}'")
    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(d * 2 for d in digits)
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))

def _channel_level(channel) -> int:
    # bool is an int subclass but never a meaningful channel
    if isinstance(channel, bool) or not isinstance(channel, int):
        raise InvalidColorFormat(f"RGB channel must be an int, got {channel!r}")
    if not 0 <= channel <= 255:
        raise InvalidColorFormat(f"RGB channel {channel} out of range 0-255")
    return int(channel / 255 * CUBE_LEVELS + 0.5)

def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """Quantize an RGB triple onto the 216-color cube of the 256 palette."""
    return (CUBE_OFFSET
            + 36 * _channel_level(r)
            + 6 * _channel_level(g)
            + _channel_level(b))

def hex_to_ansi256(value: str) -> int:
    return rgb_to_ansi256(*parse_hex(value))
