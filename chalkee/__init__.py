# __init__.py

from .config import set_global_color_enabled, is_color_enabled
from .errors import ChalkeeError, InvalidColorFormat, UnknownStyle, InvalidInvocation
from .logger import Logger, configure_logging
from .style import STYLE_NAMES, StyleState, hex_to_ansi256, rgb_to_ansi256
from .styler import Styler

_root = Styler()

# One top-level styler per registry name: red, bg_blue_bright, bold, b, reset...
for _name in STYLE_NAMES:
    globals()[_name] = getattr(_root, _name)
del _name

as_ = _root.as_
bg = _root.bg

hex = _root.hex
rgb = _root.rgb
bg_hex = _root.bg_hex
bg_rgb = _root.bg_rgb

__all__ = [
    *STYLE_NAMES,
    "as_", "bg", "hex", "rgb", "bg_hex", "bg_rgb",
    "Styler", "StyleState", "hex_to_ansi256", "rgb_to_ansi256",
    "ChalkeeError", "InvalidColorFormat", "UnknownStyle", "InvalidInvocation",
    "set_global_color_enabled", "is_color_enabled",
    "Logger", "configure_logging",
]

def __getattr__(name: str):
    """Resolve camelCase spellings such as ``bgRedBright`` on first use."""
    if name.startswith('_'):
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(_root, name)
