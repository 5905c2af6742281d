# style/__init__.py

from .colors import hex_to_ansi256, rgb_to_ansi256, parse_hex
from .definitions import (
    StyleKind, StyleAttribute, STYLES, STYLE_NAMES, resolve_style, ansi256_attribute
)
from .state import StyleState, Segment, StyleChain, RESET

__all__ = [
    'hex_to_ansi256', 'rgb_to_ansi256', 'parse_hex',
    'StyleKind', 'StyleAttribute', 'STYLES', 'STYLE_NAMES',
    'resolve_style', 'ansi256_attribute',
    'StyleState', 'Segment', 'StyleChain', 'RESET',
]
