# style/definitions.py

import re
from enum import Enum
from dataclasses import dataclass
from typing import Dict, Tuple

from ..errors import UnknownStyle
from ..logger import logger

class StyleKind(Enum):
    FOREGROUND = 'foreground'
    BACKGROUND = 'background'
    MODIFIER = 'modifier'
    RESET = 'reset'

@dataclass(frozen=True)
class StyleAttribute:
    """
    A single registry entry.

    Foreground attributes also carry the codes they turn into when a
    chain is in background mode.
    """
    name: str
    kind: StyleKind
    codes: Tuple[int, ...]
    background_codes: Tuple[int, ...] = ()

COLORS = {
    'black': 0, 'red': 1, 'green': 2, 'yellow': 3,
    'blue': 4, 'magenta': 5, 'cyan': 6, 'white': 7,
}

MODIFIERS = {
    'bold': 1, 'dim': 2, 'italic': 3, 'underline': 4,
    'inverse': 7, 'hidden': 8, 'strikethrough': 9,
}

ALIASES = {
    'b': 'bold', 'd': 'dim', 'i': 'italic', 'u': 'underline',
    's': 'strikethrough', 'r': 'reset',
    'gray': 'black_bright', 'grey': 'black_bright',
    'bg_gray': 'bg_black_bright', 'bg_grey': 'bg_black_bright',
}

RESET_CODE = 0

def _build_registry() -> Dict[str, StyleAttribute]:
    registry = {}
    for color, offset in COLORS.items():
        for suffix, fg, bg in (('', 30, 40), ('_bright', 90, 100)):
            name = f'{color}{suffix}'
            registry[name] = StyleAttribute(
                name, StyleKind.FOREGROUND, (fg + offset,), (bg + offset,))
            registry[f'bg_{name}'] = StyleAttribute(
                f'bg_{name}', StyleKind.BACKGROUND, (bg + offset,))
    for name, code in MODIFIERS.items():
        registry[name] = StyleAttribute(name, StyleKind.MODIFIER, (code,))
    registry['reset'] = StyleAttribute('reset', StyleKind.RESET, (RESET_CODE,))
    for alias, target in ALIASES.items():
        registry[alias] = registry[target]
    return registry

STYLES: Dict[str, StyleAttribute] = _build_registry()
STYLE_NAMES: Tuple[str, ...] = tuple(STYLES)

_CAMEL_RE = re.compile(r'(?<=[a-z])([A-Z])')

def resolve_style(name: str) -> StyleAttribute:
    """
    Look up a style by snake_case name, camelCase name or alias.

    Raises:
        UnknownStyle: if no registry entry matches
    """
    attr = STYLES.get(name)
    if attr is None:
        snake, count = _CAMEL_RE.subn(r'_\1', name)
        if count:
            attr = STYLES.get(snake.lower())
    if attr is None:
        logger.debug(f"Unknown style lookup: {name!r}")
        raise UnknownStyle(name)
    return attr

def ansi256_attribute(index: int, background: bool = False) -> StyleAttribute:
    """Build the extended-palette attribute for a 0-255 palette index."""
    fg = (38, 5, index)
    bg = (48, 5, index)
    if background:
        return StyleAttribute(f'bg_ansi256_{index}', StyleKind.BACKGROUND, bg)
    return StyleAttribute(f'ansi256_{index}', StyleKind.FOREGROUND, fg, bg)
