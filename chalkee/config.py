# config.py

import os
from dataclasses import dataclass

from .logger import logger

@dataclass
class ColorConfig:
    """
    Process-wide rendering configuration.

    The flag is read every time a styled chain is turned into a string,
    never when the chain is built.
    """
    color_enabled: bool = True

    @classmethod
    def from_env(cls) -> "ColorConfig":
        """Honour the NO_COLOR convention for the initial value."""
        return cls(color_enabled=not os.environ.get('NO_COLOR'))


_config = ColorConfig.from_env()

def set_global_color_enabled(enabled: bool) -> None:
    """Enable or disable escape-code emission for every styler."""
    enabled = bool(enabled)
    if enabled != _config.color_enabled:
        logger.debug(f"Color output {'enabled' if enabled else 'disabled'}")
    _config.color_enabled = enabled

def is_color_enabled() -> bool:
    return _config.color_enabled
