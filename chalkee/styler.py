# styler.py

from typing import List, Optional, Sequence, Union

from rich.text import Text
from prompt_toolkit.formatted_text import ANSI

from .config import is_color_enabled, set_global_color_enabled
from .errors import InvalidColorFormat, InvalidInvocation
from .logger import logger
from .style.colors import hex_to_ansi256, rgb_to_ansi256
from .style.definitions import (
    STYLE_NAMES, STYLES, StyleAttribute, ansi256_attribute, resolve_style
)
from .style.state import Segment, StyleChain, StyleState

class Styler:
    """
    Callable, chainable style object.

    A Styler pairs the style state for upcoming text with the segments
    already captured in its chain. Calling it captures a new segment and
    returns a new Styler; reading a style name off it returns a new Styler
    with that style added. Nothing is rendered until the Styler is turned
    into a string, so the global color flag is honoured at that moment.

    Example:
        red("Error:").bold(" file not found")
        bg.red("first").blue("second")
        red("a").as_.green("b")
    """
    __slots__ = ('_state', '_chain', '_spacing')

    def __init__(self, state: Optional[StyleState] = None,
                 chain: Optional[StyleChain] = None,
                 spacing: bool = False):
        """
        Args:
            state: Style applied to the next captured text
            chain: Segments captured so far
            spacing: Insert a bare space before each further segment
        """
        self._state = state if state is not None else StyleState()
        self._chain = chain if chain is not None else StyleChain()
        self._spacing = spacing

    @property
    def state(self) -> StyleState:
        return self._state

    @property
    def chain(self) -> StyleChain:
        return self._chain

    def _derive(self, state: Optional[StyleState] = None,
                chain: Optional[StyleChain] = None,
                spacing: Optional[bool] = None) -> "Styler":
        return Styler(
            state if state is not None else self._state,
            chain if chain is not None else self._chain,
            self._spacing if spacing is None else spacing,
        )

    def with_style(self, attr: StyleAttribute) -> "Styler":
        """Return a Styler with one more registry attribute applied."""
        state = self._state.extend(attr)
        if self._state.background_mode:
            state = state.with_background_mode()
        return self._derive(state=state)

    # Call conventions

    @staticmethod
    def _piece(value) -> Union[str, StyleChain]:
        """Convert one styled value; nested stylers keep their chain."""
        if isinstance(value, Styler):
            return value._chain
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise InvalidInvocation(
                f"Cannot style a value of type {type(value).__name__}")
        return str(value)

    def _capture(self, pieces: List[Union[str, StyleChain]]) -> "Styler":
        if all(isinstance(p, str) for p in pieces):
            text = ''.join(pieces)
        else:
            text = tuple(pieces)
        segment = Segment(text, self._state,
                          spaced=self._spacing and len(self._chain) > 0)
        return self._derive(chain=self._chain.append(segment))

    def apply(self, text) -> "Styler":
        """
        Capture text with the current style.

        Args:
            text: str, int, float or another Styler. A nested Styler is
                  rendered together with this chain.

        Returns:
            A Styler whose chain ends with the new segment
        """
        return self._capture([self._piece(text)])

    def apply_parts(self, parts: Sequence[str], *values) -> "Styler":
        """
        Template entry point: interleave values between literal parts.

        apply_parts(["Found ", " photos"], 3) styles "Found 3 photos".
        Values accept the same types as apply().
        """
        if not isinstance(parts, (list, tuple)) or not all(isinstance(p, str) for p in parts):
            raise InvalidInvocation("Template parts must be a sequence of strings")
        if len(values) != max(len(parts) - 1, 0):
            raise InvalidInvocation(
                f"Expected {max(len(parts) - 1, 0)} interpolated values, got {len(values)}")
        pieces = [parts[0]] if parts else []
        for value, part in zip(values, parts[1:]):
            pieces.append(self._piece(value))
            pieces.append(part)
        return self._capture(pieces)

    def __call__(self, *args) -> "Styler":
        if args and isinstance(args[0], (list, tuple)):
            return self.apply_parts(args[0], *args[1:])
        if len(args) == 1:
            return self.apply(args[0])
        raise InvalidInvocation(
            f"Styler takes one value or template parts, got {len(args)} arguments")

    # Chain operators

    @property
    def bg(self) -> "Styler":
        """Redirect foreground colors chained from here to the background."""
        return self._derive(state=self._state.with_background_mode())

    @property
    def as_(self) -> "Styler":
        """Separate every further segment with a single unstyled space."""
        return self._derive(spacing=True)

    def __getattr__(self, name: str) -> "Styler":
        if name.startswith('_'):
            raise AttributeError(name)
        if name == 'as':
            return self.as_
        return self.with_style(resolve_style(name))

    # Color factories

    def _palette(self, index: int, background: bool) -> "Styler":
        return self.with_style(ansi256_attribute(index, background))

    def hex(self, value: str) -> "Styler":
        return self._palette(self._checked(hex_to_ansi256, value), False)

    def rgb(self, r: int, g: int, b: int) -> "Styler":
        return self._palette(self._checked(rgb_to_ansi256, r, g, b), False)

    def bg_hex(self, value: str) -> "Styler":
        return self._palette(self._checked(hex_to_ansi256, value), True)

    def bg_rgb(self, r: int, g: int, b: int) -> "Styler":
        return self._palette(self._checked(rgb_to_ansi256, r, g, b), True)

    bgHex = bg_hex
    bgRgb = bg_rgb

    @staticmethod
    def _checked(convert, *args) -> int:
        try:
            return convert(*args)
        except InvalidColorFormat as e:
            logger.debug(f"Rejected color {args!r}: {e}")
            raise

    # Global color flag

    @property
    def no_color(self) -> bool:
        return not is_color_enabled()

    @no_color.setter
    def no_color(self, value: bool) -> None:
        set_global_color_enabled(not value)

    # Rendering

    def __str__(self) -> str:
        return self._chain.render(is_color_enabled())

    __repr__ = __str__

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __add__(self, other):
        if isinstance(other, (str, Styler)):
            return str(self) + str(other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, str):
            return other + str(self)
        return NotImplemented

    def __rich__(self) -> Text:
        """Let rich consoles print the styled chain."""
        return Text.from_ansi(str(self))

    def __pt_formatted_text__(self):
        """Let prompt_toolkit print and prompt with the styled chain."""
        return ANSI(str(self)).__pt_formatted_text__()


def _style_property(name: str) -> property:
    attr = STYLES[name]

    def getter(self: Styler) -> Styler:
        return self.with_style(attr)

    getter.__name__ = name
    getter.__doc__ = f"Chain the '{attr.name}' style."
    return property(getter)

# Dynamically create one chaining accessor per registry name
for _name in STYLE_NAMES:
    setattr(Styler, _name, _style_property(_name))
