# style/state.py

from dataclasses import dataclass, replace
from typing import Tuple, Union

from .definitions import StyleAttribute, StyleKind

CSI = '\033['
FMT = lambda x: f'{CSI}{x}m'
RESET = FMT('0')

@dataclass(frozen=True)
class StyleState:
    """
    Immutable accumulation of the SGR codes applied to upcoming text.

    Codes render in the order modifiers, foreground, background. Nothing
    is deduplicated, so chaining the same style twice emits its code twice.
    In background mode the codes of the latest redirected color sit at
    background[redirect_start:redirect_start + redirect_len].
    """
    foreground: Tuple[int, ...] = ()
    background: Tuple[int, ...] = ()
    modifiers: Tuple[int, ...] = ()
    background_mode: bool = False
    reset: bool = False
    redirect_start: int = 0
    redirect_len: int = 0

    def extend(self, attr: StyleAttribute) -> "StyleState":
        """Return a new state with one more attribute applied."""
        if attr.kind is StyleKind.RESET:
            return StyleState(reset=True)
        if attr.kind is StyleKind.MODIFIER:
            return replace(self, modifiers=self.modifiers + attr.codes, reset=False)
        if attr.kind is StyleKind.BACKGROUND:
            return replace(self, background=self.background + attr.codes, reset=False)
        if self.background_mode:
            return self._redirect(attr.background_codes)
        return replace(self, foreground=self.foreground + attr.codes, reset=False)

    def _redirect(self, codes: Tuple[int, ...]) -> "StyleState":
        # Swap only the previous redirected color; explicit backgrounds stay
        if self.redirect_len:
            start = self.redirect_start
            end = start + self.redirect_len
            background = self.background[:start] + codes + self.background[end:]
        else:
            start = len(self.background)
            background = self.background + codes
        return replace(self, background=background, reset=False,
                       redirect_start=start, redirect_len=len(codes))

    def with_background_mode(self) -> "StyleState":
        return replace(self, background_mode=True)

    def codes(self) -> Tuple[int, ...]:
        return self.modifiers + self.foreground + self.background

    def render(self, text: str, color_enabled: bool = True) -> str:
        """
        Wrap text in the escape sequence for this state.

        A bare reset state emits only the trailing reset, and keeps doing
        so when color output is disabled.
        """
        codes = self.codes()
        if codes and color_enabled:
            return f"{FMT(';'.join(str(c) for c in codes))}{text}{RESET}"
        if self.reset and not codes:
            return f"{text}{RESET}"
        return text


@dataclass(frozen=True)
class Segment:
    """
    Literal text paired with the state active when it was captured.

    text is either a plain string or a tuple of strings and nested chains;
    nested chains are rendered together with the outer one so they honour
    the same color flag.
    """
    text: Union[str, Tuple[Union[str, "StyleChain"], ...]]
    state: StyleState
    spaced: bool = False

    def render_text(self, color_enabled: bool = True) -> str:
        if isinstance(self.text, str):
            return self.text
        return ''.join(
            piece if isinstance(piece, str) else piece.render(color_enabled)
            for piece in self.text
        )

    def render(self, color_enabled: bool = True) -> str:
        # The separating space is always bare
        prefix = ' ' if self.spaced else ''
        return prefix + self.state.render(self.render_text(color_enabled), color_enabled)


@dataclass(frozen=True)
class StyleChain:
    """Ordered sequence of captured segments."""
    segments: Tuple[Segment, ...] = ()

    def append(self, segment: Segment) -> "StyleChain":
        return StyleChain(self.segments + (segment,))

    def render(self, color_enabled: bool = True) -> str:
        return ''.join(s.render(color_enabled) for s in self.segments)

    def __len__(self) -> int:
        return len(self.segments)
