"""Projection of calculator state onto a display view."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from pocketcalc.config import settings
from pocketcalc.state import CalculatorState

# Placeholder keeping the secondary line's height when it is empty.
NBSP = "\u00a0"


@dataclass(frozen=True)
class DisplayView:
    primary: str
    secondary: str
    is_error: bool = False


def render(state: CalculatorState, max_length: int | None = None) -> DisplayView:
    """
    Project a state onto the two display lines.

    Args:
        state: The state to show
        max_length: Maximum characters on the primary line.
            Defaults to ``settings.MAX_DISPLAY_LENGTH``.
    """
    if max_length is None:
        max_length = settings.MAX_DISPLAY_LENGTH

    return DisplayView(
        primary=state.display_value[:max_length],
        secondary=state.secondary_display or NBSP,
        is_error=state.is_error,
    )


class TextRenderer:
    """Writes each rendered view to a text stream, secondary line first."""

    def __init__(self, stream: TextIO | None = None, max_length: int | None = None) -> None:
        self._stream = stream
        self._max_length = max_length

    def __call__(self, state: CalculatorState) -> DisplayView:
        view = render(state, self._max_length)
        stream = self._stream if self._stream is not None else sys.stdout
        marker = " [error]" if view.is_error else ""
        stream.write(f"{view.secondary.replace(NBSP, ' ').rstrip()}\n")
        stream.write(f"{view.primary}{marker}\n")
        return view
