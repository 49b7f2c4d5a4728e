"""Input classification.

Raw UI input (a button's ``data-action``/``data-value`` pair, or a keyboard
key name) is turned into one of two messages, :class:`Digit` or
:class:`Action`. Anything unrecognised classifies to ``None`` and is ignored.
Nothing here touches calculator state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

DIGIT_CHARACTERS = frozenset("0123456789.")


class ActionName(str, Enum):
    CLEAR = "clear"
    SQRT = "sqrt"
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"
    CALCULATE = "calculate"
    BACKSPACE = "backspace"


@dataclass(frozen=True)
class Digit:
    """A digit ``0``-``9`` or the decimal point."""

    value: str

    def __post_init__(self) -> None:
        if self.value not in DIGIT_CHARACTERS or len(self.value) != 1:
            raise ValueError(f"not a digit or decimal point: {self.value!r}")


@dataclass(frozen=True)
class Action:
    """A named calculator action."""

    name: ActionName

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", ActionName(self.name))


Message = Union[Digit, Action]


@dataclass(frozen=True)
class InputEvent:
    """A raw UI event: either a key press or a button with action/value data."""

    key: str | None = None
    action: str | None = None
    value: str | None = None

    @classmethod
    def from_key(cls, key: str) -> InputEvent:
        return cls(key=key)

    @classmethod
    def from_button(cls, action: str | None = None, value: str | None = None) -> InputEvent:
        return cls(action=action, value=value)


KEY_BINDINGS: dict[str, Message] = {
    ",": Digit("."),
    "+": Action(ActionName.ADD),
    "-": Action(ActionName.SUBTRACT),
    "*": Action(ActionName.MULTIPLY),
    "x": Action(ActionName.MULTIPLY),
    "X": Action(ActionName.MULTIPLY),
    "/": Action(ActionName.DIVIDE),
    "^": Action(ActionName.POWER),
    "Enter": Action(ActionName.CALCULATE),
    "=": Action(ActionName.CALCULATE),
    "Backspace": Action(ActionName.BACKSPACE),
    "Escape": Action(ActionName.CLEAR),
    "Delete": Action(ActionName.CLEAR),
    "c": Action(ActionName.CLEAR),
    "C": Action(ActionName.CLEAR),
    "r": Action(ActionName.SQRT),
    "R": Action(ActionName.SQRT),
}


def classify_button(action: str | None = None, value: str | None = None) -> Message | None:
    """
    Classify a button's data attributes.

    A value takes precedence over an action, so a button carrying both is a
    digit button.
    """
    if value:
        if value in DIGIT_CHARACTERS and len(value) == 1:
            return Digit(value)
        return None
    if action:
        try:
            return Action(ActionName(action))
        except ValueError:
            return None
    return None


def classify_key(key: str | None) -> Message | None:
    """Classify a keyboard key name (``KeyboardEvent.key`` spelling)."""
    if not key:
        return None
    if len(key) == 1 and key in DIGIT_CHARACTERS:
        return Digit(key)
    return KEY_BINDINGS.get(key)


def classify(event: InputEvent) -> Message | None:
    if event.key is not None:
        return classify_key(event.key)
    return classify_button(event.action, event.value)
