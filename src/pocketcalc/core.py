"""Calculator session: current state, input adapters and render callbacks."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable

from pocketcalc.config import settings
from pocketcalc.messages import InputEvent, Message, classify, classify_button, classify_key
from pocketcalc.reducer import reduce
from pocketcalc.render import DisplayView, render
from pocketcalc.state import INITIAL_STATE, CalculatorState

logger = logging.getLogger(__name__)

RenderCallback = Callable[[CalculatorState], object]


class Calculator:
    """
    A calculator session driven by button and keyboard input.

    Each accepted input is reduced to a new state, recorded in the history
    (the last ``history_limit`` states, ``settings.HISTORY_LIMIT`` by default),
    and handed to every subscribed render callback, in that order. Input
    that classifies to nothing is ignored and triggers no render.

    Example:
        >>> calc = Calculator()
        >>> calc.press_keys(["5", "+", "3", "Enter", "Enter"]).state.display_value
        '11'
        >>> calc.view.secondary
        '8 + 3 ='
    """

    def __init__(
        self,
        state: CalculatorState = INITIAL_STATE,
        history_limit: int | None = None,
    ) -> None:
        if history_limit is None:
            history_limit = settings.HISTORY_LIMIT
        self._state = state
        self._history: deque[CalculatorState] = deque([state], maxlen=history_limit or None)
        self._callbacks: list[RenderCallback] = []

    @property
    def state(self) -> CalculatorState:
        """Current state."""
        return self._state

    @property
    def view(self) -> DisplayView:
        """Current state projected onto the display."""
        return render(self._state)

    @property
    def history(self) -> list[CalculatorState]:
        """The most recent states, oldest first."""
        return list(self._history)

    def subscribe(self, callback: RenderCallback) -> Callable[[], None]:
        """
        Register a render callback.

        Returns:
            A function that removes the callback again
        """
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def dispatch(self, message: Message | None) -> Calculator:
        """Reduce one message and re-render."""
        if message is None:
            return self

        self._state = reduce(self._state, message)
        self._history.append(self._state)
        for callback in list(self._callbacks):
            callback(self._state)
        return self

    def handle(self, event: InputEvent) -> Calculator:
        return self.dispatch(classify(event))

    def press_button(self, action: str | None = None, value: str | None = None) -> Calculator:
        """Feed a button's ``data-action`` / ``data-value`` pair."""
        return self.dispatch(classify_button(action, value))

    def press_key(self, key: str) -> Calculator:
        """Feed a keyboard key name."""
        message = classify_key(key)
        if message is None:
            logger.debug("ignoring key %r", key)
        return self.dispatch(message)

    def press_keys(self, keys: Iterable[str]) -> Calculator:
        for key in keys:
            self.press_key(key)
        return self

    def reset(self) -> Calculator:
        """Return to the initial state and drop the history."""
        self._state = INITIAL_STATE
        self._history.clear()
        self._history.append(INITIAL_STATE)
        for callback in list(self._callbacks):
            callback(self._state)
        return self

    def __repr__(self) -> str:
        return f"Calculator(display={self._state.display_value!r}, history_len={len(self._history)})"
