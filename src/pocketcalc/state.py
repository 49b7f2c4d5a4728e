"""Immutable calculator state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from pocketcalc.operations import Operator

ERROR_MARKER = "Error"


@dataclass(frozen=True)
class CalculatorState:
    """
    One snapshot of the calculator.

    A new value is produced for every accepted input; nothing mutates a
    state in place. ``secondary_display`` is filled in by the transition
    that builds the state and is never recomputed afterwards.
    """

    display_value: str = "0"
    first_operand: float | None = None
    operator: Operator | None = None
    waiting_for_second_operand: bool = False
    last_operator: Operator | None = None
    last_operand: float | None = None
    secondary_display: str = ""

    @property
    def is_error(self) -> bool:
        return self.display_value == ERROR_MARKER

    @property
    def has_pending_operation(self) -> bool:
        return self.first_operand is not None and self.operator is not None

    def evolve(self, **changes: Any) -> CalculatorState:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def __str__(self) -> str:
        if self.secondary_display:
            return f"{self.secondary_display} | {self.display_value}"
        return self.display_value


INITIAL_STATE = CalculatorState()

ERROR_STATE = CalculatorState(display_value=ERROR_MARKER)
