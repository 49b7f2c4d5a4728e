"""
The calculator state machine.

``reduce(state, message)`` is a pure function: it never mutates its input
and returns exactly one new :class:`CalculatorState` per message. Every
evaluation failure is recovered here and surfaces as the error display.

Example:
    >>> from pocketcalc.messages import Action, ActionName, Digit
    >>> s = INITIAL_STATE
    >>> for m in (Digit("5"), Action(ActionName.ADD), Digit("3"), Action(ActionName.CALCULATE)):
    ...     s = reduce(s, m)
    >>> s.display_value, s.secondary_display
    ('8', '5 + 3 =')
"""

from __future__ import annotations

import logging

from pocketcalc.exceptions import CalculatorError
from pocketcalc.formatting import format_number, is_exponent_form, operator_symbol
from pocketcalc.messages import Action, ActionName, Digit, Message
from pocketcalc.operations import Operator, apply_operator, sqrt
from pocketcalc.state import ERROR_STATE, INITIAL_STATE, CalculatorState
from pocketcalc.validators import is_display_number, parse_display

logger = logging.getLogger(__name__)

BINARY_ACTIONS = {
    ActionName.ADD: Operator.ADD,
    ActionName.SUBTRACT: Operator.SUBTRACT,
    ActionName.MULTIPLY: Operator.MULTIPLY,
    ActionName.DIVIDE: Operator.DIVIDE,
    ActionName.POWER: Operator.POWER,
}


def derive_secondary_display(state: CalculatorState, left_operand: float | None = None) -> str:
    """
    Build the trace line for a state.

    Args:
        state: The state being displayed
        left_operand: Left operand of the computation that just completed.
            Post-equals states have no ``first_operand`` of their own, so the
            transition that produced them passes it here.

    Returns:
        ``"<first> <symbol>"`` while an operator is pending,
        ``"<first> <symbol> <last operand> ="`` right after a computation,
        ``""`` otherwise
    """
    if state.has_pending_operation and state.waiting_for_second_operand:
        return f"{format_number(state.first_operand)} {operator_symbol(state.operator)}"

    if state.operator is None and state.last_operator is not None:
        left = state.first_operand if left_operand is None else left_operand
        if left is None or state.last_operand is None:
            return ""
        return (
            f"{format_number(left)} {operator_symbol(state.last_operator)} "
            f"{format_number(state.last_operand)} ="
        )

    return ""


def handle_number_input(state: CalculatorState, digit: str) -> CalculatorState:
    """Apply a digit or decimal point to the primary display."""
    if state.is_error:
        state = INITIAL_STATE

    if state.waiting_for_second_operand:
        display = "0." if digit == "." else digit
        return state.evolve(display_value=display, waiting_for_second_operand=False)

    if digit == "." and "." in state.display_value:
        return state

    if is_exponent_form(state.display_value):
        # "1e-05" + "0" would read as 1e-50
        return state

    if state.display_value == "0" and digit != ".":
        return state.evolve(display_value=digit)

    display = state.display_value + digit
    if not is_display_number(display):
        # digits past float range
        return state
    return state.evolve(display_value=display)


def _square_root(state: CalculatorState) -> CalculatorState:
    operand = parse_display(state.display_value)
    result = sqrt(operand)
    return INITIAL_STATE.evolve(
        display_value=format_number(result),
        secondary_display=f"√({format_number(operand)})",
    )


def _choose_operator(state: CalculatorState, operator: Operator) -> CalculatorState:
    if state.has_pending_operation and not state.waiting_for_second_operand:
        # Chained operator: evaluate the pending operation first.
        second = parse_display(state.display_value)
        result = apply_operator(state.operator, state.first_operand, second)
        display = format_number(result)
        new_state = state.evolve(
            display_value=display,
            first_operand=parse_display(display),
            operator=operator,
            waiting_for_second_operand=True,
            last_operator=None,
            last_operand=None,
        )
    else:
        new_state = state.evolve(
            first_operand=parse_display(state.display_value),
            operator=operator,
            waiting_for_second_operand=True,
        )
    return new_state.evolve(secondary_display=derive_secondary_display(new_state))


def _calculate(state: CalculatorState) -> CalculatorState:
    if state.has_pending_operation:
        second = parse_display(state.display_value)
        result = apply_operator(state.operator, state.first_operand, second)
        new_state = INITIAL_STATE.evolve(
            display_value=format_number(result),
            last_operator=state.operator,
            last_operand=second,
        )
        return new_state.evolve(
            secondary_display=derive_secondary_display(new_state, state.first_operand)
        )

    if (
        state.last_operator is not None
        and state.last_operand is not None
        and state.first_operand is None
    ):
        # Repeat-equals: re-apply the last operation to the current display.
        left = parse_display(state.display_value)
        result = apply_operator(state.last_operator, left, state.last_operand)
        new_state = state.evolve(
            display_value=format_number(result),
            waiting_for_second_operand=False,
        )
        return new_state.evolve(secondary_display=derive_secondary_display(new_state, left))

    return state


def _backspace(state: CalculatorState) -> CalculatorState:
    if state.waiting_for_second_operand or state.is_error:
        return state
    if is_exponent_form(state.display_value):
        return state.evolve(display_value="0")
    trimmed = state.display_value[:-1]
    if trimmed in ("", "-", "-0"):
        trimmed = "0"
    return state.evolve(display_value=trimmed)


def handle_action(state: CalculatorState, action: ActionName) -> CalculatorState:
    """
    Apply a named action.

    Evaluation failures (division by zero, negative square root, unparsable
    display, non-finite results) are logged and yield the error state.
    """
    action = ActionName(action)

    if action is ActionName.CLEAR:
        return INITIAL_STATE

    try:
        if action is ActionName.SQRT:
            return _square_root(state)
        if action in BINARY_ACTIONS:
            return _choose_operator(state, BINARY_ACTIONS[action])
        if action is ActionName.CALCULATE:
            return _calculate(state)
        if action is ActionName.BACKSPACE:
            return _backspace(state)
    except CalculatorError as e:
        logger.warning("calculator error on %s: %s", action.value, e)
        return ERROR_STATE

    raise ValueError(f"unhandled action: {action!r}")


def reduce(state: CalculatorState, message: Message | None) -> CalculatorState:
    """Route a classified message to its handler; ``None`` leaves the state as is."""
    if message is None:
        return state

    if isinstance(message, Digit):
        new_state = handle_number_input(state, message.value)
    elif isinstance(message, Action):
        new_state = handle_action(state, message.name)
    else:
        raise TypeError(f"Expected Digit or Action, got {type(message).__name__}")

    logger.debug("%r: %s -> %s", message, state, new_state)
    return new_state
