"""
Calculator state-transition engine.

A pure reducer over an immutable :class:`CalculatorState`, fed by
button and keyboard input and projected onto a two-line display.
"""

from pocketcalc.core import Calculator
from pocketcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
    NegativeSquareRootError,
    OverflowError,
)
from pocketcalc.formatting import format_number, operator_symbol
from pocketcalc.messages import (
    Action,
    ActionName,
    Digit,
    InputEvent,
    classify,
    classify_button,
    classify_key,
)
from pocketcalc.operations import (
    Operator,
    add,
    apply_operator,
    divide,
    multiply,
    power,
    sqrt,
    subtract,
)
from pocketcalc.reducer import (
    derive_secondary_display,
    handle_action,
    handle_number_input,
    reduce,
)
from pocketcalc.render import DisplayView, TextRenderer, render
from pocketcalc.state import ERROR_MARKER, ERROR_STATE, INITIAL_STATE, CalculatorState
from pocketcalc.validators import parse_display, validate_number

__all__ = [
    "Action",
    "ActionName",
    "Calculator",
    "CalculatorError",
    "CalculatorState",
    "Digit",
    "DisplayView",
    "DivisionByZeroError",
    "ERROR_MARKER",
    "ERROR_STATE",
    "INITIAL_STATE",
    "InputEvent",
    "InvalidInputError",
    "NegativeSquareRootError",
    "Operator",
    "OverflowError",
    "TextRenderer",
    "add",
    "apply_operator",
    "classify",
    "classify_button",
    "classify_key",
    "derive_secondary_display",
    "divide",
    "format_number",
    "handle_action",
    "handle_number_input",
    "multiply",
    "operator_symbol",
    "parse_display",
    "power",
    "reduce",
    "render",
    "sqrt",
    "subtract",
    "validate_number",
]

__version__ = "0.1.0"
