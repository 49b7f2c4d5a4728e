"""Display formatting helpers."""

from __future__ import annotations

from decimal import Decimal

from pocketcalc.config import settings
from pocketcalc.operations import Operator

OPERATOR_SYMBOLS = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "−",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
    Operator.POWER: "^",
}

# Magnitudes printed positionally; anything outside keeps exponent form.
_MIN_POSITIONAL = 1e-7
_MAX_POSITIONAL = 1e21


def operator_symbol(operator: Operator) -> str:
    """Symbol shown on the secondary display for an operator."""
    return OPERATOR_SYMBOLS[Operator(operator)]


def is_exponent_form(text: str) -> bool:
    """True for display text written with an exponent, such as ``"1e-08"``."""
    return "e" in text.lower()


def format_number(value: float, digits: int | None = None) -> str:
    """
    Render a computed result as the shortest decimal text.

    The value is first rounded to ``digits`` significant digits so that
    binary floating-point noise does not reach the display
    (``0.1 + 0.2`` renders as ``"0.3"``). Magnitudes from ``1e-7`` up to
    ``1e21`` are written positionally (``"0.00001"``); smaller and larger
    ones keep Python's exponent form (``"1e-08"``, ``"1e+21"``).

    Args:
        value: A finite number
        digits: Significant digits to keep. Defaults to ``settings.ROUND_DIGITS``.

    Returns:
        The display text, without a trailing ``.0`` and never ``"-0"``
    """
    if digits is None:
        digits = settings.ROUND_DIGITS

    rounded = float(f"{float(value):.{digits}g}")
    if rounded == 0:
        return "0"

    text = repr(rounded)
    if not _MIN_POSITIONAL <= abs(rounded) < _MAX_POSITIONAL:
        return text

    text = format(Decimal(text), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
