"""Input validation for operands and display text."""

import math
from typing import TypeVar

from pocketcalc.exceptions import InvalidInputError

T = TypeVar("T", int, float)


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def parse_display(text: str) -> float:
    """
    Parse the text of the primary display into an operand.

    Only plain decimal literals (optionally signed, optionally in exponent
    form as produced for very large or small results) are accepted; the
    error marker and spellings such as ``"nan"`` or ``"inf"`` are rejected.

    Args:
        text: The display text

    Returns:
        The finite float the text denotes

    Raises:
        InvalidInputError: If the text is not a finite decimal number
    """
    if not isinstance(text, str):
        raise InvalidInputError(text, f"Expected display text, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped or stripped.lstrip("+-")[:1] not in set("0123456789."):
        raise InvalidInputError(text, "Display text is not a number")

    try:
        value = float(stripped)
    except ValueError as e:
        raise InvalidInputError(text, "Display text is not a number") from e

    return validate_number(value)


def is_display_number(text: str) -> bool:
    """Return True if ``text`` parses as a finite display number."""
    try:
        parse_display(text)
    except InvalidInputError:
        return False
    return True
