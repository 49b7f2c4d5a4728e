"""Binary and unary evaluators used by the calculator reducer."""

from __future__ import annotations

import math
from enum import Enum

from pocketcalc.exceptions import (
    DivisionByZeroError,
    InvalidInputError,
    NegativeSquareRootError,
    OverflowError,
)
from pocketcalc.validators import validate_number


class Operator(str, Enum):
    """Binary operators; values are the button action names."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"


def _finite(result: float, operation: str, *operands: float) -> float:
    if math.isnan(result) or math.isinf(result):
        raise OverflowError(operation, *operands)
    return result


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result would overflow
    """
    validate_number(a)
    validate_number(b)
    return _finite(a + b, "addition", a, b)


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result would overflow
    """
    validate_number(a)
    validate_number(b)
    return _finite(a - b, "subtraction", a, b)


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result would overflow
    """
    validate_number(a)
    validate_number(b)
    return _finite(a * b, "multiplication", a, b)


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Properties:
        - Identity: divide(a, 1) == a
        - Self-division: divide(a, a) == 1 (for a != 0)

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        InvalidInputError: If inputs are invalid
        DivisionByZeroError: If b is zero
        OverflowError: If result would overflow
    """
    validate_number(a)
    validate_number(b)

    if b == 0:
        raise DivisionByZeroError(a)

    return _finite(a / b, "division", a, b)


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    Uses the platform's floating-point exponentiation with no extra domain
    restriction. Combinations ``math.pow`` itself refuses (a negative base
    with a fractional exponent, zero to a negative power) are reported as
    invalid input.

    Properties:
        - Identity: power(a, 1) == a
        - Zero exponent: power(a, 0) == 1

    Args:
        base: The base number
        exponent: The exponent

    Returns:
        base raised to the power of exponent

    Raises:
        InvalidInputError: If inputs are invalid or computation is undefined
        OverflowError: If result would overflow
    """
    validate_number(base)
    validate_number(exponent)

    try:
        result = math.pow(base, exponent)
    except ValueError as e:
        raise InvalidInputError((base, exponent), str(e)) from e
    except ArithmeticError as e:
        raise OverflowError("exponentiation", base, exponent) from e

    return _finite(result, "exponentiation", base, exponent)


def sqrt(a: float) -> float:
    """
    Square root of a.

    Raises:
        InvalidInputError: If input is invalid
        NegativeSquareRootError: If a is negative
    """
    validate_number(a)

    if a < 0:
        raise NegativeSquareRootError(a)

    return math.sqrt(a)


_BINARY = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
    Operator.POWER: power,
}


def apply_operator(operator: Operator, a: float, b: float) -> float:
    """Evaluate ``a <operator> b``."""
    return _BINARY[Operator(operator)](a, b)
