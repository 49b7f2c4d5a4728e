"""Exceptions raised by the calculator evaluators.

The reducer recovers from every :class:`CalculatorError` locally and turns it
into the error display, so none of these escape :func:`pocketcalc.reducer.reduce`.
Which key sequence leads to which error:

===========================  ==============================================
``DivisionByZeroError``      ``7 / 0 =``, or repeat-equals on a zero divisor
``NegativeSquareRootError``  ``√`` pressed on a negative display
``OverflowError``            a result that is not finite, e.g. ``99 ^ 999 =``
``InvalidInputError``        ``√`` or an operator on the ``Error`` display,
                             or a power ``math.pow`` refuses (``-8 ^ .5``)
===========================  ==============================================
"""

from typing import Any


class CalculatorError(Exception):
    """Base class for failures that put the calculator in its error state."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(message)

    def __str__(self) -> str:
        if self.value is None:
            return self.message
        return f"{self.message}: {self.value!r}"


class DivisionByZeroError(CalculatorError):
    """The divisor of a division was zero (either sign)."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class NegativeSquareRootError(CalculatorError):
    """The square root key was pressed on a negative display."""

    def __init__(self, operand: float) -> None:
        super().__init__("Square root of a negative number", operand)
        self.operand = operand


class OverflowError(CalculatorError):
    """
    An evaluator produced infinity or NaN.

    Shadows the builtin within this package; ``operation`` names the
    evaluator and ``operands`` holds its inputs.
    """

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Result of {operation} is not finite", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """Display text or an operand that cannot take part in a calculation."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason
