"""Calculator: add, subtract, multiply, divide over two numbers.

Invariants:
    - Operands must be int or float; bool is rejected even though it subclasses int
    - Falsy operands (0, -0.0, NaN) are rejected with InvalidArgumentError
    - divide() with an exact-zero divisor raises DivisionByZeroError
    - Results use native float semantics, no rounding
    - Integers beyond float range are rejected up front; int / int and int + float
      would otherwise raise OverflowError mid-computation

Design Decisions:
    - Guard order is type -> zero divisor -> falsy operand: the divisor check runs
      before the falsy check so DivisionByZeroError stays reachable
    - Zero rejection kept: 0 is rejected like any other falsy operand (ADR: see DESIGN.md)
"""

import math
from typing import Callable

from primer.core.domain_types import CalculatorOperation
from primer.core.errors import DivisionByZeroError, InvalidArgumentError

Number = int | float


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_falsy(value: Number) -> bool:
    return value == 0 or (isinstance(value, float) and math.isnan(value))


def fits_float(value: Number) -> bool:
    """True when value converts to a float without overflowing."""
    try:
        float(value)
    except OverflowError:
        return False
    return True


def _check_operands(name: str, a: object, b: object) -> None:
    for argument, value in (("a", a), ("b", b)):
        if not _is_number(value):
            raise InvalidArgumentError(
                f"{name} expects 2 numbers", argument, operation=name,
            )
        if not fits_float(value):
            raise InvalidArgumentError(
                f"{name} operand is too large for a float", argument, operation=name,
            )


def _check_truthy(name: str, a: Number, b: Number) -> None:
    for argument, value in (("a", a), ("b", b)):
        if _is_falsy(value):
            raise InvalidArgumentError(
                f"{name} expects 2 non-zero numbers", argument, operation=name,
            )


def add(a: Number, b: Number) -> Number:
    _check_operands("add", a, b)
    _check_truthy("add", a, b)
    return a + b


def subtract(a: Number, b: Number) -> Number:
    _check_operands("subtract", a, b)
    _check_truthy("subtract", a, b)
    return a - b


def multiply(a: Number, b: Number) -> Number:
    _check_operands("multiply", a, b)
    _check_truthy("multiply", a, b)
    return a * b


def divide(a: Number, b: Number) -> float:
    _check_operands("divide", a, b)
    if b == 0:
        raise DivisionByZeroError()
    _check_truthy("divide", a, b)
    return a / b


_OPERATIONS: dict[CalculatorOperation, Callable[[Number, Number], Number]] = {
    CalculatorOperation.ADD: add,
    CalculatorOperation.SUBTRACT: subtract,
    CalculatorOperation.MULTIPLY: multiply,
    CalculatorOperation.DIVIDE: divide,
}


def calculate(operation: str, a: Number, b: Number) -> Number:
    """Dispatch to one of the four operations by its public name."""
    try:
        op = CalculatorOperation(operation)
    except ValueError:
        raise InvalidArgumentError(
            f"unknown calculator operation '{operation}'",
            "operation", operation="calculate",
        ) from None
    return _OPERATIONS[op](a, b)
