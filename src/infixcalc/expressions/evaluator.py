"""Postfix expression evaluator.

Evaluates a postfix token sequence with a single value stack. All arithmetic
is IEEE-754 double precision and follows the C library conventions for the
edge cases Python would otherwise raise on:

- ``%`` is ``fmod``: the sign of the result follows the dividend
  (``-7 % 3`` is ``-1.0``, not ``2.0``).
- ``^`` / ``**`` is ``pow``: a negative base with a fractional exponent is
  ``nan``, overflow is ``inf``.
- Division and modulo by zero are errors.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from infixcalc.expressions.errors import (
    DivisionByZeroError,
    InvalidNumberLiteralError,
    MalformedExpressionError,
    UnknownOperatorError,
)
from infixcalc.expressions.tokens import Token, TokenKind

__all__ = ["evaluate", "apply_operator"]


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and math.fmod(value, 2.0) != 0.0


def _power(left: float, right: float) -> float:
    """Raise ``left`` to ``right`` with C ``pow`` results instead of exceptions."""
    try:
        return math.pow(left, right)
    except ValueError:
        # Pole: zero base with a negative exponent
        if left == 0.0:
            if _is_odd_integer(right):
                return math.copysign(math.inf, left)
            return math.inf
        # Domain: negative base with a fractional exponent
        return math.nan
    except OverflowError:
        if left < 0.0 and _is_odd_integer(right):
            return -math.inf
        return math.inf


def _modulo(left: float, right: float) -> float:
    try:
        return math.fmod(left, right)
    except ValueError:
        # Infinite dividend
        return math.nan


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": lambda left, right: left / right,
    "%": _modulo,
    "^": _power,
    "**": _power,
}


def apply_operator(
    left: float,
    right: float,
    operator: str,
    *,
    position: int | None = None,
) -> float:
    """Apply a binary operator to two values.

    Args:
        left: Left operand.
        right: Right operand.
        operator: Operator text, one of ``+ - * / % ^ **``.
        position: Source position of the operator, for error reporting.

    Returns:
        The result of ``left <operator> right``.

    Raises:
        DivisionByZeroError: For ``/`` or ``%`` with ``right == 0``.
        UnknownOperatorError: For any other operator text.

    Examples:
        >>> apply_operator(7.0, 2.0, "/")
        3.5
        >>> apply_operator(-7.0, 3.0, "%")
        -1.0
    """
    operation = _OPERATIONS.get(operator)
    if operation is None:
        raise UnknownOperatorError(operator, position=position)
    if operator in ("/", "%") and right == 0.0:
        raise DivisionByZeroError(operator, position=position)
    return operation(left, right)


def evaluate(postfix: list[Token]) -> float:
    """Evaluate a postfix token sequence.

    Args:
        postfix: Tokens in postfix order, as produced by ``to_postfix``.

    Returns:
        The value of the expression.

    Raises:
        InvalidNumberLiteralError: If a number token's text is not a float.
        MalformedExpressionError: If an operator lacks two operands or the
            sequence does not reduce to exactly one value.
        DivisionByZeroError: For division or modulo by zero.
        UnknownOperatorError: For unsupported operator text.
    """
    stack: list[float] = []

    for token in postfix:
        if token.kind == TokenKind.NUMBER:
            try:
                value = float(token.text)
            except ValueError as e:
                raise InvalidNumberLiteralError(
                    token.text, position=token.position
                ) from e
            stack.append(value)

        elif token.kind == TokenKind.OPERATOR:
            if len(stack) < 2:
                raise MalformedExpressionError(
                    f"Operator '{token.text}' is missing an operand",
                    position=token.position,
                )
            right = stack.pop()
            left = stack.pop()
            stack.append(
                apply_operator(left, right, token.text, position=token.position)
            )

    if not stack:
        raise MalformedExpressionError("Expression has no value")
    if len(stack) > 1:
        raise MalformedExpressionError(
            f"Expression has {len(stack) - 1} unused operand(s)"
        )

    return stack[0]
