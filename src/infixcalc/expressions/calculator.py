"""Expression calculator facade.

Runs the three pipeline stages in order. Whatever the first failing stage
raises reaches the caller as is, with its original type and message.
"""

from __future__ import annotations

from infixcalc.expressions.evaluator import evaluate
from infixcalc.expressions.lexer import tokenize
from infixcalc.expressions.parser import to_postfix

__all__ = ["calculate_expression"]


def calculate_expression(expression: str) -> float:
    """Evaluate an arithmetic expression.

    Args:
        expression: Infix expression text, e.g. ``"(2+3)*4"``.

    Returns:
        The value of the expression as a float.

    Raises:
        ExpressionError: The subclass raised by the failing stage.

    Examples:
        >>> calculate_expression("2^3^2")
        512.0
        >>> calculate_expression("-(2+3)")
        -5.0
    """
    tokens = tokenize(expression)
    postfix = to_postfix(tokens)
    return evaluate(postfix)
