"""Arithmetic expression parsing and evaluation.

This package turns expression text into a float through three stages:

- lexer.py: text -> tokens (``tokenize``)
- parser.py: infix tokens -> postfix tokens (``to_postfix``)
- evaluator.py: postfix tokens -> float (``evaluate``)

``calculate_expression`` in calculator.py composes them.

Expression Syntax
-----------------
- Numbers: ``42``, ``3.14``, ``.5``
- Binary operators: ``+ - * / %`` and ``^`` or ``**`` for powers
- Grouping: ``( ... )``
- Signs: ``-5``, ``3*-2``, ``-(2+3)``

Precedence from lowest to highest: ``+ -``, then ``* / %``, then ``^ **``.
Powers are right-associative, everything else is left-associative.

Every stage is a pure function of its input: there is no shared state, so
calls from several threads need no locking.
"""

from __future__ import annotations

from infixcalc.expressions.calculator import calculate_expression
from infixcalc.expressions.errors import (
    DivisionByZeroError,
    ErrorKind,
    ExpressionError,
    ExpressionErrorInfo,
    InvalidCharacterError,
    InvalidNumberLiteralError,
    MalformedExpressionError,
    UnbalancedParenthesisError,
    UnknownOperatorError,
)
from infixcalc.expressions.evaluator import apply_operator, evaluate
from infixcalc.expressions.lexer import tokenize
from infixcalc.expressions.parser import to_postfix
from infixcalc.expressions.tokens import (
    Token,
    TokenKind,
    is_left_associative,
    precedence,
)

__all__: list[str] = [
    # Error types
    "ErrorKind",
    "ExpressionError",
    "ExpressionErrorInfo",
    "InvalidCharacterError",
    "UnbalancedParenthesisError",
    "InvalidNumberLiteralError",
    "MalformedExpressionError",
    "DivisionByZeroError",
    "UnknownOperatorError",
    # Token types
    "Token",
    "TokenKind",
    "precedence",
    "is_left_associative",
    # Pipeline stages
    "tokenize",
    "to_postfix",
    "evaluate",
    "apply_operator",
    # Facade
    "calculate_expression",
]
