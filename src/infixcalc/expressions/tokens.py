"""Token model and operator metadata.

Tokens are small immutable values produced fresh by every call to
:func:`infixcalc.expressions.lexer.tokenize`. Operator metadata is exposed as
pure lookup functions over constant tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "TokenKind",
    "Token",
    "OPERATOR_CHARS",
    "precedence",
    "is_left_associative",
]


class TokenKind(str, Enum):
    """Kind of lexical token."""

    NUMBER = "number"  # 3.14, -5 (sign folded in)
    OPERATOR = "operator"  # + - * / % ^ **
    LEFT_PAREN = "left_paren"  # (
    RIGHT_PAREN = "right_paren"  # )


# Operator text -> precedence (higher binds tighter)
_PRECEDENCE: dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "%": 2,
    "^": 3,
    "**": 3,
}

_RIGHT_ASSOCIATIVE = frozenset({"^", "**"})

# Single characters that may start an operator token
OPERATOR_CHARS = frozenset("+-*/%^")


@dataclass(frozen=True, slots=True)
class Token:
    """Classified lexical unit.

    Attributes:
        kind: Token kind.
        text: Literal source text. Numbers keep an attached sign prefix.
        position: Index in the source string where the token starts. Only
            used for diagnostics and ignored by equality.

    Examples:
        >>> Token(TokenKind.NUMBER, "-5")
        Token(kind=<TokenKind.NUMBER: 'number'>, text='-5', position=None)
        >>> Token(TokenKind.OPERATOR, "+", 3) == Token(TokenKind.OPERATOR, "+")
        True
    """

    kind: TokenKind
    text: str
    position: int | None = field(default=None, compare=False)


def precedence(op: str) -> int:
    """Return the binding priority of an operator.

    ``+ -`` are 1, ``* / %`` are 2, ``^ **`` are 3. Anything else,
    parentheses included, is 0.

    Examples:
        >>> precedence("*")
        2
        >>> precedence("(")
        0
    """
    return _PRECEDENCE.get(op, 0)


def is_left_associative(op: str) -> bool:
    """Return False for the power operators, True for everything else."""
    return op not in _RIGHT_ASSOCIATIVE
