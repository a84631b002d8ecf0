"""Lexical analysis for arithmetic expressions.

Splits an infix expression into :class:`~infixcalc.expressions.tokens.Token`
objects in one left-to-right pass with no backtracking.

Sign handling:
- A ``+`` or ``-`` that starts the expression, or follows ``(`` or another
  operator character, is a sign. It is folded into the number that follows
  (``3*-2`` lexes as ``3``, ``*``, ``-2``) instead of becoming an operator.
- A ``-`` sign directly in front of ``(`` negates the whole group:
  ``-(2+3)`` lexes as ``( -1 * ( 2 + 3 ) )``. A ``+`` sign there is dropped.
"""

from __future__ import annotations

from infixcalc.expressions.errors import InvalidCharacterError
from infixcalc.expressions.tokens import OPERATOR_CHARS, Token, TokenKind

__all__ = ["tokenize"]

_DIGITS = frozenset("0123456789")


def _is_sign_position(previous: str) -> bool:
    """Return True if a ``+``/``-`` after ``previous`` is a sign prefix.

    Args:
        previous: Last non-whitespace character seen, or "" at the start.
    """
    return not previous or previous == "(" or previous in OPERATOR_CHARS


def _has_digits(buffer: str) -> bool:
    return any(char in _DIGITS or char == "." for char in buffer)


def tokenize(expression: str) -> list[Token]:
    """Tokenize an arithmetic expression.

    Args:
        expression: Infix expression text.

    Returns:
        List of tokens in source order.

    Raises:
        InvalidCharacterError: For a character that is not a digit, ``.``,
            whitespace, one of ``+-*/%^`` or a parenthesis.

    Examples:
        >>> [t.text for t in tokenize("2 + 3*4")]
        ['2', '+', '3', '*', '4']
        >>> [t.text for t in tokenize("-5 ** -(1)")]
        ['-5', '**', '(', '-1', '*', '(', '1', ')', ')']
    """
    tokens: list[Token] = []
    buffer = ""  # pending number text, sign included
    buffer_start = 0
    previous = ""  # last non-whitespace character
    # One entry per open paren: True if its group was negated by a sign
    groups: list[bool] = []
    length = len(expression)
    i = 0

    while i < length:
        char = expression[i]

        # Skip whitespace; it ends a number but a bare sign keeps waiting
        if char.isspace():
            if _has_digits(buffer):
                tokens.append(Token(TokenKind.NUMBER, buffer, buffer_start))
                buffer = ""
            i += 1
            continue

        # Digits and decimal points
        if char in _DIGITS or char == ".":
            if not buffer:
                buffer_start = i
            buffer += char
            previous = char
            i += 1
            continue

        # Sign prefix
        if char in "+-" and _is_sign_position(previous):
            if not buffer:
                buffer_start = i
            buffer += char
            previous = char
            i += 1
            continue

        if char == "(":
            negated = buffer == "-"
            if negated:
                tokens.extend(
                    [
                        Token(TokenKind.LEFT_PAREN, "(", buffer_start),
                        Token(TokenKind.NUMBER, "-1", buffer_start),
                        Token(TokenKind.OPERATOR, "*", buffer_start),
                    ]
                )
            elif buffer and buffer != "+":
                tokens.append(Token(TokenKind.NUMBER, buffer, buffer_start))
            buffer = ""
            groups.append(negated)
            tokens.append(Token(TokenKind.LEFT_PAREN, "(", i))
            previous = char
            i += 1
            continue

        # Everything below closes the pending number
        if buffer:
            tokens.append(Token(TokenKind.NUMBER, buffer, buffer_start))
            buffer = ""

        if char == ")":
            tokens.append(Token(TokenKind.RIGHT_PAREN, ")", i))
            # Close the synthetic group wrapped around a negated paren
            if groups and groups.pop():
                tokens.append(Token(TokenKind.RIGHT_PAREN, ")", i))
            previous = char
            i += 1
            continue

        if char in OPERATOR_CHARS:
            if char == "*" and i + 1 < length and expression[i + 1] == "*":
                tokens.append(Token(TokenKind.OPERATOR, "**", i))
                i += 2
            else:
                tokens.append(Token(TokenKind.OPERATOR, char, i))
                i += 1
            previous = char
            continue

        raise InvalidCharacterError(char, expression=expression, position=i)

    if buffer:
        tokens.append(Token(TokenKind.NUMBER, buffer, buffer_start))

    return tokens
