"""Infix to postfix conversion.

Implements the shunting-yard algorithm: number tokens go straight to the
output, operators wait on a stack until an operator of lower priority (or a
closing parenthesis) forces them out.

Operator ordering:
- Higher precedence pops first: ``2+3*4`` -> ``2 3 4 * +``
- Equal precedence, left-associative pops: ``10-2-3`` -> ``10 2 - 3 -``
- Equal precedence, right-associative waits: ``2^3^2`` -> ``2 3 2 ^ ^``
"""

from __future__ import annotations

from infixcalc.expressions.errors import UnbalancedParenthesisError
from infixcalc.expressions.tokens import (
    Token,
    TokenKind,
    is_left_associative,
    precedence,
)

__all__ = ["to_postfix"]


def _should_pop(op: str, top: str) -> bool:
    """Return True if ``top`` must leave the stack before ``op`` is pushed."""
    if is_left_associative(op):
        return precedence(op) <= precedence(top)
    return precedence(op) < precedence(top)


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Convert infix tokens to postfix (Reverse Polish) order.

    Args:
        tokens: Tokens in infix order, as produced by ``tokenize``.

    Returns:
        Tokens in postfix order. Parenthesis tokens are never included.

    Raises:
        UnbalancedParenthesisError: For a closing parenthesis without a
            matching opening one, or an opening parenthesis never closed.

    Examples:
        >>> from infixcalc.expressions.lexer import tokenize
        >>> [t.text for t in to_postfix(tokenize("(2+3)*4"))]
        ['2', '3', '+', '4', '*']
    """
    output: list[Token] = []
    stack: list[Token] = []
    balance = 0

    for token in tokens:
        if token.kind == TokenKind.NUMBER:
            output.append(token)

        elif token.kind == TokenKind.LEFT_PAREN:
            stack.append(token)
            balance += 1

        elif token.kind == TokenKind.RIGHT_PAREN:
            balance -= 1
            if balance < 0:
                raise UnbalancedParenthesisError(
                    "Closing parenthesis without matching opening parenthesis",
                    position=token.position,
                )
            while stack and stack[-1].kind != TokenKind.LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise UnbalancedParenthesisError(
                    "Closing parenthesis without matching opening parenthesis",
                    position=token.position,
                )
            # Discard the opening parenthesis
            stack.pop()

        elif token.kind == TokenKind.OPERATOR:
            while (
                stack
                and stack[-1].kind == TokenKind.OPERATOR
                and _should_pop(token.text, stack[-1].text)
            ):
                output.append(stack.pop())
            stack.append(token)

    if balance != 0:
        unclosed = next(
            (t for t in reversed(stack) if t.kind == TokenKind.LEFT_PAREN), None
        )
        raise UnbalancedParenthesisError(
            "Missing closing parenthesis",
            position=unclosed.position if unclosed is not None else None,
        )

    while stack:
        token = stack.pop()
        if token.kind == TokenKind.LEFT_PAREN:
            # Unreachable while the balance counter is consistent
            raise UnbalancedParenthesisError(
                "Missing closing parenthesis",
                position=token.position,
            )
        output.append(token)

    return output
