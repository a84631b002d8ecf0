"""Expression-specific error types for infixcalc.

Every stage of the pipeline (lexer, shunting-yard converter, postfix
evaluator) reports failures with one of the exceptions below. Each class
carries an :class:`ErrorKind` tag so callers can branch on the failure
without matching class names, and :meth:`ExpressionError.to_info` turns an
error into an immutable record for reporting.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from infixcalc.exceptions import InfixCalcError

__all__ = [
    "ErrorKind",
    "ExpressionError",
    "ExpressionErrorInfo",
    "InvalidCharacterError",
    "UnbalancedParenthesisError",
    "InvalidNumberLiteralError",
    "MalformedExpressionError",
    "DivisionByZeroError",
    "UnknownOperatorError",
]


class ErrorKind(str, Enum):
    """Kind of expression failure."""

    INVALID_CHARACTER = "invalid_character"
    UNBALANCED_PARENTHESIS = "unbalanced_parenthesis"
    INVALID_NUMBER_LITERAL = "invalid_number_literal"
    MALFORMED_EXPRESSION = "malformed_expression"
    DIVISION_BY_ZERO = "division_by_zero"
    UNKNOWN_OPERATOR = "unknown_operator"


@dataclass(frozen=True, slots=True)
class ExpressionErrorInfo:
    """Expression error information.

    This dataclass captures the details of a failed calculation for use in
    structured output (e.g. ``infixcalc eval --format json``). It is
    immutable and uses slots for memory efficiency.

    Attributes:
        kind: Failure tag, or None for the generic base error.
        message: Human-readable error message.
        expression: The expression that failed (if known).
        position: Character position in the expression (None if unknown).
    """

    kind: ErrorKind | None
    message: str
    expression: str | None = None
    position: int | None = None


class ExpressionError(InfixCalcError):
    """Base exception for all expression-related errors.

    This is the parent class for every failure raised by the lexer, the
    converter and the evaluator.

    Attributes:
        message: Human-readable error message.
        expression: The expression that caused the error (if known).
        position: Character position of the offending input (if known).
    """

    kind: ClassVar[ErrorKind | None] = None

    def __init__(
        self,
        message: str,
        expression: str | None = None,
        position: int | None = None,
    ) -> None:
        """Initialize the ExpressionError.

        Args:
            message: Human-readable error message.
            expression: The expression that caused the error.
            position: Character position of the offending input.
        """
        self.expression = expression
        self.position = position
        super().__init__(message)

    def to_info(self, expression: str | None = None) -> ExpressionErrorInfo:
        """Build an immutable error record.

        Args:
            expression: Source expression to record when the error itself
                does not know it (converter and evaluator errors only see
                tokens).

        Returns:
            ExpressionErrorInfo describing this error.
        """
        return ExpressionErrorInfo(
            kind=self.kind,
            message=self.message,
            expression=self.expression if self.expression is not None else expression,
            position=self.position,
        )


class InvalidCharacterError(ExpressionError):
    """Raised by the lexer for a character outside the supported alphabet.

    Attributes:
        character: The offending character.
    """

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, character: str, expression: str, position: int) -> None:
        self.character = character
        super().__init__(
            f"Invalid character '{character}' at position {position}",
            expression=expression,
            position=position,
        )


class UnbalancedParenthesisError(ExpressionError):
    """Raised for an excess closing or an unclosed opening parenthesis."""

    kind = ErrorKind.UNBALANCED_PARENTHESIS


class InvalidNumberLiteralError(ExpressionError):
    """Raised when a number token does not parse as a float.

    Attributes:
        literal: The text of the number token.
    """

    kind = ErrorKind.INVALID_NUMBER_LITERAL

    def __init__(self, literal: str, position: int | None = None) -> None:
        self.literal = literal
        super().__init__(f"Invalid number literal '{literal}'", position=position)


class MalformedExpressionError(ExpressionError):
    """Raised when operands and operators do not line up.

    Either an operator found fewer than two values to work on, or the
    evaluation finished with other than exactly one value.
    """

    kind = ErrorKind.MALFORMED_EXPRESSION


class DivisionByZeroError(ExpressionError):
    """Raised for ``/`` or ``%`` with a zero right operand.

    Attributes:
        operator: The operator text (``/`` or ``%``).
    """

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, operator: str, position: int | None = None) -> None:
        self.operator = operator
        what = "Modulo" if operator == "%" else "Division"
        super().__init__(f"{what} by zero", position=position)


class UnknownOperatorError(ExpressionError):
    """Raised for operator text the evaluator does not implement.

    The lexer never produces such a token, so this only fires for token
    sequences built by hand.

    Attributes:
        operator: The unrecognized operator text.
    """

    kind = ErrorKind.UNKNOWN_OPERATOR

    def __init__(self, operator: str, position: int | None = None) -> None:
        self.operator = operator
        super().__init__(f"Unknown operator '{operator}'", position=position)
