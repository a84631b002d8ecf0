"""Output formatting utilities for the infixcalc CLI.

This module defines output format options and formatting helpers shared by
the ``eval`` and ``repl`` commands.
"""

from __future__ import annotations

import json
import math
from enum import Enum
from typing import Any

from infixcalc.expressions.errors import ExpressionError

__all__ = [
    "OutputFormat",
    "format_result",
    "format_error",
    "format_expression_error",
    "format_json",
]


class OutputFormat(str, Enum):
    """Supported output formats for CLI commands.

    Values:
        TEXT: Plain result line (default).
        JSON: Machine-readable JSON object.
    """

    TEXT = "text"
    JSON = "json"


def format_result(value: float, precision: int | None = None) -> str:
    """Format a calculation result for display.

    Args:
        value: Result of a calculation.
        precision: Significant digits. None gives the shortest text that
            round-trips to the same float.

    Returns:
        Formatted number.

    Example:
        >>> format_result(14.0)
        '14.0'
        >>> format_result(2 / 3, precision=6)
        '0.666667'
    """
    if precision is None or math.isnan(value) or math.isinf(value):
        return repr(value)
    return f"{value:.{precision}g}"


def format_error(message: str, details: list[str] | None = None) -> str:
    """Format an error message with optional detail lines.

    Args:
        message: Primary error message.
        details: Optional list of detail lines to include.

    Returns:
        Formatted error string, one detail per indented line.

    Example:
        >>> print(format_error("Division by zero", details=["5/0", " ^"]))
        Error: Division by zero
          5/0
           ^
    """
    lines = [f"Error: {message}"]

    if details:
        for detail in details:
            lines.append(f"  {detail}")

    return "\n".join(lines)


def format_expression_error(error: ExpressionError, expression: str) -> str:
    """Format an expression error with a caret under the failing position.

    Args:
        error: Error raised by the calculator.
        expression: The input line that was evaluated.

    Returns:
        Formatted error string.
    """
    details: list[str] | None = None
    if error.position is not None and 0 <= error.position < len(expression):
        details = [expression, " " * error.position + "^"]
    return format_error(error.message, details=details)


def format_json(data: Any) -> str:
    """Format data as compact, key-sorted JSON.

    Non-finite floats are written as strings ("inf", "-inf", "nan") so the
    output stays valid JSON.
    """
    return json.dumps(_json_safe(data), sort_keys=True)


def _json_safe(data: Any) -> Any:
    if isinstance(data, float) and not math.isfinite(data):
        return repr(data)
    if isinstance(data, dict):
        return {key: _json_safe(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [_json_safe(value) for value in data]
    if isinstance(data, Enum):
        return data.value
    return data
