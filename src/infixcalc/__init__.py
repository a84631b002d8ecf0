"""infixcalc - arithmetic expression evaluator.

Usage:
    from infixcalc import calculate_expression

    calculate_expression("(2+3)*4")  # 20.0
"""

from __future__ import annotations

from infixcalc.expressions import ExpressionError, calculate_expression

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "calculate_expression",
    "ExpressionError",
]
