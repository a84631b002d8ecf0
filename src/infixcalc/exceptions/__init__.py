"""infixcalc exception hierarchy.

All exceptions can be imported from this package:
    from infixcalc.exceptions import InfixCalcError, ConfigError

Expression pipeline errors live in ``infixcalc.expressions.errors`` and
derive from :class:`InfixCalcError` as well.
"""

from __future__ import annotations

# Base exception
from infixcalc.exceptions.base import InfixCalcError

# Configuration exceptions
from infixcalc.exceptions.config import ConfigError

__all__ = [
    "InfixCalcError",
    "ConfigError",
]
