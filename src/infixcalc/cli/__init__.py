"""Command-line interface for infixcalc."""
