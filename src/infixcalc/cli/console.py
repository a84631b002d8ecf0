"""Shared Rich Console instances for infixcalc CLI output.

Results go to stdout, errors and the REPL banner go to stderr. Rich handles
TTY detection: styled output in terminals, plain text when piped.
"""

from __future__ import annotations

from rich.console import Console

__all__ = ["console", "err_console"]

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)
