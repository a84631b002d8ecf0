"""Click commands registered on the infixcalc CLI group."""

from __future__ import annotations

from infixcalc.cli.commands.eval import eval_command
from infixcalc.cli.commands.repl import repl

__all__ = ["eval_command", "repl"]
