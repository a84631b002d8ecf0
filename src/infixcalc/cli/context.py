"""CLI context and exit codes for infixcalc."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import click

from infixcalc.config import CalculatorConfig

__all__ = [
    "ExitCode",
    "CLIContext",
    "get_cli_context",
]


class ExitCode(IntEnum):
    """Standard exit codes for the infixcalc CLI.

    Follows Unix conventions:
    - 0 for success
    - 1 for failure (bad expression, bad configuration)
    - 130 for keyboard interrupt (128 + SIGINT=2)
    """

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Type-safe CLI context containing global options and configuration.

    Attributes:
        config: Loaded configuration.
        quiet: Suppress non-essential output.
    """

    config: CalculatorConfig
    quiet: bool = False


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext stored by the root command.

    Commands invoked without the root group (e.g. directly in tests) get a
    context built from default configuration.
    """
    obj = ctx.find_object(dict)
    if obj is not None and "cli_ctx" in obj:
        cli_ctx: CLIContext = obj["cli_ctx"]
        return cli_ctx
    return CLIContext(config=CalculatorConfig())
