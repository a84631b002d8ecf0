from __future__ import annotations

import sys
from typing import TextIO

import click

from infixcalc.cli.console import console, err_console
from infixcalc.cli.context import ExitCode, get_cli_context
from infixcalc.cli.output import format_expression_error, format_result
from infixcalc.config import CalculatorConfig
from infixcalc.expressions import ExpressionError, calculate_expression
from infixcalc.logging import bind_context, clear_context, get_logger

__all__ = ["repl", "run_repl", "BANNER"]

BANNER = (
    "infixcalc: + - * / % ^ (or **), parentheses and signs such as -5 or -(2+3)"
)

logger = get_logger(__name__)


def run_repl(config: CalculatorConfig, stream: TextIO, *, quiet: bool = False) -> int:
    """Read expressions from ``stream`` until the quit command or end of input.

    Each non-blank line is evaluated and its result, or the error message,
    is printed. Errors never end the session.

    Args:
        config: Loaded configuration (prompt, quit command, precision).
        stream: Line source, normally stdin.
        quiet: Skip the banner.

    Returns:
        Number of lines that failed to evaluate.
    """
    settings = config.repl
    precision = config.output.precision
    evaluated = 0
    failed = 0

    if settings.show_banner and not quiet:
        err_console.print(BANNER, markup=False)
        err_console.print(f"Type '{settings.quit_command}' to exit.", markup=False)

    bind_context(session="repl")
    try:
        while True:
            console.print(settings.prompt, end="", markup=False)
            line = stream.readline()
            if not line:
                # End of input
                console.print()
                break

            text = line.strip()
            if text == settings.quit_command:
                break
            if not text:
                continue

            try:
                value = calculate_expression(text)
            except ExpressionError as e:
                failed += 1
                logger.debug("expression_failed", expression=text, kind=e.kind)
                console.print(
                    format_expression_error(e, text), markup=False, soft_wrap=True
                )
                continue

            evaluated += 1
            console.print(
                format_result(value, precision), markup=False, soft_wrap=True
            )
    finally:
        logger.info("repl_finished", evaluated=evaluated, failed=failed)
        clear_context()

    return failed


@click.command()
@click.pass_context
def repl(ctx: click.Context) -> None:
    """Start an interactive calculator session.

    Reads one expression per line from standard input and prints each
    result. Blank lines are skipped; the session ends at the configured
    quit command (default: quit) or at end of input.

    Examples:
        infixcalc repl
        echo "2+3*4" | infixcalc repl
    """
    cli_ctx = get_cli_context(ctx)
    try:
        run_repl(
            cli_ctx.config,
            sys.stdin,
            quiet=cli_ctx.quiet,
        )
    except KeyboardInterrupt:
        console.print()
        raise SystemExit(ExitCode.INTERRUPTED) from None
