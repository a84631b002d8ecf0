"""CLI entry point for infixcalc.

This module defines the Click-based command-line interface.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from infixcalc import __version__
from infixcalc.cli.commands import eval_command, repl
from infixcalc.cli.context import CLIContext, ExitCode
from infixcalc.cli.output import format_error
from infixcalc.config import load_config
from infixcalc.exceptions import ConfigError
from infixcalc.logging import configure_logging

_VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="infixcalc")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=False, path_type=str),
    default=None,
    help="Path to config file (overrides ./infixcalc.yaml).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress non-essential output (ERROR level only).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: str | None,
    verbose: int,
    quiet: bool,
) -> None:
    """infixcalc - evaluate arithmetic expressions."""
    ctx.ensure_object(dict)

    # .env never overrides variables already set in the environment
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    # Priority: quiet > verbose > config
    flag_level: int | None = None
    if quiet:
        flag_level = logging.ERROR
    elif verbose > 0:
        flag_level = logging.INFO if verbose == 1 else logging.DEBUG

    # Route config-time log records to stderr before loading the config
    configure_logging(level=flag_level)

    config_path = Path(config_file) if config_file else None
    try:
        config = load_config(config_path)
    except ConfigError as e:
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        click.echo(format_error(e.message, details=details), err=True)
        ctx.exit(ExitCode.FAILURE)

    ctx.obj["cli_ctx"] = CLIContext(
        config=config,
        quiet=quiet,
    )

    if flag_level is None:
        configure_logging(
            level=_VERBOSITY_LEVELS.get(config.verbosity, logging.WARNING)
        )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(eval_command)
cli.add_command(repl)

if __name__ == "__main__":
    cli()
