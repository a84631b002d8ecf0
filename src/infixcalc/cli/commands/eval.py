from __future__ import annotations

import click

from infixcalc.cli.console import console, err_console
from infixcalc.cli.context import ExitCode, get_cli_context
from infixcalc.cli.output import (
    OutputFormat,
    format_expression_error,
    format_json,
    format_result,
)
from infixcalc.expressions import ExpressionError, calculate_expression
from infixcalc.logging import get_logger


@click.command(
    "eval",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("expression", nargs=-1, required=True)
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat]),
    default=None,
    help="Output format (default: output.format from config).",
)
@click.option(
    "-p",
    "--precision",
    type=click.IntRange(1, 17),
    default=None,
    help="Significant digits of the result (default: output.precision).",
)
@click.pass_context
def eval_command(
    ctx: click.Context,
    expression: tuple[str, ...],
    fmt: str | None,
    precision: int | None,
) -> None:
    """Evaluate EXPRESSION and print the result.

    Separate words are joined with spaces, so quoting is optional. Put
    "--" before an expression that starts with a minus sign.

    Examples:
        infixcalc eval "(2+3)*4"
        infixcalc eval 2 ^ 3 ^ 2
        infixcalc eval --format json -- -5+3
    """
    logger = get_logger(__name__)
    cli_ctx = get_cli_context(ctx)
    output_config = cli_ctx.config.output

    text = " ".join(expression)
    output_format = OutputFormat(fmt or output_config.format)
    digits = precision if precision is not None else output_config.precision

    try:
        value = calculate_expression(text)
    except ExpressionError as e:
        logger.debug(
            "expression_failed",
            expression=text,
            kind=e.kind,
            error=e.message,
        )
        if output_format == OutputFormat.JSON:
            info = e.to_info(text)
            console.print(
                format_json(
                    {
                        "expression": text,
                        "error": {
                            "kind": info.kind,
                            "message": info.message,
                            "position": info.position,
                        },
                    }
                ),
                markup=False,
                soft_wrap=True,
            )
        else:
            err_console.print(
                format_expression_error(e, text), markup=False, soft_wrap=True
            )
        raise SystemExit(ExitCode.FAILURE) from e

    logger.debug("expression_evaluated", expression=text, result=value)

    if output_format == OutputFormat.JSON:
        output = format_json(
            {
                "expression": text,
                "result": value,
                "formatted": format_result(value, digits),
            }
        )
    else:
        output = format_result(value, digits)
    console.print(output, markup=False, soft_wrap=True)
