"""
vcardctl parse - Parse property lines and show their structure.

Usage:
    vcardctl parse "FN:Jane Doe"
    vcardctl parse "ADR;TYPE=HOME:;;1 Main St;Springfield;;;" --json
    vcardctl parse "fn:Jane" --canonical
"""

from typing import Optional

import click
from rich.markup import escape
from rich.table import Table

from ..core.config import OUTPUT_FORMATS
from ..core.exceptions import VcardError
from ..core.logging import get_logger
from ..core.property import Property
from ..utils.output import console, handle_error, print_json

logger = get_logger(__name__)


def _render_table(properties: list[Property]) -> Table:
    table = Table(title="Properties", show_lines=False)
    table.add_column("Type", style="bold")
    table.add_column("Parameters")
    table.add_column("Kind", style="dim")
    table.add_column("Value")
    table.add_column("UUID", style="dim")
    for prop in properties:
        table.add_row(
            escape(prop.keyword),
            escape(prop.format_parameters()),
            prop.value.kind.value,
            escape(prop.value.to_text()),
            str(prop.uuid)[:8],
        )
    return table


@click.command("parse")
@click.argument("lines", nargs=-1, required=True)
@click.option("--json", "json_output", is_flag=True, help="Output records as JSON")
@click.option(
    "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS), default=None,
    help="Output format (default from .vcardctl.yaml, else table)",
)
@click.option("--canonical", is_flag=True, help="Print only the canonical line for each input")
@click.pass_context
def parse(
    ctx: click.Context,
    lines: tuple,
    json_output: bool,
    output_format: Optional[str],
    canonical: bool,
) -> None:
    """Parse one or more property lines.

    Every line must parse; the first failure stops the command and exits
    with the error's exit code.

    \b
    Examples:
      vcardctl parse "FN:Jane Doe"
      vcardctl parse "URL:http://example.com:8080/x" --json
      vcardctl parse "tel;type=cell:+1-555-0100" --canonical
    """
    obj = ctx.obj or {}
    json_errors = obj.get("json_errors", False)
    config = obj.get("config")
    if output_format is None:
        output_format = config.output.format if config else "table"
    if json_output:
        output_format = "json"

    properties = []
    for index, line in enumerate(lines, 1):
        try:
            prop = Property.parse(line)
        except VcardError as e:
            logger.debug(f"Argument {index} failed: {e}")
            ctx.exit(handle_error(e, json_errors, context={"argument": index, "line": line}))
        logger.debug(f"Argument {index} parsed as {prop.keyword}")
        properties.append(prop)

    logger.info(f"Parsed {len(properties)} property line(s)")

    if canonical:
        for prop in properties:
            click.echo(prop.serialize())
    elif output_format == "json":
        print_json([prop.to_dict() for prop in properties])
    else:
        console.print(_render_table(properties))
