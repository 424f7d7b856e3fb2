#!/usr/bin/env python3
"""
vcardctl - vCard property line codec

Inspect and check vCard 4.0 property lines from the command line.

Usage:
    vcardctl parse "FN:Jane Doe"
    vcardctl check contacts.vcf
    vcardctl types

For more information: vcardctl --help
"""

from pathlib import Path
from typing import Optional

import click

from . import __version__
from .commands.check import check
from .commands.parse import parse
from .commands.types import types_cmd
from .core.config import load_config
from .core.logging import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="vcardctl")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v, -vv, -vvv)")
@click.option("-q", "--quiet", is_flag=True, help="Suppress output except errors")
@click.option("--json-errors", is_flag=True, help="Output errors as JSON for CI integration")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path), default=None,
    help="Path to a .vcardctl.yaml file",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: bool,
    json_errors: bool,
    config_path: Optional[Path],
) -> None:
    """vcardctl - vCard property line codec

    Parses vCard 4.0 property lines and renders them back to canonical text.

    \b
    Commands:
      parse    Parse property lines given as arguments
      check    Check every property line in a .vcf file
      types    List known property types

    \b
    Verbosity:
      -v       INFO level (files read, summary counts)
      -vv      DEBUG level (every line parsed)
      -vvv     TRACE level (unfolding details)
      -q       Quiet mode (errors only)

    \b
    Examples:
      vcardctl parse "FN:Jane Doe" --json
      vcardctl -v check contacts.vcf
      vcardctl --json-errors parse "XYZ:value" | jq .error
    """
    ctx.ensure_object(dict)
    ctx.obj["verbosity"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["json_errors"] = json_errors
    setup_logging(verbose, quiet)
    ctx.obj["config"] = load_config(config_path, use_cache=config_path is None)


cli.add_command(parse)
cli.add_command(check)
cli.add_command(types_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
