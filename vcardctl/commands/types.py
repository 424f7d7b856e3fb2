"""
vcardctl types - List the property types this codec understands.

Usage:
    vcardctl types
    vcardctl types --json
"""

import click
from rich.table import Table

from ..core.parameter import ALLOWED_PARAMETERS
from ..core.types import PropertyType
from ..core.values import VALUE_RULES
from ..utils.output import console, print_json


def describe_types() -> list[dict]:
    """Keyword, default value kind and allowed parameters for every type."""
    rows = []
    for property_type in PropertyType:
        default_kind, alternatives = VALUE_RULES[property_type]
        rows.append({
            "keyword": property_type.keyword,
            "default_kind": default_kind.value,
            "value_types": sorted(alternatives),
            "parameters": sorted(p.value for p in ALLOWED_PARAMETERS[property_type]),
        })
    return rows


@click.command("types")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def types_cmd(json_output: bool) -> None:
    """List known property keywords with their default value kind."""
    rows = describe_types()
    if json_output:
        print_json(rows)
        return

    table = Table(title=f"{len(rows)} property types")
    table.add_column("Keyword", style="bold")
    table.add_column("Default kind")
    table.add_column("VALUE=")
    table.add_column("Parameters", style="dim")
    for row in rows:
        table.add_row(
            row["keyword"],
            row["default_kind"],
            ", ".join(row["value_types"]),
            ", ".join(row["parameters"]),
        )
    console.print(table)
