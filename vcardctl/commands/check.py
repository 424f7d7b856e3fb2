"""
vcardctl check - Validate every property line in a .vcf file.

Usage:
    vcardctl check contacts.vcf
    vcardctl check contacts.vcf --fail-fast
    vcardctl check contacts.vcf --json
"""

from pathlib import Path
from typing import Any, Optional

import click

from ..core.exceptions import ExitCode, VcardError, exception_to_json
from ..core.logging import SourceContext, get_logger, set_source_context
from ..core.property import Property
from ..core.reader import read_lines
from ..utils.output import handle_error, print_error, print_json, print_success, print_warning

logger = get_logger(__name__)


def check_file(
    path: Path,
    fail_fast: bool = False,
    skip_delimiters: bool = True,
) -> dict[str, Any]:
    """Parse every content line of ``path`` and collect the failures.

    Returns:
        Summary dict with ``file``, ``checked``, ``skipped`` and
        ``failures`` (each with line number, text and error details)
    """
    checked = 0
    skipped = 0
    failures: list[dict[str, Any]] = []
    context = SourceContext(source_name=path.name)
    set_source_context(context)
    try:
        for content_line in read_lines(path):
            context.line_number = content_line.line_number
            if skip_delimiters and content_line.is_delimiter:
                logger.debug(f"Skipping delimiter {content_line.text.strip()}")
                skipped += 1
                continue

            checked += 1
            try:
                prop = Property.parse(content_line.text)
            except VcardError as e:
                logger.debug(f"Failed: {e}")
                failures.append({
                    "line_number": content_line.line_number,
                    "text": content_line.text,
                    "error": exception_to_json(e)["error"],
                })
                if fail_fast:
                    break
                continue
            logger.debug(f"OK {prop.keyword}")
    finally:
        set_source_context(None)

    logger.info(f"Checked {checked} line(s) in {path}, {len(failures)} failure(s)")
    return {
        "file": str(path),
        "checked": checked,
        "skipped": skipped,
        "failures": failures,
    }


@click.command("check")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Output the report as JSON")
@click.option(
    "--fail-fast/--no-fail-fast", default=None,
    help="Stop at the first invalid line (default from .vcardctl.yaml)",
)
@click.pass_context
def check(
    ctx: click.Context,
    file: Path,
    json_output: bool,
    fail_fast: Optional[bool],
) -> None:
    """Check that every property line in FILE parses.

    Folded lines are joined first. BEGIN:VCARD / END:VCARD delimiters are
    skipped; no card-level rules are enforced.

    \b
    Examples:
      vcardctl check contacts.vcf
      vcardctl -v check contacts.vcf --fail-fast
      vcardctl check contacts.vcf --json | jq .failures
    """
    obj = ctx.obj or {}
    config = obj.get("config")
    if fail_fast is None:
        fail_fast = config.check.fail_fast if config else False
    skip_delimiters = config.check.skip_delimiters if config else True
    if not json_output and config is not None:
        json_output = config.output.format == "json"

    try:
        report = check_file(file, fail_fast=fail_fast, skip_delimiters=skip_delimiters)
    except (UnicodeDecodeError, OSError) as e:
        logger.debug(f"Could not read {file}: {e}")
        ctx.exit(handle_error(e, obj.get("json_errors", False), context={"file": str(file)}))

    if json_output:
        print_json(report)
    else:
        for failure in report["failures"]:
            print_error(f"line {failure['line_number']}: {failure['error']['message']}")
        if report["checked"] == 0:
            print_warning(f"No property lines found in {file.name}")
        elif not report["failures"]:
            print_success(f"{report['checked']} property line(s) OK in {file.name}")

    if report["failures"]:
        ctx.exit(ExitCode.CHECK_FAILED)
