"""
CLI integration tests for vcardctl commands.

Drives the full command group end to end: global options, config loading,
logging setup and each subcommand's output.
"""

import json

import pytest
from click.testing import CliRunner

from vcardctl import __version__
from vcardctl.cli import cli


pytestmark = pytest.mark.integration


class TestGlobalOptions:
    """Integration tests for the command group."""

    @pytest.fixture
    def runner(self):
        """Create CLI test runner."""
        return CliRunner()

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("parse", "check", "types"):
            assert name in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_quiet_hides_info_logging(self, runner, sample_vcf):
        result = runner.invoke(cli, ["-q", "-v", "check", str(sample_vcf)])
        assert result.exit_code == 0
        assert "[INFO]" not in result.output

    def test_verbose_logs_reading(self, runner, sample_vcf):
        result = runner.invoke(cli, ["-v", "check", str(sample_vcf)])
        assert result.exit_code == 0
        assert "[INFO]" in result.output
        assert "Reading" in result.output

    def test_debug_logs_carry_source_position(self, runner, sample_vcf):
        result = runner.invoke(cli, ["-vv", "check", str(sample_vcf)])
        assert result.exit_code == 0
        assert "[simon.vcf:3] OK FN" in result.output


class TestParseCheckWorkflow:
    """Parse lines, write them to a card and check it."""

    @pytest.fixture
    def runner(self):
        """Create CLI test runner."""
        return CliRunner()

    def test_canonical_lines_pass_check(self, runner, tmp_path):
        result = runner.invoke(cli, [
            "parse", "--canonical",
            "version:4.0",
            "fn:Jane Doe",
            "n:Doe;Jane;;;",
            "tel;value=uri;type=cell:tel:+1-555-0100",
        ])
        assert result.exit_code == 0

        card = tmp_path / "jane.vcf"
        card.write_text("BEGIN:VCARD\n" + result.output + "END:VCARD\n")
        check = runner.invoke(cli, ["check", str(card), "--json"])
        assert check.exit_code == 0
        report = json.loads(check.output)
        assert report["checked"] == 4
        assert report["failures"] == []

    def test_json_records_round_trip(self, runner, sample_vcf):
        lines = [
            line for line in sample_vcf.read_text().splitlines()
            if line and not line.startswith((" ", "BEGIN", "END", "ADR"))
        ]
        result = runner.invoke(cli, ["parse", "--json", *lines])
        assert result.exit_code == 0
        records = json.loads(result.output)
        assert [record["line"] for record in records] == lines
        assert len({record["uuid"] for record in records}) == len(lines)

    def test_json_errors_for_check_failures(self, runner, tmp_path):
        card = tmp_path / "bad.vcf"
        card.write_text("BEGIN:VCARD\nVERSION:3.0\nEND:VCARD\n")
        result = runner.invoke(cli, ["check", str(card), "--json"])
        assert result.exit_code == 6
        failure = json.loads(result.output)["failures"][0]
        assert failure["line_number"] == 2
        assert failure["error"]["type"] == "PropertyValueError"
