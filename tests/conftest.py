"""Shared fixtures for vcardctl tests."""

import logging

import pytest
from click.testing import CliRunner

from vcardctl.core.config import clear_config_cache
from vcardctl.core.logging import set_source_context


SAMPLE_VCF = (
    "BEGIN:VCARD\r\n"
    "VERSION:4.0\r\n"
    "FN:Simon Perreault\r\n"
    "N:Perreault;Simon;;;ing. jr,M.Sc.\r\n"
    "BDAY:--0203\r\n"
    "ANNIVERSARY:20090808T1430-0500\r\n"
    "GENDER:M\r\n"
    "LANG;PREF=1:fr\r\n"
    "LANG;PREF=2:en\r\n"
    "ORG;TYPE=work:Viagenie\r\n"
    "ADR;TYPE=work:;Suite D2-630;2875 Laurier;\r\n"
    " Quebec;QC;G1V 2M2;Canada\r\n"
    "TEL;VALUE=uri;TYPE=\"work,voice\";PREF=1:tel:+1-418-656-9254;ext=102\r\n"
    "EMAIL;TYPE=work:simon.perreault@viagenie.ca\r\n"
    "GEO;TYPE=work:geo:46.772673,-71.282945\r\n"
    "URL;TYPE=home:http://nomis80.org\r\n"
    "END:VCARD\r\n"
)


@pytest.fixture
def cli_runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def sample_vcf(tmp_path):
    """The RFC 6350 section 8 example card, folded and CRLF terminated."""
    path = tmp_path / "simon.vcf"
    path.write_text(SAMPLE_VCF, newline="")
    return path


@pytest.fixture(autouse=True)
def reset_global_state(tmp_path, monkeypatch):
    """Isolate tests from any .vcardctl.yaml on the machine."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    clear_config_cache()
    yield
    clear_config_cache()
    set_source_context(None)
    logging.getLogger("vcardctl").handlers.clear()
