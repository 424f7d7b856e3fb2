"""
Fixtures package for vcardctl testing.

Sample property lines taken from the examples in RFC 6350, RFC 6474,
RFC 6715 and RFC 8605, plus lines that must be rejected.

Fixture modules:
- sample_lines: valid lines (canonical form) and invalid lines with the
  error each one raises

Usage:
    from fixtures.sample_lines import RFC_LINES

    @pytest.mark.parametrize("line", RFC_LINES)
    def test_round_trip(line):
        assert Property.parse(line).serialize() == line
"""

from .sample_lines import INVALID_LINES, NON_CANONICAL_LINES, RFC_LINES

__all__ = ["INVALID_LINES", "NON_CANONICAL_LINES", "RFC_LINES"]
