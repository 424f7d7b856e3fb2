"""Reading property lines out of .vcf text.

Physical lines that start with a space or tab continue the previous line
(RFC 6350 3.2); they are joined back into one logical content line before
parsing. Card delimiters (BEGIN:VCARD / END:VCARD) are recognized so callers
can skip them.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .logging import get_logger

logger = get_logger(__name__)

DELIMITERS = frozenset({"BEGIN:VCARD", "END:VCARD"})


@dataclass
class ContentLine:
    """One logical (unfolded) line from a .vcf source."""

    text: str
    line_number: int

    @property
    def is_delimiter(self) -> bool:
        return self.text.strip().upper() in DELIMITERS


def unfold(content: str) -> list[ContentLine]:
    """Join folded physical lines into logical content lines.

    Blank lines are dropped. ``line_number`` is the 1-based physical line
    on which each logical line starts.
    """
    lines: list[ContentLine] = []
    current: Optional[ContentLine] = None

    for line_num, line in enumerate(content.replace("\r\n", "\n").split("\n"), 1):
        if current is not None and line[:1] in (" ", "\t"):
            # Continuation: drop exactly one leading whitespace character
            current.text += line[1:]
            continue

        if current is not None:
            lines.append(current)
            current = None

        if not line.strip():
            continue
        current = ContentLine(text=line, line_number=line_num)

    if current is not None:
        lines.append(current)

    logger.trace(f"Unfolded {len(lines)} content lines")
    return lines


def read_lines(path: Path | str) -> list[ContentLine]:
    """Load a .vcf file and return its unfolded content lines."""
    path = Path(path)
    logger.info(f"Reading {path}")
    return unfold(path.read_text(encoding="utf-8"))
