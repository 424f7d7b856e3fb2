"""Command implementations for vcardctl CLI."""

from .check import check
from .parse import parse
from .types import types_cmd

__all__ = ["check", "parse", "types_cmd"]
