"""
Logging configuration for vcardctl.

Provides centralized logging setup with verbosity levels:
- 0 (default): WARNING - errors and warnings only
- 1 (-v):      INFO - files read, lines checked, summary counts
- 2 (-vv):     DEBUG - every line parsed, skipped delimiters
- 3+ (-vvv):   TRACE - everything (raw unfolded lines)

Enhanced features:
- SourceContext: Adds file and line position to log messages
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional

# Custom TRACE level (more verbose than DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def trace(self, message, *args, **kwargs):
    """Log at TRACE level."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


# Add trace method to Logger class
logging.Logger.trace = trace


@dataclass
class SourceContext:
    """Context for source-aware logging.

    Tracks the file being checked and the current line number
    to provide richer log output.
    """
    source_name: Optional[str] = None
    line_number: Optional[int] = None

    def format_prefix(self) -> str:
        """Format the context as a log prefix.

        Examples:
            [contacts.vcf]
            [contacts.vcf:12]
        """
        if not self.source_name:
            return ""
        if self.line_number is None:
            return f"[{self.source_name}]"
        return f"[{self.source_name}:{self.line_number}]"


# Source context for the current check run
_current_source_context: Optional[SourceContext] = None


def get_source_context() -> Optional[SourceContext]:
    """Get the current source context."""
    return _current_source_context


def set_source_context(context: Optional[SourceContext]) -> None:
    """Set the current source context."""
    global _current_source_context
    _current_source_context = context


class SourceContextFormatter(logging.Formatter):
    """Formatter that includes source context if available."""

    def format(self, record):
        ctx = get_source_context()
        if ctx:
            prefix = ctx.format_prefix()
            if prefix:
                record.msg = f"{prefix} {record.msg}"
        return super().format(record)


def setup_logging(verbosity: int = 0, quiet: bool = False) -> logging.Logger:
    """Configure logging based on verbosity level.

    Args:
        verbosity: Number of -v flags (0=WARNING, 1=INFO, 2=DEBUG, 3+=TRACE)
        quiet: If True, suppress all output except errors

    Returns:
        The configured root logger for vcardctl
    """
    # Determine log level
    if quiet:
        level = logging.ERROR
    elif verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    elif verbosity == 2:
        level = logging.DEBUG
    else:  # verbosity >= 3
        level = TRACE

    logger = logging.getLogger("vcardctl")
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    # Format based on verbosity
    if verbosity >= 2:
        fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        formatter = SourceContextFormatter(fmt, datefmt="%H:%M:%S")
    elif verbosity == 1:
        formatter = SourceContextFormatter("[%(levelname)s] %(message)s")
    else:
        formatter = logging.Formatter("%(message)s")

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger for a module.

    Args:
        name: Module name (e.g., "vcardctl.commands.check").
              If None, returns the root vcardctl logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("vcardctl")
    return logging.getLogger(name)
