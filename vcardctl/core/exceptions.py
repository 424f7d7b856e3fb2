"""
Custom exceptions for vcardctl.

Provides specific exception types with associated exit codes
for each way a property line can fail to parse. All exceptions support
JSON serialization for CI integration via --json-errors flag.
"""

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .types import PropertyType


class ExitCode:
    """Standard exit codes for vcardctl."""
    SUCCESS = 0
    GENERAL_ERROR = 1
    MALFORMED_PROPERTY = 2
    UNKNOWN_PROPERTY_TYPE = 3
    INVALID_PARAMETER = 4
    INVALID_VALUE = 5
    CHECK_FAILED = 6


class VcardError(Exception):
    """Base class for every property parsing failure."""

    @property
    def exit_code(self) -> int:
        return ExitCode.GENERAL_ERROR


@dataclass
class MalformedProperty(VcardError):
    """Raised when a line has no ':' separating the head from the value.

    Attributes:
        line: The offending line, as received
    """
    line: str

    def __str__(self) -> str:
        return f"Malformed property line (missing ':'): {self.line!r}"

    @property
    def exit_code(self) -> int:
        return ExitCode.MALFORMED_PROPERTY


@dataclass
class UnknownPropertyType(VcardError):
    """Raised when a keyword does not name any known property type.

    Attributes:
        keyword: The keyword exactly as it appeared in the line
    """
    keyword: str

    def __str__(self) -> str:
        return f"Unknown property type: {self.keyword!r}"

    @property
    def exit_code(self) -> int:
        return ExitCode.UNKNOWN_PROPERTY_TYPE


@dataclass
class ParameterError(VcardError):
    """Raised when a parameter is malformed or not allowed on its property.

    Attributes:
        parameter: The raw parameter text (e.g. "PREF=0")
        reason: Human-readable explanation
    """
    parameter: str
    reason: str

    def __str__(self) -> str:
        return f"Invalid parameter {self.parameter!r}: {self.reason}"

    @property
    def exit_code(self) -> int:
        return ExitCode.INVALID_PARAMETER


@dataclass
class PropertyValueError(VcardError, ValueError):
    """Raised when a value does not match the grammar of its property type.

    Attributes:
        property_type: The property type the value was parsed for
        text: The raw value text
        reason: Human-readable explanation
    """
    property_type: "PropertyType"
    text: str
    reason: str

    def __str__(self) -> str:
        return f"Invalid {self.property_type.value} value {self.text!r}: {self.reason}"

    @property
    def exit_code(self) -> int:
        return ExitCode.INVALID_VALUE


def exception_to_json(exc: Exception, context: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Convert an exception to a JSON-serializable dictionary.

    Args:
        exc: The exception to convert
        context: Optional additional context (file, line number, etc.)

    Returns:
        JSON-serializable dict with error details
    """
    error_dict: dict[str, Any] = {
        "type": type(exc).__name__,
        "message": str(exc),
    }

    # Add exit code if available
    if hasattr(exc, "exit_code"):
        error_dict["exit_code"] = exc.exit_code
    else:
        error_dict["exit_code"] = ExitCode.GENERAL_ERROR

    # Add specific fields for known exception types
    if isinstance(exc, MalformedProperty):
        error_dict["line"] = exc.line

    elif isinstance(exc, UnknownPropertyType):
        error_dict["keyword"] = exc.keyword

    elif isinstance(exc, ParameterError):
        error_dict["parameter"] = exc.parameter
        error_dict["reason"] = exc.reason

    elif isinstance(exc, PropertyValueError):
        error_dict["property_type"] = exc.property_type.value
        error_dict["text"] = exc.text[:2000]  # Truncate for JSON
        error_dict["reason"] = exc.reason

    # Add context if provided
    if context:
        error_dict["context"] = context

    return {"error": error_dict}


def format_json_error(exc: Exception, context: Optional[dict[str, Any]] = None) -> str:
    """Format an exception as a JSON string.

    Args:
        exc: The exception to format
        context: Optional additional context

    Returns:
        JSON string with error details
    """
    return json.dumps(exception_to_json(exc, context), indent=2, default=str)
