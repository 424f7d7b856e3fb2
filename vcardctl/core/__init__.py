"""Core components for vcardctl."""

from .exceptions import (
    MalformedProperty,
    ParameterError,
    PropertyValueError,
    UnknownPropertyType,
    VcardError,
)
from .logging import get_logger, setup_logging
from .parameter import Parameter, ParameterType, build_parameters
from .property import Property
from .types import PropertyType, keyword_of, resolve
from .values import Value, ValueKind, build_value, default_value

__all__ = [
    "MalformedProperty",
    "Parameter",
    "ParameterError",
    "ParameterType",
    "Property",
    "PropertyType",
    "PropertyValueError",
    "UnknownPropertyType",
    "Value",
    "ValueKind",
    "VcardError",
    "build_parameters",
    "build_value",
    "default_value",
    "get_logger",
    "keyword_of",
    "resolve",
    "setup_logging",
]
