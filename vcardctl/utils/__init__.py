"""Utility functions for vcardctl."""

from .output import (
    handle_error,
    print_error,
    print_json,
    print_success,
    print_warning,
)

__all__ = [
    "handle_error",
    "print_error",
    "print_json",
    "print_success",
    "print_warning",
]
