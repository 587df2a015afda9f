# jsoncall/core/errors/__init__.py
"""
Core error types for jsoncall.

This package defines the components responsible for:
- Representing binding and call errors
- Categorizing errors by stable code

No side effects on import.
"""

from . import codes
from .exceptions import (
    JsonCallError,
    NotCallable,
    InvalidJSON,
    TooFewArguments,
    TooManyArguments,
    IncorrectType,
    VariadicNotSupported,
    UnsupportedParameterType,
    CallableError,
    InvalidReturn,
    ConfigError,
)

__all__ = [
    "codes",
    "JsonCallError",
    "NotCallable",
    "InvalidJSON",
    "TooFewArguments",
    "TooManyArguments",
    "IncorrectType",
    "VariadicNotSupported",
    "UnsupportedParameterType",
    "CallableError",
    "InvalidReturn",
    "ConfigError",
]
