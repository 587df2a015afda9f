# jsoncall/core/signature/__init__.py
"""
Signature resolution for free functions and methods.

No side effects on import.
"""

from .resolver import (
    Parameter,
    Signature,
    Method,
    signature_of_function,
    signature_of_method,
    method_by_name,
)

__all__ = [
    "Parameter",
    "Signature",
    "Method",
    "signature_of_function",
    "signature_of_method",
    "method_by_name",
]
