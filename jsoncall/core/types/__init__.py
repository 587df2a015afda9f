# jsoncall/core/types/__init__.py
"""
Type descriptors for callable parameters and returns.

No side effects on import.
"""

from .descriptor import TypeKind, TypeDescriptor, describe, json_kind
from .naming import name_of

__all__ = [
    "TypeKind",
    "TypeDescriptor",
    "describe",
    "json_kind",
    "name_of",
]
