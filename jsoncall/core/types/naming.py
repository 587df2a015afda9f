# jsoncall/core/types/naming.py
from __future__ import annotations

from typing import Any, Union

from .descriptor import TypeDescriptor, TypeKind, describe


_NAMES = {
    TypeKind.NUMBER: "number",
    TypeKind.BOOLEAN: "boolean",
    TypeKind.STRING: "string",
    TypeKind.MAPPING: "object",
    TypeKind.RECORD: "object",
}


def name_of(t: Union[TypeDescriptor, Any]) -> str:
    """
    Return the JSON-domain name of a type, for diagnostics only.

    Accepts a TypeDescriptor or a raw annotation. Optional layers are
    unwrapped first, so `Optional[User]` reads as "object".

    Example:
        >>> name_of(list[int])
        'array of numbers'
    """
    d = t if isinstance(t, TypeDescriptor) else describe(t)
    d = d.unwrap()

    if d.kind is TypeKind.SEQUENCE:
        return "array of " + name_of(d.element or TypeDescriptor(TypeKind.UNKNOWN)) + "s"

    return _NAMES.get(d.kind, "unknown")
