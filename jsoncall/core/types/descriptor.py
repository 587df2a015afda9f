# jsoncall/core/types/descriptor.py
"""
Type Descriptor - closed description of a Python annotation

Every annotation met during signature resolution is mapped once onto a
small enumeration of kinds. Naming, capability checks (context / error)
and diagnostics all work off the descriptor instead of inspecting
annotations again.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import decimal
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union, get_args, get_origin

from pydantic import BaseModel

from ..context import is_context_type


class TypeKind(str, Enum):
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    MAPPING = "mapping"
    RECORD = "record"
    SEQUENCE = "sequence"
    OPTIONAL = "optional"
    CONTEXT = "context"
    ERROR = "error"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Immutable description of one annotation.

    element is set for SEQUENCE (item type) and OPTIONAL (wrapped type).
    """

    kind: TypeKind
    annotation: Any = Any
    element: Optional["TypeDescriptor"] = None

    @property
    def is_context(self) -> bool:
        return self.kind is TypeKind.CONTEXT

    @property
    def is_error(self) -> bool:
        if self.kind is TypeKind.OPTIONAL and self.element is not None:
            return self.element.is_error
        return self.kind is TypeKind.ERROR

    @property
    def nullable(self) -> bool:
        return self.kind is TypeKind.OPTIONAL or self.kind is TypeKind.UNKNOWN

    def unwrap(self) -> "TypeDescriptor":
        """Strip OPTIONAL layers."""
        d = self
        while d.kind is TypeKind.OPTIONAL and d.element is not None:
            d = d.element
        return d


_NUMBER_TYPES = (int, float, decimal.Decimal)
_SEQUENCE_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Iterable,
)
_MAPPING_ORIGINS = (
    dict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
)
_UNION_ORIGINS = (Union, types.UnionType)

_UNKNOWN = TypeDescriptor(TypeKind.UNKNOWN)


def describe(annotation: Any) -> TypeDescriptor:
    """Map an annotation onto a TypeDescriptor."""
    if annotation is Any or annotation is None or annotation is type(None):
        return TypeDescriptor(TypeKind.UNKNOWN, annotation)

    origin = get_origin(annotation)

    if origin is typing.Annotated:
        return describe(get_args(annotation)[0])

    if origin in _UNION_ORIGINS:
        members = [a for a in get_args(annotation) if a is not type(None)]
        if len(members) == 1 and len(members) < len(get_args(annotation)):
            return TypeDescriptor(TypeKind.OPTIONAL, annotation, describe(members[0]))
        return TypeDescriptor(TypeKind.UNKNOWN, annotation)

    if origin is not None:
        if origin in _SEQUENCE_ORIGINS:
            return TypeDescriptor(TypeKind.SEQUENCE, annotation, _element_of(origin, get_args(annotation)))
        if origin in _MAPPING_ORIGINS:
            return TypeDescriptor(TypeKind.MAPPING, annotation)
        return TypeDescriptor(TypeKind.UNKNOWN, annotation)

    if not isinstance(annotation, type):
        return TypeDescriptor(TypeKind.UNKNOWN, annotation)

    # bool is an int subclass, check it first
    if issubclass(annotation, bool):
        return TypeDescriptor(TypeKind.BOOLEAN, annotation)
    if issubclass(annotation, _NUMBER_TYPES):
        return TypeDescriptor(TypeKind.NUMBER, annotation)
    if issubclass(annotation, str):
        return TypeDescriptor(TypeKind.STRING, annotation)
    if is_context_type(annotation):
        return TypeDescriptor(TypeKind.CONTEXT, annotation)
    if issubclass(annotation, BaseException):
        return TypeDescriptor(TypeKind.ERROR, annotation)
    if dataclasses.is_dataclass(annotation) or issubclass(annotation, BaseModel):
        return TypeDescriptor(TypeKind.RECORD, annotation)
    if typing.is_typeddict(annotation) or issubclass(annotation, _MAPPING_ORIGINS):
        return TypeDescriptor(TypeKind.MAPPING, annotation)
    if issubclass(annotation, (list, tuple, set, frozenset)):
        return TypeDescriptor(TypeKind.SEQUENCE, annotation, _UNKNOWN)

    return TypeDescriptor(TypeKind.UNKNOWN, annotation)


def _element_of(origin: Any, args: tuple) -> TypeDescriptor:
    if not args:
        return _UNKNOWN
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return describe(args[0])
        # heterogeneous tuples only name cleanly when every slot agrees
        elements = {describe(a).kind for a in args}
        if len(elements) == 1:
            return describe(args[0])
        return _UNKNOWN
    return describe(args[0])


def json_kind(value: Any) -> str:
    """JSON kind of a decoded JSON value, as used in diagnostics."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return "unknown"
