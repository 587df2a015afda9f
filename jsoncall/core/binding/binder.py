# jsoncall/core/binding/binder.py
"""
Argument Binder - JSON array text to a typed argument list

Steps, in order:
1. Reject variadic callables
2. Inject an execution context if the signature has a context slot
3. Decode the JSON array (NaN, Infinity and overflowing numbers are invalid)
4. Check the element count against the arity
5. Coerce each element into its declared parameter type (pydantic, strict)
6. Return context + coerced values in declared order
"""

from __future__ import annotations

import functools
import json
import logging
import math
from typing import Any, List, Optional, Union

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from ..errors import (
    IncorrectType,
    InvalidJSON,
    TooFewArguments,
    TooManyArguments,
    UnsupportedParameterType,
    VariadicNotSupported,
)
from ..signature import Method, Parameter, Signature, signature_of_function, signature_of_method
from ..types import json_kind, name_of
from .config import CallOptions, new_config

logger = logging.getLogger(__name__)

# pydantic error types that mean "wrong JSON kind for this type"
_MISMATCH_ERRORS = frozenset({
    "int_from_float",
    "none_required",
    "is_instance_of",
})


class _NonStandardNumber(ValueError):
    """NaN, Infinity or an overflowing literal: accepted by json.loads, not by JSON."""


def _reject_constant(name: str) -> Any:
    raise _NonStandardNumber(f"non-standard JSON constant {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise _NonStandardNumber(f"number out of range: {text}")
    return value


def bind_arguments(
    signature: Signature,
    args: Union[str, bytes],
    options: Optional[CallOptions] = None,
) -> List[Any]:
    """
    Bind a JSON array of positional arguments to a signature.

    Args:
        signature: Resolved callable signature
        args: JSON array text
        options: Optional CallOptions (context factory)

    Returns:
        Argument list, including the injected context if any

    Raises:
        VariadicNotSupported, InvalidJSON, TooFewArguments,
        TooManyArguments, IncorrectType, UnsupportedParameterType;
        pydantic.ValidationError for failures that are not type mismatches
    """
    c = new_config(signature, options)

    if signature.variadic:
        raise VariadicNotSupported()

    values: List[Any] = []
    offset, arity = c.offset, c.arity

    # inject context
    injected = signature.has_context(c.context_index)
    if injected:
        values.append(c.context_factory())
        offset += 1

    # parse params
    try:
        params = json.loads(args, parse_constant=_reject_constant, parse_float=_finite_float)
    except (json.JSONDecodeError, _NonStandardNumber) as e:
        raise InvalidJSON(cause=e) from e

    if not isinstance(params, list):
        raise IncorrectType(json_kind(params), "array")

    if len(params) < arity:
        raise TooFewArguments(expected=arity, received=len(params))

    if len(params) > arity:
        raise TooManyArguments(expected=arity, received=len(params))

    for i in range(arity):
        values.append(coerce(signature.parameters[offset + i], params[i], index=i))

    logger.debug(
        "bound %d argument(s) for %s (context=%s)",
        len(values), signature.name, injected,
    )
    return values


def arguments_of_function(fn: Any, args: Union[str, bytes], options: Optional[CallOptions] = None) -> List[Any]:
    """Arguments for the given function, derived from a JSON string."""
    return bind_arguments(signature_of_function(fn), args, options)


def arguments_of_method(method: Method, args: Union[str, bytes], options: Optional[CallOptions] = None) -> List[Any]:
    """Arguments for the given method (receiver excluded), derived from a JSON string."""
    return bind_arguments(signature_of_method(method), args, options)


def coerce(parameter: Parameter, raw: Any, *, index: Optional[int] = None) -> Any:
    """
    Coerce one decoded JSON element into the parameter's declared type.

    The element is re-encoded and validated as JSON in strict mode, so
    JSON kinds are never silently converted ("5" does not become 5).
    """
    adapter = _adapter_for(parameter.annotation)
    try:
        return adapter.validate_json(json.dumps(raw), strict=True)
    except ValidationError as e:
        mismatch = _first_mismatch(e)
        if mismatch is None:
            raise
        raise IncorrectType(
            json_kind(mismatch.get("input")),
            name_of(parameter.descriptor),
            index=index,
            cause=e,
        ) from e


def _first_mismatch(error: ValidationError) -> Optional[dict]:
    for detail in error.errors():
        kind = detail.get("type", "")
        if kind.endswith("_type") or kind in _MISMATCH_ERRORS:
            return detail
    return None


def _adapter_for(annotation: Any) -> TypeAdapter:
    try:
        hash(annotation)
    except TypeError:
        return _build_adapter(annotation)
    return _cached_adapter(annotation)


@functools.lru_cache(maxsize=512)
def _cached_adapter(annotation: Any) -> TypeAdapter:
    return _build_adapter(annotation)


def _build_adapter(annotation: Any) -> TypeAdapter:
    try:
        return TypeAdapter(annotation)
    except PydanticSchemaGenerationError as e:
        raise UnsupportedParameterType(annotation, cause=e) from e
