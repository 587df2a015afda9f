# jsoncall/core/signature/resolver.py
"""
Signature Resolver - normalized view of a callable's parameters

Turns a Python callable into a Signature:
1. Ordered positional parameters with their annotations and descriptors
2. Where real arguments start (offset) and where a context may sit
3. Whether the callable is variadic
4. The declared return slots, used by the dispatcher to spot errors

A Signature is computed once per bind-and-call and never mutated.
"""

from __future__ import annotations

import inspect
import logging
import sys
import typing
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, get_args, get_origin

from ..errors import NotCallable
from ..types import TypeDescriptor, describe

logger = logging.getLogger(__name__)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class Parameter:
    """One positional parameter of a callable."""
    name: str
    annotation: Any
    descriptor: TypeDescriptor


@dataclass(frozen=True)
class Signature:
    """
    Normalized callable signature.

    Attributes:
        name: Qualified name of the callable (diagnostics only)
        parameters: Every positional parameter, receiver included for methods
        offset: Index of the first caller-visible parameter
        context_index: Index checked for an injected ExecutionContext
        variadic: True if the callable declares *args
        returns: Declared return slots, or None when the return is unannotated
    """
    name: str
    parameters: Tuple[Parameter, ...]
    offset: int = 0
    context_index: int = 0
    variadic: bool = False
    returns: Optional[Tuple[TypeDescriptor, ...]] = None

    @property
    def arity(self) -> int:
        """Number of JSON elements a caller must supply (receiver and context slot excluded)."""
        n = len(self.parameters) - self.offset
        if self.has_context():
            n -= 1
        return n

    def has_context(self, index: Optional[int] = None) -> bool:
        """True if the parameter at index (default: context_index) is a context slot."""
        i = self.context_index if index is None else index
        if i >= len(self.parameters):
            return False
        return self.parameters[i].descriptor.is_context

    @property
    def error_capable(self) -> bool:
        if self.returns is None:
            return False
        return any(r.is_error for r in self.returns)


@dataclass(frozen=True)
class Method:
    """
    A method looked up on a class.

    func is the plain function with the receiver at position 0.
    """
    name: str
    func: Callable[..., Any]


def method_by_name(receiver: Any, name: str) -> Optional[Method]:
    """
    Look up a public instance method by name.

    Args:
        receiver: An instance or a class
        name: Method name

    Returns:
        Method, or None if there is no such public instance method
    """
    if not name or name.startswith("_"):
        return None
    cls = receiver if isinstance(receiver, type) else type(receiver)
    try:
        attr = inspect.getattr_static(cls, name)
    except AttributeError:
        return None
    if isinstance(attr, (staticmethod, classmethod)):
        return None
    if not inspect.isfunction(attr):
        return None
    return Method(name=name, func=attr)


def signature_of_function(fn: Any) -> Signature:
    """
    Resolve the signature of a free function (or any bound callable).

    Raises:
        NotCallable: fn is not callable or exposes no signature
    """
    if not callable(fn):
        raise NotCallable(value_type=type(fn).__name__)
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise NotCallable(value_type=type(fn).__name__, reason=str(e)) from e

    return _build(_name_of(fn), sig, _type_hints(fn), offset=0, context_index=0)


def signature_of_method(method: Method) -> Signature:
    """
    Resolve the signature of a method.

    The receiver (position 0) is excluded from arity and from the
    argument offset; the context slot is looked for at position 1.
    """
    sig = inspect.signature(method.func)
    return _build(_name_of(method.func), sig, _type_hints(method.func), offset=1, context_index=1)


def _build(
    name: str,
    sig: inspect.Signature,
    hints: dict,
    *,
    offset: int,
    context_index: int,
) -> Signature:
    parameters = []
    variadic = False
    for p in sig.parameters.values():
        if p.kind is inspect.Parameter.VAR_POSITIONAL:
            variadic = True
            continue
        if p.kind not in _POSITIONAL:
            # keyword-only and **kwargs keep their defaults
            continue
        annotation = _annotation(hints.get(p.name, p.annotation))
        parameters.append(Parameter(p.name, annotation, describe(annotation)))

    signature = Signature(
        name=name,
        parameters=tuple(parameters),
        offset=offset,
        context_index=context_index,
        variadic=variadic,
        returns=_returns(hints.get("return", sig.return_annotation)),
    )
    logger.debug(
        "resolved signature %s: arity=%d variadic=%s context=%s",
        name, signature.arity, variadic, signature.has_context(),
    )
    return signature


def _returns(annotation: Any) -> Optional[Tuple[TypeDescriptor, ...]]:
    if annotation is inspect.Signature.empty or isinstance(annotation, str):
        return None
    if annotation is None or annotation is type(None):
        return ()
    if get_origin(annotation) is tuple:
        args = get_args(annotation)
        if args == ((),):
            return ()
        if args and args[-1] is not Ellipsis:
            return tuple(describe(a) for a in args)
    return (describe(annotation),)


def _annotation(annotation: Any) -> Any:
    # unresolved forward references bind as Any
    if annotation is inspect.Parameter.empty or isinstance(annotation, str):
        return Any
    return annotation


def _type_hints(fn: Any) -> dict:
    target = fn
    if not (inspect.isfunction(fn) or inspect.ismethod(fn)) and not isinstance(fn, type):
        call = getattr(type(fn), "__call__", None)
        if call is not None and inspect.isfunction(call):
            target = call
    try:
        return typing.get_type_hints(target)
    except Exception as e:
        logger.debug("could not resolve type hints for %r: %s", fn, e)
    return _hints_one_by_one(target)


def _hints_one_by_one(target: Any) -> dict:
    # only the annotations that fail to resolve fall back to Any
    raw = getattr(target, "__annotations__", None)
    if not isinstance(raw, dict):
        return {}
    globalns = _globals_of(target)
    hints = {}
    for name, annotation in raw.items():
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, globalns)
            except Exception as e:
                logger.debug("unresolved annotation %s: %r (%s)", name, annotation, e)
                continue
        hints[name] = annotation
    return hints


def _globals_of(target: Any) -> dict:
    fn = inspect.unwrap(target) if inspect.isfunction(target) else target
    globalns = getattr(fn, "__globals__", None)
    if globalns is None:
        module = sys.modules.get(getattr(fn, "__module__", None) or "")
        globalns = vars(module) if module is not None else {}
    return globalns


def _name_of(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or type(fn).__name__
