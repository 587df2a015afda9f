# jsoncall/core/dispatch/dispatcher.py
"""
Call Dispatcher - invoke and classify

The dispatcher never coerces; it assumes the binder produced values of
the right types. It invokes the target and walks its outputs in declared
order. The first non-None error output (or a raised exception) ends the
call with a CallableError and no results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from ..binding import CallOptions, bind_arguments
from ..errors import CallableError, InvalidReturn
from ..signature import Method, Signature, signature_of_function, signature_of_method
from ..types import TypeDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FunctionTarget:
    """A free function (or any bound callable)."""
    fn: Callable[..., Any]

    def signature(self) -> Signature:
        return signature_of_function(self.fn)

    def invoke(self, args: Sequence[Any]) -> Any:
        return self.fn(*args)


@dataclass(frozen=True)
class MethodTarget:
    """A method together with the receiver it is called on."""
    receiver: Any
    method: Method

    def signature(self) -> Signature:
        return signature_of_method(self.method)

    def invoke(self, args: Sequence[Any]) -> Any:
        return self.method.func(self.receiver, *args)


Target = Union[FunctionTarget, MethodTarget]


def dispatch(target: Target, args: Sequence[Any], signature: Optional[Signature] = None) -> List[Any]:
    """
    Invoke target with a fully bound argument list.

    Args:
        target: FunctionTarget or MethodTarget
        args: Argument list from the binder (context included)
        signature: Already resolved signature, resolved from target if omitted

    Returns:
        Result Set: outputs in declared order, None error slots included

    Raises:
        CallableError: the callable raised, or returned a non-None error
        InvalidReturn: the returned value does not match the declared tuple shape
    """
    signature = signature or target.signature()

    try:
        value = target.invoke(args)
    except Exception as e:
        logger.debug("callable %s raised %s: %s", signature.name, type(e).__name__, e)
        raise CallableError.from_exception(e) from e

    values: List[Any] = []
    for slot, output in _outputs(signature, value):
        if _is_error(slot, output):
            logger.debug("callable %s returned error: %s", signature.name, output)
            if isinstance(output, BaseException):
                raise CallableError.from_exception(output) from output
            raise CallableError(message=str(output))
        values.append(output)

    return values


def _outputs(signature: Signature, value: Any) -> List[Tuple[Optional[TypeDescriptor], Any]]:
    returns = signature.returns
    if returns is None:
        return [] if value is None else [(None, value)]
    if len(returns) == 0:
        return []
    if len(returns) == 1:
        return [(returns[0], value)]
    if not isinstance(value, (tuple, list)) or len(value) != len(returns):
        observed = f"{len(value)} values" if isinstance(value, (tuple, list)) else type(value).__name__
        raise InvalidReturn(signature.name, expected=f"a tuple of {len(returns)} values", observed=observed)
    return list(zip(returns, value))


def _is_error(slot: Optional[TypeDescriptor], output: Any) -> bool:
    if output is None:
        return False
    if slot is None:
        return isinstance(output, BaseException)
    return slot.is_error


def call_function_args(fn: Any, args: Sequence[Any]) -> List[Any]:
    """Invoke a function with an already bound argument list."""
    return dispatch(FunctionTarget(fn), args)


def call_method_args(receiver: Any, method: Method, args: Sequence[Any]) -> List[Any]:
    """Invoke a method on receiver with an already bound argument list."""
    return dispatch(MethodTarget(receiver, method), args)


def call_function(fn: Any, args: Union[str, bytes], options: Optional[CallOptions] = None) -> List[Any]:
    """
    Invoke a function with arguments derived from a JSON string.

    Example:
        >>> call_function(lambda a, b: a + b, '[1, 2]')
        [3]
    """
    return _call(FunctionTarget(fn), args, options)


def call_method(
    receiver: Any,
    method: Method,
    args: Union[str, bytes],
    options: Optional[CallOptions] = None,
) -> List[Any]:
    """Invoke a method on receiver with arguments derived from a JSON string."""
    return _call(MethodTarget(receiver, method), args, options)


def _call(target: Target, args: Union[str, bytes], options: Optional[CallOptions]) -> List[Any]:
    signature = target.signature()
    arguments = bind_arguments(signature, args, options)
    return dispatch(target, arguments, signature)
