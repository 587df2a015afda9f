# jsoncall/__init__.py
"""
jsoncall - invoke typed Python callables with JSON arguments

Functional API:
    >>> from jsoncall import call_function
    >>> def add(a: int, b: int) -> int:
    ...     return a + b
    >>> call_function(add, '[1, 2]')
    [3]

Methods:
    >>> from jsoncall import method_by_name, call_method
    >>> m = method_by_name(service, "sum")
    >>> call_method(service, m, '[[1, 2, 3]]')

Two-step (bind, then call):
    >>> from jsoncall import arguments_of_function, call_function_args
    >>> args = arguments_of_function(add, '[1, 2]')
    >>> call_function_args(add, args)

Execution context:
    A leading `ExecutionContext` parameter is injected, not read from JSON.
    Pass CallOptions(context_factory=...) to control what gets injected.

Configured facade:
    >>> from jsoncall import Invoker, JsonCallConfig
    >>> invoker = Invoker(JsonCallConfig.from_yaml())
    >>> invoker.call(add, '[1, 2]')
"""

__version__ = "0.1.0"

from .core.context import ExecutionContext, ContextFactory, default_context_factory
from .core.types import TypeKind, TypeDescriptor, describe, name_of
from .core.signature import (
    Parameter,
    Signature,
    Method,
    signature_of_function,
    signature_of_method,
    method_by_name,
)
from .core.binding import (
    CallOptions,
    BindingConfig,
    new_config,
    normalize,
    bind_arguments,
    arguments_of_function,
    arguments_of_method,
)
from .core.dispatch import (
    FunctionTarget,
    MethodTarget,
    dispatch,
    call_function_args,
    call_method_args,
    call_function,
    call_method,
)
from .core.errors import (
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
from .config import JsonCallConfig
from .api import Invoker

__all__ = [
    # Version
    "__version__",

    # Context
    "ExecutionContext",
    "ContextFactory",
    "default_context_factory",

    # Types
    "TypeKind",
    "TypeDescriptor",
    "describe",
    "name_of",

    # Signatures
    "Parameter",
    "Signature",
    "Method",
    "signature_of_function",
    "signature_of_method",
    "method_by_name",

    # Binding
    "CallOptions",
    "BindingConfig",
    "new_config",
    "normalize",
    "bind_arguments",
    "arguments_of_function",
    "arguments_of_method",

    # Dispatch
    "FunctionTarget",
    "MethodTarget",
    "dispatch",
    "call_function_args",
    "call_method_args",
    "call_function",
    "call_method",

    # Errors
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

    # Configured API
    "JsonCallConfig",
    "Invoker",
]
