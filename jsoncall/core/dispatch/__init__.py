# jsoncall/core/dispatch/__init__.py
"""
Call dispatch: invoke a bound callable and classify its outputs.

No side effects on import.
"""

from .dispatcher import (
    Target,
    FunctionTarget,
    MethodTarget,
    dispatch,
    call_function_args,
    call_method_args,
    call_function,
    call_method,
)

__all__ = [
    "Target",
    "FunctionTarget",
    "MethodTarget",
    "dispatch",
    "call_function_args",
    "call_method_args",
    "call_function",
    "call_method",
]
