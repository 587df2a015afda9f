# jsoncall/core/binding/__init__.py
"""
Argument binding: JSON text in, typed argument list out.

No side effects on import.
"""

from .config import CallOptions, BindingConfig, new_config
from .normalize import normalize
from .binder import bind_arguments, arguments_of_function, arguments_of_method, coerce

__all__ = [
    "CallOptions",
    "BindingConfig",
    "new_config",
    "normalize",
    "bind_arguments",
    "arguments_of_function",
    "arguments_of_method",
    "coerce",
]
