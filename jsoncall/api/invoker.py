# jsoncall/api/invoker.py
"""
Invoker - configured entry point for JSON calls

Holds a JsonCallConfig and applies it to every call:
1. Optionally normalize raw text (bare scalar -> one-element array)
2. Bind with the configured context factory
3. Dispatch and return the Result Set
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from jsoncall.config import JsonCallConfig
from jsoncall.core.binding import CallOptions, arguments_of_function, normalize
from jsoncall.core.context import ContextFactory
from jsoncall.core.dispatch import call_function, call_method
from jsoncall.core.errors import NotCallable
from jsoncall.core.signature import Method, method_by_name


class Invoker:
    """
    Configured JSON call facade.

    Example:
        >>> invoker = Invoker(JsonCallConfig(normalize=True))
        >>> invoker.call(abs, '-5')
        [5]
    """

    def __init__(
        self,
        config: Optional[JsonCallConfig] = None,
        *,
        context_factory: Optional[ContextFactory] = None,
    ):
        """
        Create an invoker

        Args:
            config: Configuration (defaults if None)
            context_factory: Overrides the configured context factory
        """
        self.config = config or JsonCallConfig.default()
        options = self.config.to_options()
        if context_factory is not None:
            options = options.with_context_factory(context_factory)
        self._options = options

    @property
    def options(self) -> CallOptions:
        return self._options

    def arguments(self, fn: Any, args: str) -> List[Any]:
        """Bind args for fn without calling it."""
        return arguments_of_function(fn, self._prepare(args), self._options)

    def call(self, fn: Any, args: str) -> List[Any]:
        """
        Invoke fn with a JSON argument array.

        Returns:
            Result Set (list of outputs)
        """
        return call_function(fn, self._prepare(args), self._options)

    def call_method(self, receiver: Any, method: Union[Method, str], args: str) -> List[Any]:
        """
        Invoke a method on receiver with a JSON argument array.

        Args:
            receiver: Object the method is called on
            method: Method, or the name of a public method of the receiver
            args: JSON argument array
        """
        if isinstance(method, str):
            name = method
            method = method_by_name(receiver, name)
            if method is None:
                raise NotCallable(
                    f"{type(receiver).__name__} has no method {name!r}",
                    method=name,
                )
        return call_method(receiver, method, self._prepare(args), self._options)

    def _prepare(self, args: str) -> str:
        if self.config.normalize:
            return normalize(args)
        return args
