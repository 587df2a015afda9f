# jsoncall/core/binding/config.py
"""
Binding configuration.

CallOptions is what callers pass in; BindingConfig is derived from the
options and a Signature, fresh for every bind.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..context import ContextFactory, default_context_factory
from ..signature import Signature


@dataclass(frozen=True)
class CallOptions:
    """
    Caller-facing options.

    Attributes:
        context_factory: Produces the value injected into a context slot.
            Defaults to the background context.
    """
    context_factory: ContextFactory = default_context_factory

    def with_context_factory(self, fn: ContextFactory) -> "CallOptions":
        return replace(self, context_factory=fn)


DEFAULT_OPTIONS = CallOptions()


@dataclass(frozen=True)
class BindingConfig:
    context_factory: ContextFactory
    arity: int
    offset: int
    context_index: int


def new_config(signature: Signature, options: Optional[CallOptions] = None) -> BindingConfig:
    """Build the per-bind config for a signature with options applied."""
    options = options or DEFAULT_OPTIONS
    return BindingConfig(
        context_factory=options.context_factory,
        arity=signature.arity,
        offset=signature.offset,
        context_index=signature.context_index,
    )
