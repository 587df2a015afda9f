# jsoncall/core/context.py
"""
Execution context injected into callables that ask for one.

A callable opts in by declaring an `ExecutionContext` (or subclass)
parameter in the leading slot. The value is produced by the configured
context factory and never comes from the JSON arguments.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional


@dataclass(frozen=True)
class ExecutionContext:
    """
    Runtime context for a single bind-and-call.

    Rules:
    - Do NOT mutate metadata in-place.
    - Use with_metadata() to derive a new context.
    """

    # Execution identity
    run_id: Optional[str] = None
    trace_id: Optional[str] = None

    # Wall-clock start time (epoch seconds)
    start_time: float = field(default_factory=time.time)

    # Cross-cutting metadata (tenant, user, request id, etc.)
    metadata: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def with_metadata(self, **updates: str) -> "ExecutionContext":
        """
        Return a new ExecutionContext with merged metadata.
        """
        merged = dict(self.metadata)
        merged.update(updates)
        return replace(self, metadata=MappingProxyType(merged))

    def value(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    @classmethod
    def background(cls) -> "ExecutionContext":
        """The fixed, empty context used when no factory is configured."""
        return _BACKGROUND


_BACKGROUND = ExecutionContext(start_time=0.0)


ContextFactory = Callable[[], Any]


def default_context_factory() -> ExecutionContext:
    return ExecutionContext.background()


def is_context_type(annotation: Any) -> bool:
    """True if the annotation declares the execution context capability."""
    return isinstance(annotation, type) and issubclass(annotation, ExecutionContext)


__all__ = [
    "ExecutionContext",
    "ContextFactory",
    "default_context_factory",
    "is_context_type",
]
