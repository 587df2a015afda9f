# jsoncall/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes are downgraded to UNKNOWN.
    """
    c = _safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass(eq=False)
class JsonCallError(Exception):
    """
    Base exception for every failure raised by jsoncall.

    Binding failures and errors coming out of the invoked callable share
    this one representation; they differ only by error_code and phase.
    """
    message: str
    error_code: str = codes.UNKNOWN
    phase: str = "unknown"              # resolve / bind / call / config
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @property
    def is_binding(self) -> bool:
        return self.error_code in codes.BINDING_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "phase": self.phase,
            "details": self.details,
        }


# -------- resolve phase --------

class NotCallable(JsonCallError):
    """A non-function value was presented where a function was expected."""

    def __init__(self, message: str = "Must pass a function", **details: Any) -> None:
        super().__init__(
            message=message,
            error_code=codes.NOT_CALLABLE,
            phase="resolve",
            details=details,
        )


# -------- bind phase --------

class InvalidJSON(JsonCallError):
    def __init__(self, message: str = "Invalid JSON", cause: Optional[BaseException] = None) -> None:
        super().__init__(
            message=message,
            error_code=codes.INVALID_JSON,
            phase="bind",
            cause=cause,
        )


class TooFewArguments(JsonCallError):
    def __init__(self, expected: int = -1, received: int = -1) -> None:
        super().__init__(
            message="Too few arguments passed",
            error_code=codes.TOO_FEW_ARGUMENTS,
            phase="bind",
            details={"expected": expected, "received": received},
        )


class TooManyArguments(JsonCallError):
    def __init__(self, expected: int = -1, received: int = -1) -> None:
        super().__init__(
            message="Too many arguments passed",
            error_code=codes.TOO_MANY_ARGUMENTS,
            phase="bind",
            details={"expected": expected, "received": received},
        )


class IncorrectType(JsonCallError):
    """
    A JSON value could not be coerced into the declared parameter type.

    `observed` is the JSON kind of the offending value, `expected` the
    human-readable name of the declared type (see jsoncall.core.types).
    """

    def __init__(
        self,
        observed: str,
        expected: str,
        *,
        index: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        details: Dict[str, Any] = {"observed": observed, "expected": expected}
        if index is not None:
            details["index"] = index
        super().__init__(
            message=f"Incorrect type {observed}, expected {expected}",
            error_code=codes.INCORRECT_TYPE,
            phase="bind",
            details=details,
            cause=cause,
        )

    @property
    def observed(self) -> str:
        return self.details["observed"]

    @property
    def expected(self) -> str:
        return self.details["expected"]


class VariadicNotSupported(JsonCallError):
    def __init__(self) -> None:
        super().__init__(
            message="Variadic functions are not yet supported",
            error_code=codes.VARIADIC_NOT_SUPPORTED,
            phase="bind",
        )


class UnsupportedParameterType(JsonCallError):
    """No validator can be built for a parameter annotation."""

    def __init__(self, annotation: Any, cause: Optional[BaseException] = None) -> None:
        super().__init__(
            message=f"Unsupported parameter type {annotation!r}",
            error_code=codes.UNSUPPORTED_TYPE,
            phase="bind",
            details={"annotation": _safe_str(annotation)},
            cause=cause,
        )


# -------- call phase --------

class CallableError(JsonCallError):
    """
    The invoked callable failed, either by raising or by returning a
    non-None error value. The callable's message is kept verbatim.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(
            message=message,
            error_code=codes.CALLABLE_ERROR,
            phase="call",
            details={"exception_type": type(cause).__name__} if cause is not None else {},
            cause=cause,
        )

    @classmethod
    def from_exception(cls, exc: BaseException) -> "CallableError":
        return cls(message=_safe_str(exc), cause=exc)


class InvalidReturn(JsonCallError):
    """The callable returned a value that does not fit its declared return shape."""

    def __init__(self, name: str, expected: str, observed: str) -> None:
        super().__init__(
            message=f"{name} returned {observed}, expected {expected}",
            error_code=codes.INVALID_RETURN,
            phase="call",
            details={"callable": name, "expected": expected, "observed": observed},
        )


# -------- configuration --------

class ConfigError(JsonCallError):
    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(
            message=message,
            error_code=codes.INVALID_CONFIG,
            phase="config",
            details=details,
        )
