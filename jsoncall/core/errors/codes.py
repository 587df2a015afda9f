# jsoncall/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INVALID_CONFIG: Final[str] = "INVALID_CONFIG"

# signature resolution
NOT_CALLABLE: Final[str] = "NOT_CALLABLE"
UNSUPPORTED_TYPE: Final[str] = "UNSUPPORTED_TYPE"

# binding
INVALID_JSON: Final[str] = "INVALID_JSON"
TOO_FEW_ARGUMENTS: Final[str] = "TOO_FEW_ARGUMENTS"
TOO_MANY_ARGUMENTS: Final[str] = "TOO_MANY_ARGUMENTS"
INCORRECT_TYPE: Final[str] = "INCORRECT_TYPE"
VARIADIC_NOT_SUPPORTED: Final[str] = "VARIADIC_NOT_SUPPORTED"

# dispatch
CALLABLE_ERROR: Final[str] = "CALLABLE_ERROR"
INVALID_RETURN: Final[str] = "INVALID_RETURN"


# ---- semantic groups ----

RESOLVE_CODES: Final[set[str]] = {
    NOT_CALLABLE,
}

# Raised before the callable runs; the caller sent something unusable.
BINDING_CODES: Final[set[str]] = {
    INVALID_JSON,
    TOO_FEW_ARGUMENTS,
    TOO_MANY_ARGUMENTS,
    INCORRECT_TYPE,
    VARIADIC_NOT_SUPPORTED,
    UNSUPPORTED_TYPE,
}

KNOWN_CODES: Final[set[str]] = (
    {UNKNOWN, INVALID_CONFIG, CALLABLE_ERROR, INVALID_RETURN} | RESOLVE_CODES | BINDING_CODES
)
