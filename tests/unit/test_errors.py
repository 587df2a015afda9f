from jsoncall import (
    CallableError,
    IncorrectType,
    InvalidJSON,
    JsonCallError,
    TooFewArguments,
    TooManyArguments,
    VariadicNotSupported,
)
from jsoncall.core.errors import codes


def test_messages():
    assert str(InvalidJSON()) == "Invalid JSON"
    assert str(TooFewArguments()) == "Too few arguments passed"
    assert str(TooManyArguments()) == "Too many arguments passed"
    assert str(VariadicNotSupported()) == "Variadic functions are not yet supported"
    assert str(IncorrectType("string", "number")) == "Incorrect type string, expected number"


def test_binding_errors_are_classified():
    assert TooFewArguments(2, 1).is_binding
    assert IncorrectType("string", "number").is_binding
    assert not CallableError("boom").is_binding


def test_incorrect_type_exposes_kinds():
    err = IncorrectType("string", "object", index=0)
    assert err.observed == "string"
    assert err.expected == "object"
    assert err.details["index"] == 0


def test_callable_error_keeps_message_and_cause():
    cause = ValueError("error adding pet")
    err = CallableError.from_exception(cause)
    assert str(err) == "error adding pet"
    assert err.cause is cause
    assert err.phase == "call"
    assert err.error_code == codes.CALLABLE_ERROR


def test_unknown_codes_are_downgraded():
    err = JsonCallError("odd", error_code="SOMETHING_ELSE")
    assert err.error_code == codes.UNKNOWN


def test_to_dict():
    d = TooManyArguments(expected=2, received=3).to_dict()
    assert d == {
        "type": "TooManyArguments",
        "error_code": "TOO_MANY_ARGUMENTS",
        "message": "Too many arguments passed",
        "phase": "bind",
        "details": {"expected": 2, "received": 3},
    }
