import pytest

from jsoncall import (
    CallOptions,
    ExecutionContext,
    IncorrectType,
    TooFewArguments,
    arguments_of_method,
    method_by_name,
)


class MathService:
    def sum(self, ctx: ExecutionContext, nums: list[int]) -> int:
        return sum(nums)

    def scale(self, factor: int, nums: list[int]) -> list[int]:
        return [n * factor for n in nums]


def test_method_with_context():
    m = method_by_name(MathService(), "sum")
    vals = arguments_of_method(m, "[[1,2,3,4]]")
    assert isinstance(vals[0], ExecutionContext)
    assert vals[1] == [1, 2, 3, 4]


def test_method_without_context():
    m = method_by_name(MathService, "scale")
    assert arguments_of_method(m, "[2, [1, 2]]") == [2, [1, 2]]


def test_receiver_is_not_an_argument():
    m = method_by_name(MathService, "scale")
    with pytest.raises(TooFewArguments):
        arguments_of_method(m, "[2]")


def test_method_type_mismatch():
    m = method_by_name(MathService, "sum")
    with pytest.raises(IncorrectType) as exc_info:
        arguments_of_method(m, '[["a"]]')
    assert str(exc_info.value) == "Incorrect type string, expected array of numbers"


def test_method_custom_context(recording_factory):
    m = method_by_name(MathService, "sum")
    vals = arguments_of_method(m, "[[1]]", CallOptions(context_factory=recording_factory))
    assert vals[0].run_id == "run-1"
