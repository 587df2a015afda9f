from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, TypedDict

import pytest
from pydantic import BaseModel

from jsoncall import ExecutionContext, TypeKind, describe, name_of


@dataclass
class Point:
    x: int
    y: int


class Pet(BaseModel):
    name: str


class Options(TypedDict):
    verbose: bool


@pytest.mark.parametrize("annotation, expected", [
    (int, "number"),
    (float, "number"),
    (Decimal, "number"),
    (str, "string"),
    (bool, "boolean"),
    (Point, "object"),
    (Pet, "object"),
    (dict, "object"),
    (Dict[str, str], "object"),
    (Mapping[str, int], "object"),
    (Options, "object"),
    (list[str], "array of strings"),
    (List[bool], "array of booleans"),
    (list[int], "array of numbers"),
    (Sequence[float], "array of numbers"),
    (Tuple[int, ...], "array of numbers"),
    (set[str], "array of strings"),
    (list[list[int]], "array of array of numberss"),
    (list[Point], "array of objects"),
    (list, "array of unknowns"),
    (Any, "unknown"),
    (complex, "unknown"),
])
def test_name_of(annotation, expected):
    assert name_of(annotation) == expected


def test_name_of_unwraps_optional():
    assert name_of(Optional[Point]) == "object"
    assert name_of(Point | None) == "object"
    assert name_of(Optional[list[int]]) == "array of numbers"


def test_name_of_accepts_descriptor():
    assert name_of(describe(list[str])) == "array of strings"


def test_bool_is_not_a_number():
    assert describe(bool).kind is TypeKind.BOOLEAN


def test_capability_tags():
    assert describe(ExecutionContext).is_context
    assert describe(ValueError).is_error
    assert describe(Optional[Exception]).is_error
    assert not describe(int).is_error
    assert not describe(Optional[ExecutionContext]).is_context


def test_non_optional_unions_are_unknown():
    assert describe(int | str).kind is TypeKind.UNKNOWN
    assert name_of(int | str) == "unknown"
