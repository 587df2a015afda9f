import pytest

from jsoncall import normalize


@pytest.mark.parametrize("raw, expected", [
    ("", "[]"),
    ("[]", "[]"),
    ("5", "[5]"),
    ("  5", "[5]"),
    (" 5 ", "[5]"),
    ('"Hello"', '["Hello"]'),
    ('  "Hello"  ', '["Hello"]'),
    ('{ "name": "Tobi" }', '[{ "name": "Tobi" }]'),
    ("[1, 2, 3]", "[1, 2, 3]"),
    ("[1,2,3]", "[1,2,3]"),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_normalize_is_idempotent_on_arrays():
    once = normalize("  [1, 2]  ")
    assert normalize(once) == once


def test_normalize_does_not_validate_json():
    assert normalize("hey") == "[hey]"
