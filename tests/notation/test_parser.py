"""Tests for the interval notation parser."""

from __future__ import annotations

import pytest

from numrange.errors import NotationError
from numrange.notation import ParsedInterval, parse_notation, parse_number


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("[0,100]", ParsedInterval(0, 100, False, False)),
        ("[0,100)", ParsedInterval(0, 100, False, True)),
        ("(0,100]", ParsedInterval(0, 100, True, False)),
        ("(0,100)", ParsedInterval(0, 100, True, True)),
        ("[-1.5,1.5]", ParsedInterval(-1.5, 1.5, False, False)),
        ("( -10 , +10 )", ParsedInterval(-10, 10, True, True)),
        ("[0,1e3)", ParsedInterval(0, 1000.0, False, True)),
        ("[100,0)", ParsedInterval(100, 0, False, True)),
    ],
)
def test_parse_notation(text: str, expected: ParsedInterval) -> None:
    """Test parsing of valid interval notation."""
    assert parse_notation(text) == expected


def test_parse_notation_number_types() -> None:
    """Test that integer literals give ints and others give floats."""
    parsed = parse_notation("[0,360.0)")
    assert type(parsed.min) is int
    assert type(parsed.max) is float


@pytest.mark.parametrize(
    "text",
    ["", "[0,100", "0,100]", "[a,1]", "[0;1]", "{0,1}", "[0,1,2]", "[,1]", "[1]"],
)
def test_parse_notation_invalid(text: str) -> None:
    """Test that malformed notation raises NotationError."""
    with pytest.raises(NotationError):
        parse_notation(text)


def test_parse_notation_error_location() -> None:
    """Test that errors report the column and the text."""
    with pytest.raises(NotationError) as exc_info:
        parse_notation("[0,x]")
    error = exc_info.value
    assert error.column == 4
    assert error.text == "[0,x]"
    assert "at column 4" in str(error)
    assert "'[0,x]'" in str(error)


def test_notation_error_is_value_error() -> None:
    """Test that NotationError can be caught as ValueError."""
    with pytest.raises(ValueError):
        parse_notation("nonsense")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("120", 120),
        ("-10", -10),
        ("+7", 7),
        ("361.5", 361.5),
        ("-0.25", -0.25),
        ("1e3", 1000.0),
        ("2E-2", 0.02),
    ],
)
def test_parse_number(text: str, expected: float) -> None:
    """Test parsing of number literals."""
    result = parse_number(text)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize("text", ["", "abc", "1,2", "[1]", "--1"])
def test_parse_number_invalid(text: str) -> None:
    """Test that non-numbers raise NotationError."""
    with pytest.raises(NotationError):
        parse_number(text)
