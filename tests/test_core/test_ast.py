"""Tests for literal shapes and function headers."""

from loxrt.core.ast import (
    DataKeyword,
    FloatLiteral,
    FunctionHeader,
    IntegerLiteral,
    KeywordLiteral,
    StringLiteral,
)
from loxrt.utils.location import Location


def test_literal_str():
    assert str(FloatLiteral(1.5)) == "1.5"
    assert str(IntegerLiteral(42)) == "42"
    assert str(StringLiteral("hi")) == '"hi"'
    assert str(KeywordLiteral(DataKeyword.NIL)) == "nil"


def test_function_header_arity():
    header = FunctionHeader("add", ("a", "b"), Location(1, 1))
    assert header.arity == 2
    assert str(header) == "add(a, b)"


def test_function_header_defaults_to_no_params():
    assert FunctionHeader("run").arity == 0


def test_location_str():
    assert str(Location(2, 5)) == "line 2, column 5"
    assert str(Location(2, 5, "a.lox")) == "a.lox:2:5"
