"""Tests for the value error taxonomy."""

import pytest

from loxrt.core.errors import (
    ExpectingDouble,
    ExpectingInteger,
    ExpectingNumber,
    ExpectingString,
    ProgramError,
    ValueErrorKind,
    ValueTypeError,
)
from loxrt.eval.value import VString
from loxrt.utils.location import Location


@pytest.mark.parametrize(
    ("error_cls", "message"),
    [
        (ExpectingDouble, "Type error! Expecting a double!"),
        (ExpectingInteger, "Type error! Expecting an integer!"),
        (ExpectingNumber, "Type error! Expecting a number!"),
        (ExpectingString, "Type error! Expecting a string!"),
    ],
)
def test_fixed_messages(error_cls, message):
    """Each error kind carries a stable message."""
    error = error_cls()
    assert error.message == message
    assert str(error) == message
    assert isinstance(error, ValueTypeError)


def test_error_keeps_offending_value():
    error = ExpectingInteger(VString("x"))
    assert error.value == VString("x")


def test_into_program_error_attaches_location():
    """The caller supplies the location, the error supplies the message."""
    location = Location(3, 14, "main.lox")
    program_error = ExpectingNumber().into_program_error(location)

    assert isinstance(program_error, ProgramError)
    assert program_error.location == location
    assert program_error.message == "Type error! Expecting a number!"
    assert str(program_error) == "main.lox:3:14: Type error! Expecting a number!"


def test_program_error_without_file():
    program_error = ExpectingString().into_program_error(Location(1, 2))
    assert str(program_error) == "line 1, column 2: Type error! Expecting a string!"


def test_each_kind_has_one_error_class():
    """The taxonomy is closed: one exception class per kind."""
    classes = [ExpectingDouble, ExpectingInteger, ExpectingNumber, ExpectingString]
    assert {cls.kind for cls in classes} == set(ValueErrorKind)
    assert set(ValueTypeError.__subclasses__()) == set(classes)
