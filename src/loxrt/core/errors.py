"""Type-mismatch errors raised by the value model."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from loxrt.utils.location import Location


class ValueErrorKind(Enum):
    """Closed set of failures the value model can report."""

    EXPECTING_DOUBLE = "Type error! Expecting a double!"
    EXPECTING_INTEGER = "Type error! Expecting an integer!"
    EXPECTING_NUMBER = "Type error! Expecting a number!"
    EXPECTING_STRING = "Type error! Expecting a string!"


class ProgramError(Exception):
    """A guest-program error positioned in the source."""

    def __init__(self, message: str, location: Location) -> None:
        super().__init__(f"{location}: {message}")
        self.message = message
        self.location = location


class ValueTypeError(Exception):
    """Base class for value narrowing failures.

    The value model is location-agnostic: it raises one of the subclasses
    below and the evaluator pairs it with a source position through
    ``into_program_error``.
    """

    kind: ClassVar[ValueErrorKind]

    def __init__(self, value: object | None = None) -> None:
        super().__init__(self.kind.value)
        self.value = value

    @property
    def message(self) -> str:
        return self.kind.value

    def into_program_error(self, location: Location) -> ProgramError:
        return ProgramError(self.message, location)


class ExpectingDouble(ValueTypeError):
    """Operand cannot be narrowed to a float."""

    kind = ValueErrorKind.EXPECTING_DOUBLE


class ExpectingInteger(ValueTypeError):
    """Operand cannot be narrowed to an integer."""

    kind = ValueErrorKind.EXPECTING_INTEGER


class ExpectingNumber(ValueTypeError):
    """Operand is neither an integer nor a float."""

    kind = ValueErrorKind.EXPECTING_NUMBER


class ExpectingString(ValueTypeError):
    """Operand is not a string."""

    kind = ValueErrorKind.EXPECTING_STRING
