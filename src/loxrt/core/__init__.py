"""Core shapes: parser literals and the value error taxonomy."""

from loxrt.core.ast import (
    DataKeyword,
    FloatLiteral,
    FunctionHeader,
    IntegerLiteral,
    KeywordLiteral,
    Literal,
    StringLiteral,
)
from loxrt.core.errors import (
    ExpectingDouble,
    ExpectingInteger,
    ExpectingNumber,
    ExpectingString,
    ProgramError,
    ValueErrorKind,
    ValueTypeError,
)

__all__ = [
    "DataKeyword",
    "ExpectingDouble",
    "ExpectingInteger",
    "ExpectingNumber",
    "ExpectingString",
    "FloatLiteral",
    "FunctionHeader",
    "IntegerLiteral",
    "KeywordLiteral",
    "Literal",
    "ProgramError",
    "StringLiteral",
    "ValueErrorKind",
    "ValueTypeError",
]
