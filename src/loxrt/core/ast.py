"""Literal and signature shapes handed over by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from loxrt.utils.location import Location


class DataKeyword(Enum):
    """Keywords that denote a value on their own."""

    NIL = "nil"
    TRUE = "true"
    FALSE = "false"


@dataclass(frozen=True)
class FloatLiteral:
    """Float literal: 3.14"""

    value: float

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class IntegerLiteral:
    """Integer literal: 42"""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StringLiteral:
    """Quoted string literal, stored without its quotes."""

    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class KeywordLiteral:
    """One of true, false or nil."""

    keyword: DataKeyword

    def __str__(self) -> str:
        return self.keyword.value


Literal = FloatLiteral | IntegerLiteral | StringLiteral | KeywordLiteral


@dataclass(frozen=True)
class FunctionHeader:
    """Name and parameter list of a function, without its body.

    Traits are made of these: they list what a class must provide.
    """

    name: str
    params: tuple[str, ...] = ()
    location: Location | None = None

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(self.params)})"
