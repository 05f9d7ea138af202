"""Value representations for the Lox interpreter."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import assert_never

import numpy as np
from loguru import logger

from loxrt.config.settings import get_settings
from loxrt.core.ast import (
    DataKeyword,
    FloatLiteral,
    IntegerLiteral,
    KeywordLiteral,
    Literal,
    StringLiteral,
)
from loxrt.eval.descriptors import LoxArray, LoxClass, LoxFunction, LoxObject, LoxTrait

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def to_f32(value: float) -> float:
    """Round a host float to the nearest binary32 value."""
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def format_f32(value: float) -> str:
    """Shortest decimal text that reads back as the same binary32 value."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(np.float32(value), trim="-")


@dataclass(frozen=True)
class VNil:
    """The nil value."""

    def __str__(self) -> str:
        return "Nil"


@dataclass(frozen=True)
class VUninitialized:
    """A declared binding that has not been assigned yet.

    Distinct from nil: reading one is a runtime state the evaluator reports.
    """

    def __str__(self) -> str:
        return "Uninitialized"


@dataclass(frozen=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class VInt:
    """Signed 64-bit integer."""

    value: int

    def __post_init__(self) -> None:
        if not I64_MIN <= self.value <= I64_MAX:
            raise OverflowError(f"{self.value} does not fit in a 64-bit integer")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class VFloat:
    """32-bit float. The payload is rounded to binary32 on construction."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_f32(self.value))

    def __str__(self) -> str:
        return format_f32(self.value)


@dataclass(frozen=True)
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VFunction:
    """Shared reference to a function definition."""

    function: LoxFunction

    def __str__(self) -> str:
        return str(self.function)


@dataclass(frozen=True)
class VMethod:
    """A function bound to the instance it was looked up on.

    Both parts are shared references; binding never copies the instance.
    """

    function: LoxFunction
    instance: LoxObject

    def __str__(self) -> str:
        return f"<method {self.function.name} of {self.instance.class_name}>"


@dataclass(frozen=True)
class VClass:
    klass: LoxClass

    def __str__(self) -> str:
        return self.klass.name


@dataclass(frozen=True)
class VObject:
    instance: LoxObject

    def __str__(self) -> str:
        return f"{self.instance.class_name} instance"


@dataclass(frozen=True)
class VTrait:
    trait: LoxTrait

    def __str__(self) -> str:
        return self.trait.name


# Arrays currently being rendered, outermost first.
_rendering: list[int] = []


def _max_render_depth() -> int:
    # Each nesting level costs a few interpreter frames.
    return min(get_settings().max_render_depth, sys.getrecursionlimit() // 8)


@dataclass(frozen=True)
class VArray:
    """Shared, mutable array. Element updates are seen by every holder."""

    array: LoxArray

    def __str__(self) -> str:
        key = id(self.array)
        if key in _rendering:
            logger.debug("render.cycle depth={}", len(_rendering))
            return "[...]"
        if len(_rendering) >= _max_render_depth():
            logger.debug("render.truncate depth={}", len(_rendering))
            return "[...]"
        _rendering.append(key)
        try:
            return "[" + ", ".join(str(element) for element in self.array.elements) + "]"
        finally:
            _rendering.pop()


@dataclass(frozen=True)
class VModule:
    """Reference to a module by name. Its contents live elsewhere."""

    name: str

    def __str__(self) -> str:
        return "[Module]"


# Sum type for all values
Value = (
    VNil
    | VUninitialized
    | VBool
    | VInt
    | VFloat
    | VString
    | VFunction
    | VMethod
    | VClass
    | VObject
    | VTrait
    | VArray
    | VModule
)

NIL = VNil()
UNINITIALIZED = VUninitialized()
TRUE = VBool(True)
FALSE = VBool(False)


def render(value: Value) -> str:
    """Text shown by print and used in messages. Never raises."""
    return str(value)


def bind_method(function: LoxFunction, instance: LoxObject) -> VMethod:
    return VMethod(function, instance)


def from_literal(literal: Literal) -> Value:
    """Convert a parsed literal into its value."""
    match literal:
        case FloatLiteral(value):
            return VFloat(value)
        case IntegerLiteral(value):
            return VInt(value)
        case StringLiteral(value):
            return VString(value)
        case KeywordLiteral(DataKeyword.NIL):
            return NIL
        case KeywordLiteral(DataKeyword.TRUE):
            return TRUE
        case KeywordLiteral(DataKeyword.FALSE):
            return FALSE
        case _:
            raise ValueError(f"Unknown literal: {literal!r}")


def is_number(value: Value) -> bool:
    return isinstance(value, (VInt, VFloat))


def is_class(value: Value) -> bool:
    return isinstance(value, VClass)


def is_trait(value: Value) -> bool:
    return isinstance(value, VTrait)


def is_same(a: Value, b: Value) -> bool:
    """Identity comparison.

    Composite values are the same only when they wrap the very same
    descriptor; ``==`` compares them structurally instead. Scalars compare
    by value either way.
    """
    match (a, b):
        case (VMethod(f1, o1), VMethod(f2, o2)):
            return f1 is f2 and o1 is o2
        case (
            (VFunction(x), VFunction(y))
            | (VClass(x), VClass(y))
            | (VObject(x), VObject(y))
            | (VTrait(x), VTrait(y))
            | (VArray(x), VArray(y))
        ):
            return x is y
        case (
            VNil() | VUninitialized() | VBool() | VInt() | VFloat() | VString() | VModule(),
            _,
        ):
            return a == b
        case (VFunction() | VMethod() | VClass() | VObject() | VTrait() | VArray(), _):
            return False
        case _:
            assert_never(a)
