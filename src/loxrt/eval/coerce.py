"""Narrowing conversions from values to host primitives.

Each conversion either returns the host value or raises one of the
``ValueTypeError`` subclasses. No location is attached here; the evaluator
does that with ``into_program_error``.
"""

from __future__ import annotations

import math

from loguru import logger

from loxrt.core.errors import ExpectingDouble, ExpectingInteger, ExpectingString
from loxrt.eval.value import I64_MAX, I64_MIN, VFloat, VInt, VString, Value, to_f32


def truncate_to_i64(value: float) -> int:
    """Truncate toward zero, saturating at the 64-bit bounds. NaN maps to 0."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return I64_MAX if value > 0 else I64_MIN
    return max(I64_MIN, min(I64_MAX, math.trunc(value)))


def to_integer(value: Value) -> int:
    match value:
        case VInt(n):
            return n
        case VFloat(f):
            return truncate_to_i64(f)
        case _:
            logger.debug("coerce.fail kind=integer value={}", value)
            raise ExpectingInteger(value)


def to_float(value: Value) -> float:
    match value:
        case VFloat(f):
            return f
        case VInt(n):
            return to_f32(n)
        case _:
            logger.debug("coerce.fail kind=double value={}", value)
            raise ExpectingDouble(value)


def to_string(value: Value) -> str:
    match value:
        case VString(s):
            return s
        case _:
            logger.debug("coerce.fail kind=string value={}", value)
            raise ExpectingString(value)
