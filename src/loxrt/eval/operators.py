"""Truthiness and unary operators over values."""

from __future__ import annotations

from typing import assert_never

from loguru import logger

from loxrt.core.errors import ExpectingNumber
from loxrt.eval.value import (
    VArray,
    VBool,
    VClass,
    VFloat,
    VFunction,
    VInt,
    VMethod,
    VModule,
    VNil,
    VObject,
    VString,
    VTrait,
    VUninitialized,
    Value,
)


def _wrap_i64(n: int) -> int:
    return (n + 2**63) % 2**64 - 2**63


def is_truthy(value: Value) -> bool:
    """Nil, Uninitialized, false and numeric zero are falsy. All else is truthy."""
    match value:
        case VNil() | VUninitialized():
            return False
        case VBool(b):
            return b
        case VInt(n):
            return n != 0
        case VFloat(f):
            return f != 0.0
        case VString() | VFunction() | VMethod() | VClass() | VObject() | VTrait() | VArray() | VModule():
            return True
        case _:
            assert_never(value)


def negate(value: Value) -> Value:
    """Unary minus.

    Integer negation wraps, so the minimum integer negates to itself.
    Non-numbers raise ``ExpectingNumber`` instead of aborting the host.
    """
    match value:
        case VInt(n):
            return VInt(_wrap_i64(-n))
        case VFloat(f):
            return VFloat(-f)
        case _:
            logger.debug("negate.fail value={}", value)
            raise ExpectingNumber(value)


def logical_not(value: Value) -> VBool:
    match value:
        case VBool(b):
            return VBool(not b)
        case _:
            return VBool(not is_truthy(value))
