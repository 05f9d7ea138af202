"""Runtime values and the operations defined over them."""

from loxrt.eval.coerce import to_float, to_integer, to_string
from loxrt.eval.descriptors import LoxArray, LoxClass, LoxFunction, LoxObject, LoxTrait
from loxrt.eval.operators import is_truthy, logical_not, negate
from loxrt.eval.value import (
    FALSE,
    NIL,
    TRUE,
    UNINITIALIZED,
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
    bind_method,
    from_literal,
    is_class,
    is_number,
    is_same,
    is_trait,
    render,
)

__all__ = [
    "FALSE",
    "NIL",
    "TRUE",
    "UNINITIALIZED",
    "LoxArray",
    "LoxClass",
    "LoxFunction",
    "LoxObject",
    "LoxTrait",
    "VArray",
    "VBool",
    "VClass",
    "VFloat",
    "VFunction",
    "VInt",
    "VMethod",
    "VModule",
    "VNil",
    "VObject",
    "VString",
    "VTrait",
    "VUninitialized",
    "Value",
    "bind_method",
    "from_literal",
    "is_class",
    "is_number",
    "is_same",
    "is_trait",
    "is_truthy",
    "logical_not",
    "negate",
    "render",
    "to_float",
    "to_integer",
    "to_string",
]
