"""Test configuration and shared fixtures."""

import pytest
from loguru import logger

from loxrt.config.settings import get_settings
from loxrt.core.ast import FunctionHeader
from loxrt.eval.descriptors import LoxArray, LoxClass, LoxFunction, LoxObject, LoxTrait
from loxrt.eval.value import (
    NIL,
    UNINITIALIZED,
    VArray,
    VBool,
    VClass,
    VFloat,
    VFunction,
    VInt,
    VMethod,
    VModule,
    VObject,
    VString,
    VTrait,
    Value,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_records():
    """Collect loguru messages emitted during the test."""
    records: list[str] = []
    logger.enable("loxrt")
    handler_id = logger.add(lambda message: records.append(message.record["message"]), level="DEBUG")
    yield records
    logger.remove(handler_id)
    logger.disable("loxrt")


@pytest.fixture
def greet() -> LoxFunction:
    return LoxFunction("greet", ["name"])


@pytest.fixture
def person_class(greet: LoxFunction) -> LoxClass:
    return LoxClass("Person", methods={"greet": greet})


@pytest.fixture
def person(person_class: LoxClass) -> LoxObject:
    return LoxObject(person_class, {"name": VString("Ada")})


@pytest.fixture
def sample_values(greet: LoxFunction, person_class: LoxClass, person: LoxObject) -> dict[type, Value]:
    """One value of every variant, keyed by variant class."""
    trait = LoxTrait("Greeter", methods=[FunctionHeader("greet", ("name",))])
    samples: list[Value] = [
        NIL,
        UNINITIALIZED,
        VBool(True),
        VInt(7),
        VFloat(1.5),
        VString("text"),
        VFunction(greet),
        VMethod(greet, person),
        VClass(person_class),
        VObject(person),
        VTrait(trait),
        VArray(LoxArray(4, [VInt(1)])),
        VModule("math"),
    ]
    return {type(value): value for value in samples}
