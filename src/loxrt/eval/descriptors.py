"""Descriptors shared by the composite value variants.

Builders outside the value model fill these in. A ``Value`` only wraps a
reference to one, so every holder sees the same mutable record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from loxrt.core.ast import FunctionHeader

if TYPE_CHECKING:
    from loxrt.eval.value import Value

# Descriptor pairs currently being compared.
_comparing: set[tuple[int, int]] = set()


def _structural_eq(a: Any, b: Any, parts: tuple[str, ...]) -> bool:
    """Compare ``parts`` of two descriptors, treating a revisited pair as equal.

    Self-referential arrays and objects would otherwise recurse forever.
    """
    if a is b:
        return True
    key = (id(a), id(b))
    if key in _comparing:
        return True
    _comparing.add(key)
    try:
        return all(getattr(a, part) == getattr(b, part) for part in parts)
    finally:
        _comparing.discard(key)


@dataclass(eq=True)
class LoxFunction:
    """A function definition together with the environment it closes over.

    ``body`` and ``closure`` belong to the evaluator and are kept opaque here.
    """

    name: str
    params: list[str] = field(default_factory=list)
    body: Any = None
    closure: Any = None
    is_initializer: bool = False

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return f"<fn {self.name}({', '.join(self.params)})>"


@dataclass(eq=True)
class LoxClass:
    """Class descriptor: name plus method, getter and setter tables."""

    name: str
    methods: dict[str, LoxFunction] = field(default_factory=dict)
    static_methods: dict[str, LoxFunction] = field(default_factory=dict)
    getters: dict[str, LoxFunction] = field(default_factory=dict)
    setters: dict[str, LoxFunction] = field(default_factory=dict)
    superclass: LoxClass | None = None
    traits: list[str] = field(default_factory=list)

    def find_method(self, name: str) -> LoxFunction | None:
        klass: LoxClass | None = self
        while klass is not None:
            if name in klass.methods:
                return klass.methods[name]
            klass = klass.superclass
        return None


@dataclass(eq=True)
class LoxObject:
    """Instance descriptor with mutable field storage."""

    klass: LoxClass
    fields: dict[str, Value] = field(default_factory=dict)

    @property
    def class_name(self) -> str:
        return self.klass.name

    def get(self, name: str) -> Value | None:
        return self.fields.get(name)

    def set(self, name: str, value: Value) -> None:
        self.fields[name] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LoxObject):
            return NotImplemented
        return _structural_eq(self, other, ("klass", "fields"))


@dataclass(eq=True)
class LoxTrait:
    """Interface descriptor. Holds signatures only, never state."""

    name: str
    methods: list[FunctionHeader] = field(default_factory=list)
    getters: list[FunctionHeader] = field(default_factory=list)
    setters: list[FunctionHeader] = field(default_factory=list)
    static_methods: list[FunctionHeader] = field(default_factory=list)


@dataclass(eq=True)
class LoxArray:
    """Fixed-capacity sequence of values.

    ``capacity`` is the bound declared at creation, not the element count.
    Keeping ``elements`` within it is the owner's job.
    """

    capacity: int
    elements: list[Value] = field(default_factory=list)

    @classmethod
    def with_capacity(cls, capacity: int) -> LoxArray:
        return cls(capacity, [])

    @property
    def is_full(self) -> bool:
        return len(self.elements) >= self.capacity

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> Value:
        return self.elements[index]

    def __setitem__(self, index: int, value: Value) -> None:
        self.elements[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LoxArray):
            return NotImplemented
        return _structural_eq(self, other, ("capacity", "elements"))
