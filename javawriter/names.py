from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .context import Context
    from .sinks import Sink


@runtime_checkable
class TypeName(Protocol):
    """A reference to a type that can be written in a context."""

    def write(self, sink: Sink, context: Context) -> Sink: ...

    def referenced_classes(self) -> frozenset[ClassName]: ...


@dataclass(frozen=True)
class ClassName:
    """Structural name of a class: package, enclosing classes, simple name."""

    package_name: str
    enclosing_simple_names: tuple[str, ...]
    simple_name: str

    @classmethod
    def create(cls, package_name: str, simple_name: str, *nested: str) -> ClassName:
        if not nested:
            return cls(package_name, (), simple_name)
        return cls(package_name, (simple_name, *nested[:-1]), nested[-1])

    @classmethod
    def best_guess(cls, dotted: str) -> ClassName:
        """Split ``java.util.Map.Entry`` at the first capitalized segment."""
        parts = dotted.split(".")
        for i, part in enumerate(parts):
            if not part:
                break
            if part[0].isupper():
                classes = parts[i:]
                if not all(classes):
                    break
                return cls(".".join(parts[:i]), tuple(classes[:-1]), classes[-1])
        raise ValueError(f"Could not guess a class name from {dotted!r}")

    @classmethod
    def from_class(cls, py_type: type) -> ClassName:
        parts = py_type.__qualname__.split(".")
        if "<locals>" in parts:
            raise ValueError(f"{py_type.__qualname__} is a local class")
        module = py_type.__module__
        return cls("" if module == "__main__" else module, tuple(parts[:-1]), parts[-1])

    @property
    def canonical_name(self) -> str:
        return ".".join(
            p for p in (self.package_name, *self.enclosing_simple_names, self.simple_name) if p
        )

    def top_level_class_name(self) -> ClassName:
        if not self.enclosing_simple_names:
            return self
        return ClassName(self.package_name, (), self.enclosing_simple_names[0])

    def nested_class(self, simple_name: str) -> ClassName:
        return ClassName(
            self.package_name,
            (*self.enclosing_simple_names, self.simple_name),
            simple_name,
        )

    def write(self, sink: Sink, context: Context) -> Sink:
        return sink.append(context.source_reference(self))

    def referenced_classes(self) -> frozenset[ClassName]:
        return frozenset({self})

    def __str__(self) -> str:
        return self.canonical_name


@dataclass(frozen=True)
class PrimitiveName:
    keyword: str

    def write(self, sink: Sink, context: Context) -> Sink:
        return sink.append(self.keyword)

    def referenced_classes(self) -> frozenset[ClassName]:
        return frozenset()

    def __str__(self) -> str:
        return self.keyword


VOID = PrimitiveName("void")
BOOLEAN = PrimitiveName("boolean")
BYTE = PrimitiveName("byte")
SHORT = PrimitiveName("short")
INT = PrimitiveName("int")
LONG = PrimitiveName("long")
CHAR = PrimitiveName("char")
FLOAT = PrimitiveName("float")
DOUBLE = PrimitiveName("double")

PRIMITIVES: dict[str, PrimitiveName] = {
    p.keyword: p for p in (VOID, BOOLEAN, BYTE, SHORT, INT, LONG, CHAR, FLOAT, DOUBLE)
}

STRING = ClassName("java.lang", (), "String")

_PY_BUILTINS: dict[type, TypeName] = {
    int: INT,
    float: DOUBLE,
    bool: BOOLEAN,
    str: STRING,
    type(None): VOID,
}


def as_type_name(value: Any) -> TypeName:
    """Normalize any supported type description into a ``TypeName``.

    Accepted: a ``ClassName`` or ``PrimitiveName``, a Python class, a primitive keyword or dotted
    class name, or a writer exposing a ``name`` that is a ``ClassName``.
    """
    if value is None:
        return VOID
    if isinstance(value, type):
        if value in _PY_BUILTINS:
            return _PY_BUILTINS[value]
        return ClassName.from_class(value)
    if isinstance(value, str):
        if value in PRIMITIVES:
            return PRIMITIVES[value]
        return ClassName.best_guess(value)
    if isinstance(value, (ClassName, PrimitiveName)):
        return value
    # Type writers are referred to by their declared name.
    name = getattr(value, "name", None)
    if isinstance(name, ClassName):
        return name
    raise TypeError(f"Cannot describe a type with {type(value).__name__}")
