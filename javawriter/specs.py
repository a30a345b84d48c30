from __future__ import annotations

from typing import Any, NotRequired, TypedDict

from .body import ConstructorWriter, FieldWriter, MethodWriter
from .declarations import Modifier
from .enum_writer import EnumWriter
from .names import ClassName
from .snippets import Snippet


class ParameterSpec(TypedDict):
    name: str
    type: str


class FieldSpec(TypedDict):
    name: str
    type: str
    modifiers: NotRequired[list[str]]
    initializer: NotRequired[str]


class MethodSpec(TypedDict):
    name: str
    returns: NotRequired[str]
    modifiers: NotRequired[list[str]]
    annotations: NotRequired[list[str]]
    parameters: NotRequired[list[ParameterSpec]]
    body: NotRequired[list[str]]


class ConstructorSpec(TypedDict, total=False):
    modifiers: list[str]
    parameters: list[ParameterSpec]
    body: list[str]


class ConstantSpec(TypedDict):
    name: str
    # JSON scalars become Java literals; {"expr": "..."} is copied verbatim.
    args: NotRequired[list[Any]]
    fields: NotRequired[list[FieldSpec]]
    methods: NotRequired[list[MethodSpec]]


class EnumSpec(TypedDict):
    name: str
    constants: list[ConstantSpec]
    modifiers: NotRequired[list[str]]
    annotations: NotRequired[list[str]]
    implements: NotRequired[list[str]]
    fields: NotRequired[list[FieldSpec]]
    constructor: NotRequired[ConstructorSpec]
    methods: NotRequired[list[MethodSpec]]


def _modifiers(names: list[str]) -> list[Modifier]:
    return [Modifier.parse(n) for n in names]


def mk_argument(value: Any) -> Snippet:
    if isinstance(value, dict):
        if set(value) != {"expr"}:
            raise ValueError(f"Argument objects must have exactly an 'expr' key, got {sorted(value)}")
        return Snippet.format(str(value["expr"]))
    try:
        return Snippet.literal(value)
    except TypeError as e:
        raise ValueError(str(e)) from None


def _fill_field(writer: FieldWriter, spec: FieldSpec) -> None:
    writer.add_modifiers(*_modifiers(spec.get("modifiers", [])))
    if "initializer" in spec:
        writer.set_initializer(spec["initializer"])


def _fill_invocable(writer: MethodWriter | ConstructorWriter, spec: MethodSpec | ConstructorSpec) -> None:
    writer.add_modifiers(*_modifiers(spec.get("modifiers", [])))
    for param in spec.get("parameters", []):
        writer.add_parameter(param["type"], param["name"])
    for stmt in spec.get("body", []):
        writer.body.add_snippet(stmt)


def _fill_method(writer: MethodWriter, spec: MethodSpec) -> None:
    for annotation in spec.get("annotations", []):
        writer.annotate(annotation)
    _fill_invocable(writer, spec)


def build_enum(spec: EnumSpec) -> EnumWriter:
    """Turn a JSON-able enum description into an ``EnumWriter``."""
    try:
        return _build_enum(spec)
    except KeyError as e:
        raise ValueError(f"Missing required key {e.args[0]!r} in enum description") from None


def _build_enum(spec: EnumSpec) -> EnumWriter:
    writer = EnumWriter.for_class_name(ClassName.best_guess(spec["name"]))
    writer.add_modifiers(*_modifiers(spec.get("modifiers", [])))
    for annotation in spec.get("annotations", []):
        writer.annotate(annotation)
    for iface in spec.get("implements", []):
        writer.add_implemented_type(iface)

    for c in spec.get("constants", []):
        constant = writer.add_constant(c["name"])
        for arg in c.get("args", []):
            constant.add_argument(mk_argument(arg))
        for f in c.get("fields", []):
            _fill_field(constant.add_field(f["type"], f["name"]), f)
        for m in c.get("methods", []):
            _fill_method(constant.add_method(m.get("returns", "void"), m["name"]), m)

    for f in spec.get("fields", []):
        _fill_field(writer.add_field(f["type"], f["name"]), f)
    if "constructor" in spec:
        _fill_invocable(writer.add_constructor(), spec["constructor"])
    for m in spec.get("methods", []):
        _fill_method(writer.add_method(m.get("returns", "void"), m["name"]), m)
    return writer
