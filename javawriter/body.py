from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Self, Union

from .context import Context
from .declarations import Declaration, Modifier
from .names import ClassName, TypeName, as_type_name
from .sinks import IndentingSink, Sink
from .snippets import Snippet
from .writables import Joiner, referenced_classes_of

logger = logging.getLogger(__name__)


@dataclass
class VariableWriter:
    """A method or constructor parameter."""

    type_name: TypeName
    name: str
    declaration: Declaration = field(default_factory=Declaration)

    def write(self, sink: Sink, context: Context) -> Sink:
        self.declaration.write_prefix(sink, context, " ")
        self.type_name.write(sink, context)
        return sink.append(" ").append(self.name)

    def referenced_classes(self) -> frozenset[ClassName]:
        return self.type_name.referenced_classes() | self.declaration.referenced_classes()


@dataclass
class BlockWriter:
    statements: list[Snippet] = field(default_factory=list)

    def add_snippet(self, template: str, *args: Any) -> BlockWriter:
        self.statements.append(Snippet.format(template, *args))
        return self

    def is_empty(self) -> bool:
        return not self.statements

    def write(self, sink: Sink, context: Context) -> Sink:
        sink.append("{\n")
        indented = IndentingSink(sink, context.indent)
        for statement in self.statements:
            statement.write(indented, context)
            indented.append("\n")
        return sink.append("}")

    def referenced_classes(self) -> frozenset[ClassName]:
        return referenced_classes_of(self.statements)


# ---------- Members ----------


@dataclass
class FieldWriter:
    type_name: TypeName
    name: str
    declaration: Declaration = field(default_factory=Declaration)
    initializer: Snippet | None = None

    def add_modifiers(self, *modifiers: Modifier) -> FieldWriter:
        self.declaration.add_modifiers(*modifiers)
        return self

    def annotate(self, annotation_type: Any) -> FieldWriter:
        self.declaration.annotate(annotation_type)
        return self

    def set_initializer(self, template: str, *args: Any) -> FieldWriter:
        self.initializer = Snippet.format(template, *args)
        return self

    def write(self, sink: Sink, context: Context) -> Sink:
        self.declaration.write_prefix(sink, context, "\n")
        self.type_name.write(sink, context)
        sink.append(" ").append(self.name)
        if self.initializer is not None:
            sink.append(" = ")
            self.initializer.write(sink, context)
        return sink.append(";\n")

    def referenced_classes(self) -> frozenset[ClassName]:
        refs = self.type_name.referenced_classes() | self.declaration.referenced_classes()
        if self.initializer is not None:
            refs |= self.initializer.referenced_classes()
        return refs


@dataclass
class _Invocable:
    name: str
    declaration: Declaration = field(default_factory=Declaration)
    parameters: list[VariableWriter] = field(default_factory=list)
    body: BlockWriter = field(default_factory=BlockWriter)

    def add_modifiers(self, *modifiers: Modifier) -> Self:
        self.declaration.add_modifiers(*modifiers)
        return self

    def annotate(self, annotation_type: Any) -> Self:
        self.declaration.annotate(annotation_type)
        return self

    def add_parameter(self, type_like: Any, name: str) -> VariableWriter:
        parameter = VariableWriter(as_type_name(type_like), name)
        self.parameters.append(parameter)
        return parameter

    def _write_signature_and_body(self, sink: Sink, context: Context) -> Sink:
        sink.append(self.name)
        sink.append("(")
        Joiner.on(", ").append_to(sink, context, self.parameters)
        sink.append(")")
        if self.declaration.modifiers & {Modifier.ABSTRACT, Modifier.NATIVE}:
            return sink.append(";\n")
        sink.append(" ")
        self.body.write(sink, context)
        return sink.append("\n")

    def referenced_classes(self) -> frozenset[ClassName]:
        return (
            self.declaration.referenced_classes()
            | referenced_classes_of(self.parameters)
            | self.body.referenced_classes()
        )


@dataclass
class MethodWriter(_Invocable):
    return_type: TypeName = field(kw_only=True)

    def write(self, sink: Sink, context: Context) -> Sink:
        self.declaration.write_prefix(sink, context, "\n")
        self.return_type.write(sink, context)
        sink.append(" ")
        return self._write_signature_and_body(sink, context)

    def referenced_classes(self) -> frozenset[ClassName]:
        return super().referenced_classes() | self.return_type.referenced_classes()


@dataclass
class ConstructorWriter(_Invocable):
    def write(self, sink: Sink, context: Context) -> Sink:
        self.declaration.write_prefix(sink, context, "\n")
        return self._write_signature_and_body(sink, context)


Member = Union[FieldWriter, ConstructorWriter, MethodWriter]


# ---------- Class body ----------


@dataclass
class ClassBodyWriter:
    """
    Members of a named or anonymous class body.

    Fields render first, then constructors, then methods; each group keeps
    insertion order. Types passed here are already normalized ``TypeName``s.
    """
    name: ClassName | None = None
    fields: list[FieldWriter] = field(default_factory=list)
    constructors: list[ConstructorWriter] = field(default_factory=list)
    methods: list[MethodWriter] = field(default_factory=list)

    @classmethod
    def for_anonymous_type(cls) -> ClassBodyWriter:
        return cls()

    @classmethod
    def for_named_type(cls, name: ClassName) -> ClassBodyWriter:
        return cls(name)

    @property
    def is_anonymous(self) -> bool:
        return self.name is None

    def members(self) -> list[Member]:
        return [*self.fields, *self.constructors, *self.methods]

    def is_empty(self) -> bool:
        return not (self.fields or self.constructors or self.methods)

    def add_field(self, type_name: TypeName, name: str) -> FieldWriter:
        writer = FieldWriter(type_name, name)
        self.fields.append(writer)
        return writer

    def add_method(self, return_type: TypeName, name: str) -> MethodWriter:
        writer = MethodWriter(name, return_type=return_type)
        self.methods.append(writer)
        return writer

    def add_constructor(self) -> ConstructorWriter:
        if self.name is None:
            raise RuntimeError("Anonymous types cannot declare constructors.")
        writer = ConstructorWriter(self.name.simple_name)
        self.constructors.append(writer)
        return writer

    def write(self, sink: Sink, context: Context) -> Sink:
        if self.is_empty():
            return sink
        if self.is_anonymous:
            context = context.create_subcontext()
        logger.debug("Writing %d members at depth %d", len(self.members()), context.depth)
        sink.append("\n")
        Joiner.on("\n").append_to(IndentingSink(sink, context.indent), context, self.members())
        return sink

    def referenced_classes(self) -> frozenset[ClassName]:
        return referenced_classes_of(self.members())
