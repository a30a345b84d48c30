from __future__ import annotations

import logging
from typing import Any

from .body import ClassBodyWriter, ConstructorWriter, FieldWriter, MethodWriter
from .context import Context
from .declarations import AnnotationWriter, Modifier, TypeDeclaration
from .names import ClassName, as_type_name
from .sinks import IndentingSink, Sink
from .snippets import Snippet
from .writables import Joiner, referenced_classes_of

logger = logging.getLogger(__name__)


class ConstantWriter:
    """One enum constant: a name, constructor arguments and an optional body."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.constructor_snippets: list[Snippet] = []
        self.body = ClassBodyWriter.for_anonymous_type()

    def add_argument(self, snippet: Snippet) -> ConstantWriter:
        self.constructor_snippets.append(snippet)
        return self

    def add_method(self, return_type: Any, name: str) -> MethodWriter:
        return self.body.add_method(as_type_name(return_type), name)

    def add_field(self, type_like: Any, name: str) -> FieldWriter:
        return self.body.add_field(as_type_name(type_like), name)

    def write(self, sink: Sink, context: Context) -> Sink:
        sink.append(self.name)
        Joiner.on(", ").wrap("(", ")").append_to(sink, context, self.constructor_snippets)
        if not self.body.is_empty():
            sink.append(" {")
            self.body.write(sink, context)
            sink.append("}")
        return sink

    def referenced_classes(self) -> frozenset[ClassName]:
        return referenced_classes_of(self.constructor_snippets, [self.body])

    def __repr__(self) -> str:
        return f"ConstantWriter({self.name!r}, args={len(self.constructor_snippets)})"


class EnumWriter:
    """
    Writes a top-level ``enum`` declaration.

    Constants render in registration order, one per line, one level deeper
    than the declaration, followed by ``;`` and the enum-level members.
    """

    def __init__(self, name: ClassName) -> None:
        self.declaration = TypeDeclaration(name=name)
        self.constant_writers: dict[str, ConstantWriter] = {}
        self.body = ClassBodyWriter.for_named_type(name)

    @classmethod
    def for_class_name(cls, name: ClassName) -> EnumWriter:
        if name.enclosing_simple_names:
            raise ValueError(f"{name} must be top-level type.")
        return cls(name)

    for_name = for_class_name

    @property
    def name(self) -> ClassName:
        return self.declaration.name

    # ---------- Construction ----------

    def add_constant(self, name: str) -> ConstantWriter:
        constant = ConstantWriter(name)
        if name in self.constant_writers:
            logger.debug("Replacing constant %s.%s", self.name.simple_name, name)
        # Re-adding a name keeps its original position.
        self.constant_writers[name] = constant
        return constant

    def add_constructor(self) -> ConstructorWriter:
        return self.body.add_constructor()

    def add_field(self, type_like: Any, name: str) -> FieldWriter:
        return self.body.add_field(as_type_name(type_like), name)

    def add_method(self, return_type: Any, name: str) -> MethodWriter:
        return self.body.add_method(as_type_name(return_type), name)

    def add_modifiers(self, *modifiers: Modifier) -> EnumWriter:
        self.declaration.add_modifiers(*modifiers)
        return self

    def add_implemented_type(self, type_like: Any) -> EnumWriter:
        self.declaration.add_implemented_type(type_like)
        return self

    def annotate(self, annotation_type: Any) -> AnnotationWriter:
        return self.declaration.annotate(annotation_type)

    # ---------- Rendering ----------

    def write(self, sink: Sink, context: Context) -> Sink:
        if not self.constant_writers:
            raise RuntimeError("Cannot write an enum with no constants.")

        logger.debug(
            "Writing enum %s with %d constants", self.name.canonical_name, len(self.constant_writers)
        )
        context = context.create_subcontext([self.name])
        self.declaration.write_prefix(sink, context, "\n")
        sink.append("enum ").append(self.name.simple_name)
        Joiner.on(", ").prefix(" implements ").append_to(
            sink, context, self.declaration.implemented_types
        )
        sink.append(" {\n")

        Joiner.on(",\n").append_to(
            IndentingSink(sink, context.indent), context, self.constant_writers.values()
        )
        sink.append(";\n")

        self.body.write(sink, context)
        sink.append("}\n")
        return sink

    def referenced_classes(self) -> frozenset[ClassName]:
        return referenced_classes_of(
            [self.declaration, self.body], self.constant_writers.values()
        )
