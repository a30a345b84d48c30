from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterable

from .context import Context
from .names import ClassName, TypeName, as_type_name
from .sinks import Sink
from .snippets import Snippet
from .writables import Joiner, referenced_classes_of

# -----------------------------
# Modifiers
# -----------------------------


class Modifier(enum.Enum):
    # Declaration order is the canonical Java order.
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    ABSTRACT = "abstract"
    DEFAULT = "default"
    STATIC = "static"
    FINAL = "final"
    TRANSIENT = "transient"
    VOLATILE = "volatile"
    SYNCHRONIZED = "synchronized"
    NATIVE = "native"
    STRICTFP = "strictfp"

    @classmethod
    def parse(cls, keyword: str) -> Modifier:
        try:
            return cls(keyword)
        except ValueError:
            raise ValueError(f"Unknown modifier {keyword!r}") from None


_MODIFIER_ORDER = {m: i for i, m in enumerate(Modifier)}


def write_modifiers(sink: Sink, modifiers: Iterable[Modifier]) -> Sink:
    for modifier in sorted(set(modifiers), key=_MODIFIER_ORDER.__getitem__):
        sink.append(modifier.value).append(" ")
    return sink


# -----------------------------
# Annotations
# -----------------------------


@dataclass
class AnnotationWriter:
    annotation_type: ClassName
    members: dict[str, Snippet] = field(default_factory=dict)

    def set_value(self, name: str, value: Snippet) -> AnnotationWriter:
        self.members[name] = value
        return self

    def write(self, sink: Sink, context: Context) -> Sink:
        sink.append("@")
        self.annotation_type.write(sink, context)
        if list(self.members) == ["value"]:
            sink.append("(")
            self.members["value"].write(sink, context)
            sink.append(")")
        elif self.members:
            Joiner.on(", ").wrap("(", ")").append_to(
                sink, context, [_AnnotationMember(k, v) for k, v in self.members.items()]
            )
        return sink

    def referenced_classes(self) -> frozenset[ClassName]:
        return self.annotation_type.referenced_classes() | referenced_classes_of(
            self.members.values()
        )


@dataclass(frozen=True)
class _AnnotationMember:
    name: str
    value: Snippet

    def write(self, sink: Sink, context: Context) -> Sink:
        sink.append(f"{self.name} = ")
        return self.value.write(sink, context)


def write_annotations(
    sink: Sink, context: Context, annotations: Iterable[AnnotationWriter], separator: str
) -> Sink:
    for annotation in annotations:
        annotation.write(sink, context)
        sink.append(separator)
    return sink


# -----------------------------
# Shared declaration state
# -----------------------------


@dataclass
class Declaration:
    """Modifiers and annotations carried by any declared element."""

    modifiers: set[Modifier] = field(default_factory=set)
    annotations: list[AnnotationWriter] = field(default_factory=list)

    def add_modifiers(self, *modifiers: Modifier) -> None:
        self.modifiers.update(modifiers)

    def annotate(self, annotation_type: Any) -> AnnotationWriter:
        type_name = as_type_name(annotation_type)
        if not isinstance(type_name, ClassName):
            raise TypeError(f"{type_name} cannot be used as an annotation")
        annotation = AnnotationWriter(type_name)
        self.annotations.append(annotation)
        return annotation

    def write_prefix(self, sink: Sink, context: Context, annotation_separator: str) -> Sink:
        write_annotations(sink, context, self.annotations, annotation_separator)
        return write_modifiers(sink, self.modifiers)

    def referenced_classes(self) -> frozenset[ClassName]:
        return referenced_classes_of(self.annotations)


@dataclass
class TypeDeclaration(Declaration):
    """Header state of a type writer: its name and implemented types."""

    name: ClassName = field(kw_only=True)
    implemented_types: list[TypeName] = field(default_factory=list)

    def add_implemented_type(self, type_like: Any) -> None:
        self.implemented_types.append(as_type_name(type_like))

    def referenced_classes(self) -> frozenset[ClassName]:
        return super().referenced_classes() | referenced_classes_of(self.implemented_types)
