from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Protocol, runtime_checkable

from .context import Context
from .names import ClassName
from .sinks import Sink, StringSink


@runtime_checkable
class Writable(Protocol):
    """A node that renders itself into a sink under a context."""

    def write(self, sink: Sink, context: Context) -> Sink: ...


@runtime_checkable
class HasClassReferences(Protocol):
    """A node that reports the external classes it mentions."""

    def referenced_classes(self) -> frozenset[ClassName]: ...


def referenced_classes_of(*groups: Iterable[HasClassReferences]) -> frozenset[ClassName]:
    """Deduplicated union of the references of every node in ``groups``."""
    refs: set[ClassName] = set()
    for group in groups:
        for node in group:
            refs.update(node.referenced_classes())
    return frozenset(refs)


def write_to_string(writable: Writable, context: Context | None = None) -> str:
    sink = StringSink()
    writable.write(sink, context if context is not None else Context.top_level())
    return sink.getvalue()


@dataclass(frozen=True)
class Joiner:
    """
    Writes a sequence of writables with a separator.

    ``prefix`` and the ``wrap`` delimiters are written only when the
    sequence is non-empty; an empty sequence writes nothing.

        Joiner.on(", ").wrap("(", ")").append_to(sink, context, args)
    """
    separator: str
    prefix_text: str = ""
    open_text: str = ""
    close_text: str = ""

    @classmethod
    def on(cls, separator: str) -> Joiner:
        return cls(separator)

    def prefix(self, text: str) -> Joiner:
        return replace(self, prefix_text=text)

    def wrap(self, open_text: str, close_text: str) -> Joiner:
        return replace(self, open_text=open_text, close_text=close_text)

    def append_to(self, sink: Sink, context: Context, items: Iterable[Writable]) -> Sink:
        iterator = iter(items)
        first = next(iterator, None)
        if first is None:
            return sink
        sink.append(self.prefix_text).append(self.open_text)
        first.write(sink, context)
        for item in iterator:
            sink.append(self.separator)
            item.write(sink, context)
        sink.append(self.close_text)
        return sink
