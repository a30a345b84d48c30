from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .context import Context
from .names import ClassName
from .sinks import Sink
from .writables import HasClassReferences, Writable, write_to_string

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


def string_literal(value: str) -> str:
    escaped = "".join(_ESCAPES.get(ch, ch) for ch in value)
    return f'"{escaped}"'


def java_literal(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return string_literal(value)
    if isinstance(value, int):
        if not -(2**63) <= value < 2**63:
            raise ValueError(f"{value} does not fit in a Java long")
        return str(value) if -(2**31) <= value < 2**31 else f"{value}L"
    if isinstance(value, float):
        if math.isnan(value):
            return "Double.NaN"
        if math.isinf(value):
            return "Double.POSITIVE_INFINITY" if value > 0 else "Double.NEGATIVE_INFINITY"
        return repr(value)
    raise TypeError(f"No Java literal for {type(value).__name__}")


@dataclass(frozen=True)
class Snippet:
    """
    An opaque expression or statement fragment.

    ``template`` uses ``str.format`` placeholders. Arguments that are
    writable (type names, other snippets) are rendered in the current
    context so class references get minimal qualification.
    """
    template: str
    args: tuple[Any, ...] = ()

    @classmethod
    def format(cls, template: str, *args: Any) -> Snippet:
        return cls(template, args)

    @classmethod
    def literal(cls, value: Any) -> Snippet:
        return cls(java_literal(value))

    def write(self, sink: Sink, context: Context) -> Sink:
        rendered = [
            write_to_string(arg, context) if isinstance(arg, Writable) else str(arg)
            for arg in self.args
        ]
        return sink.append(self.template.format(*rendered) if self.args else self.template)

    def referenced_classes(self) -> frozenset[ClassName]:
        refs: set[ClassName] = set()
        for arg in self.args:
            if isinstance(arg, HasClassReferences):
                refs.update(arg.referenced_classes())
        return frozenset(refs)

    def __str__(self) -> str:
        return write_to_string(self)
