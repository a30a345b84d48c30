from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Append-only text destination. Single characters are 1-char strings."""

    def append(self, text: str) -> Sink: ...


@dataclass
class StringSink:
    parts: list[str] = field(default_factory=list)

    def append(self, text: str) -> StringSink:
        self.parts.append(text)
        return self

    def getvalue(self) -> str:
        return "".join(self.parts)

    def __str__(self) -> str:
        return self.getvalue()


class StreamSink:
    """Adapts a text stream (file, ``sys.stdout``); write errors propagate."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def append(self, text: str) -> StreamSink:
        self.stream.write(text)
        return self


class IndentingSink:
    """
    Sink decorator that indents every line written through it.

    Indentation is emitted lazily before the first character of a line, so
    blank lines stay empty and a trailing newline leaves no dangling spaces.
    Wrapping an ``IndentingSink`` in another one nests a further level.
    """

    def __init__(self, delegate: Sink, indent: str = "  ") -> None:
        self.delegate = delegate
        self.indent = indent
        self._at_line_start = True

    def append(self, text: str) -> IndentingSink:
        for i, chunk in enumerate(text.split("\n")):
            if i:
                self.delegate.append("\n")
                self._at_line_start = True
            if chunk:
                if self._at_line_start:
                    self.delegate.append(self.indent)
                    self._at_line_start = False
                self.delegate.append(chunk)
        return self
