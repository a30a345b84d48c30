import io

import pytest

from javawriter import (
    ClassName,
    Context,
    IndentingSink,
    Joiner,
    Snippet,
    StreamSink,
    StringSink,
)

CTX = Context.top_level()


def join(joiner: Joiner, items: list[Snippet]) -> str:
    sink = StringSink()
    joiner.append_to(sink, CTX, items)
    return sink.getvalue()


def test_joiner_separator_only() -> None:
    items = [Snippet.format("a"), Snippet.format("b"), Snippet.format("c")]
    assert join(Joiner.on(", "), items) == "a, b, c"


def test_joiner_prefix_and_wrap() -> None:
    items = [Snippet.format("x"), Snippet.format("y")]
    assert join(Joiner.on(", ").prefix(" implements "), items) == " implements x, y"
    assert join(Joiner.on(", ").wrap("(", ")"), items) == "(x, y)"
    assert join(Joiner.on("|").prefix("=").wrap("[", "]"), items) == "=[x|y]"


def test_joiner_empty_renders_nothing() -> None:
    assert join(Joiner.on(", "), []) == ""
    assert join(Joiner.on(", ").prefix(" implements "), []) == ""
    assert join(Joiner.on(", ").wrap("(", ")"), []) == ""


def test_joiner_accepts_iterators() -> None:
    items = (Snippet.format(s) for s in "abc")
    assert join(Joiner.on(""), items) == "abc"


def test_joiner_builders_return_new_values() -> None:
    base = Joiner.on(", ")
    base.prefix("p").wrap("(", ")")
    assert base == Joiner(", ")


def test_indenting_sink_indents_each_line() -> None:
    sink = StringSink()
    indented = IndentingSink(sink, "    ")
    indented.append("a\nb").append("c\n").append("d\n")
    assert sink.getvalue() == "    a\n    bc\n    d\n"


def test_indenting_sink_leaves_blank_lines_empty() -> None:
    sink = StringSink()
    IndentingSink(sink).append("a\n\n").append("\n").append("b")
    assert sink.getvalue() == "  a\n\n\n  b"


def test_indenting_sinks_nest() -> None:
    sink = StringSink()
    outer = IndentingSink(sink)
    outer.append("x {\n")
    IndentingSink(outer).append("y\n")
    outer.append("}\n")
    assert sink.getvalue() == "  x {\n    y\n  }\n"


def test_stream_sink_writes_through() -> None:
    buf = io.StringIO()
    StreamSink(buf).append("hello").append("\n")
    assert buf.getvalue() == "hello\n"


def test_stream_sink_propagates_errors() -> None:
    buf = io.StringIO()
    buf.close()
    with pytest.raises(ValueError):
        StreamSink(buf).append("x")


def test_snippet_renders_types_in_context() -> None:
    duration = ClassName.best_guess("java.time.Duration")
    snippet = Snippet.format("{}.ofSeconds({})", duration, 5)
    assert str(snippet) == "java.time.Duration.ofSeconds(5)"
    ctx = Context.top_level("p", [duration])
    sink = StringSink()
    snippet.write(sink, ctx)
    assert sink.getvalue() == "Duration.ofSeconds(5)"
    assert snippet.referenced_classes() == {duration}


def test_snippet_without_args_is_verbatim() -> None:
    assert str(Snippet.format("if (x) { y(); }")) == "if (x) { y(); }"


def test_snippet_literals() -> None:
    assert str(Snippet.literal(True)) == "true"
    assert str(Snippet.literal(None)) == "null"
    assert str(Snippet.literal(42)) == "42"
    assert str(Snippet.literal(2**40)) == "1099511627776L"
    assert str(Snippet.literal(1.5)) == "1.5"
    assert str(Snippet.literal('say "hi"\n')) == '"say \\"hi\\"\\n"'
    with pytest.raises(TypeError):
        Snippet.literal(object())


def test_non_finite_doubles_use_constants() -> None:
    assert str(Snippet.literal(float("inf"))) == "Double.POSITIVE_INFINITY"
    assert str(Snippet.literal(float("-inf"))) == "Double.NEGATIVE_INFINITY"
    assert str(Snippet.literal(float("nan"))) == "Double.NaN"


def test_long_range_enforced() -> None:
    assert str(Snippet.literal(2**63 - 1)) == "9223372036854775807L"
    assert str(Snippet.literal(-(2**63))) == "-9223372036854775808L"
    with pytest.raises(ValueError, match="does not fit in a Java long"):
        Snippet.literal(2**63)
    with pytest.raises(ValueError):
        Snippet.literal(-(2**63) - 1)
