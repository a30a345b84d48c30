import pytest

from javawriter import (
    BOOLEAN,
    DOUBLE,
    INT,
    STRING,
    VOID,
    ClassName,
    Context,
    EnumWriter,
    Snippet,
    as_type_name,
    write_to_string,
)


class Widget:
    class Part:
        pass


def test_best_guess_splits_package_and_classes() -> None:
    entry = ClassName.best_guess("java.util.Map.Entry")
    assert entry.package_name == "java.util"
    assert entry.enclosing_simple_names == ("Map",)
    assert entry.simple_name == "Entry"
    assert entry.canonical_name == "java.util.Map.Entry"
    assert entry == ClassName.create("java.util", "Map", "Entry")


def test_best_guess_rejects_package_only() -> None:
    with pytest.raises(ValueError, match="Could not guess"):
        ClassName.best_guess("java.util")


def test_structural_identity() -> None:
    a = ClassName.create("p", "A")
    assert a == ClassName("p", (), "A")
    assert len({a, ClassName("p", (), "A")}) == 1
    assert a.nested_class("B").top_level_class_name() == a


def test_from_class_uses_module_and_qualname() -> None:
    name = ClassName.from_class(Widget.Part)
    assert name.package_name == __name__
    assert name.enclosing_simple_names == ("Widget",)
    assert name.simple_name == "Part"


def test_as_type_name_normalizes() -> None:
    assert as_type_name(int) is INT
    assert as_type_name(float) is DOUBLE
    assert as_type_name(bool) is BOOLEAN
    assert as_type_name(str) == STRING
    assert as_type_name(None) is VOID
    assert as_type_name("void") is VOID
    assert as_type_name("java.util.List") == ClassName("java.util", (), "List")
    name = ClassName.create("p", "X")
    assert as_type_name(name) is name
    writer = EnumWriter.for_class_name(name)
    assert as_type_name(writer) is name


def test_as_type_name_rejects_unknown() -> None:
    with pytest.raises(TypeError, match="Cannot describe a type"):
        as_type_name(3.5)


def test_subcontext_does_not_mutate_parent() -> None:
    parent = Context.top_level("p")
    child = parent.create_subcontext([ClassName.create("q", "Thing")])
    assert "Thing" not in parent.visible
    assert child.visible["Thing"] == ClassName.create("q", "Thing")
    assert (parent.depth, child.depth) == (0, 1)
    assert child.indent == parent.indent


def test_conflicting_imports_rejected() -> None:
    with pytest.raises(ValueError, match="Conflicting imports"):
        Context.top_level("p", [ClassName.create("a", "X"), ClassName.create("b", "X")])


def test_source_reference() -> None:
    ctx = Context.top_level("com.example", [ClassName.best_guess("java.util.Map")])
    assert ctx.source_reference(ClassName.best_guess("java.util.Map")) == "Map"
    assert ctx.source_reference(ClassName.best_guess("java.util.Map.Entry")) == "Map.Entry"
    assert ctx.source_reference(ClassName.best_guess("java.lang.String")) == "String"
    assert ctx.source_reference(ClassName.best_guess("com.example.Local")) == "Local"
    assert ctx.source_reference(ClassName.best_guess("java.util.List")) == "java.util.List"


def test_bound_name_shadows_implicit_package() -> None:
    ctx = Context.top_level("p", [ClassName.best_guess("com.acme.String")])
    assert write_to_string(STRING, ctx) == "java.lang.String"
    assert write_to_string(ClassName.best_guess("com.acme.String"), ctx) == "String"


def test_as_type_name_rejects_other_writables() -> None:
    writer = EnumWriter.for_class_name(ClassName.create("p", "E"))
    constant = writer.add_constant("A")
    field = writer.add_field(int, "code")
    for value in (Snippet.literal("x"), constant, field):
        with pytest.raises(TypeError, match="Cannot describe a type"):
            as_type_name(value)
