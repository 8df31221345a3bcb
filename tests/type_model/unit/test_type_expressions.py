"""Type expression formatting tests."""

from __future__ import annotations

import pytest
from schema_docgen.type_model import (
    BOOLEAN,
    INTEGER,
    STRING,
    Lazy,
    Primitive,
    Reference,
    Union,
    array,
    contains_reference,
    enum,
    fmt_ref,
    format_type,
    lazy,
    map_of,
    ref,
    union,
)


class _RemoteSchema:
    namespace = "remote"


def test_fmt_ref_qualifies_only_namespaced_names() -> None:
    assert fmt_ref(None, "bar") == "bar"
    assert fmt_ref("emqx", "bar") == "emqx:bar"


def test_format_type_renders_every_variant() -> None:
    assert format_type(INTEGER, None) == "integer"
    assert format_type(array(STRING), None) == "array(string)"
    assert format_type(ref("bar"), "demo") == "ref(demo:bar)"
    assert format_type(union(ref("bar"), "kak"), None) == "ref(bar) | ref(kak)"
    assert format_type(map_of("name", BOOLEAN), None) == "map(name, boolean)"
    assert format_type(enum("info", "debug"), None) == "enum(info, debug)"


def test_lazy_wrapper_is_transparent_when_formatting() -> None:
    assert format_type(lazy(union("bar", "kak")), None) == "ref(bar) | ref(kak)"


def test_nested_unions_are_parenthesized() -> None:
    nested = Union((Union((INTEGER, STRING)), BOOLEAN))

    assert format_type(nested, None) == "(integer | string) | boolean"


def test_remote_reference_uses_its_own_schema_namespace() -> None:
    remote = ref("conn", _RemoteSchema())

    assert format_type(remote, "local") == "ref(remote:conn)"
    assert format_type(ref("conn", {"namespace": None, "fields": {}}), "local") == "ref(conn)"


def test_union_constructor_accepts_a_single_list() -> None:
    assert union([ref("bar"), "kak"]) == Union((Reference("bar"), Reference("kak")))


def test_contains_reference_looks_through_wrappers() -> None:
    assert contains_reference(ref("bar"))
    assert contains_reference(array(lazy(union(INTEGER, "bar"))))
    assert contains_reference(map_of("id", array("bar")))
    assert not contains_reference(array(INTEGER))
    assert not contains_reference(Lazy(Primitive("string")))
    assert not contains_reference(enum("a", "b"))


def test_coercion_rejects_non_type_values() -> None:
    with pytest.raises(TypeError):
        array(42)
