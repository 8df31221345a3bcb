"""Type expression entities and structural formatting."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Primitive:
    """Terminal scalar type such as ``integer`` or ``string``."""

    name: str


@dataclass(frozen=True)
class Array:
    """Homogeneous sequence of ``element`` values."""

    element: TypeExpression


@dataclass(frozen=True)
class Reference:
    """Name-based link to a struct.

    ``schema`` is ``None`` for a struct of the referencing schema, otherwise the
    handle of the schema that owns the struct.
    """

    name: str
    schema: Any = None


@dataclass(frozen=True)
class Union:
    """Ordered alternatives."""

    members: tuple[TypeExpression, ...]


@dataclass(frozen=True)
class Lazy:
    """Wrapper whose inner type is resolved on demand."""

    inner: TypeExpression


@dataclass(frozen=True)
class MapOf:
    """Mapping with arbitrary keys named ``key_name``."""

    key_name: str
    values: TypeExpression


@dataclass(frozen=True)
class Enum:
    """Terminal enumeration of symbols."""

    symbols: tuple[str, ...]


TypeExpression = Primitive | Array | Reference | Union | Lazy | MapOf | Enum

INTEGER = Primitive("integer")
STRING = Primitive("string")
BOOLEAN = Primitive("boolean")
FLOAT = Primitive("float")
DURATION = Primitive("duration")


def coerce_type(value: Any) -> TypeExpression:
    """Return ``value`` as a type expression; bare strings name a struct."""
    if isinstance(value, (Primitive, Array, Reference, Union, Lazy, MapOf, Enum)):
        return value
    if isinstance(value, str):
        return Reference(value)
    raise TypeError(f"Not a type expression: {value!r}")


def ref(name: str, schema: Any = None) -> Reference:
    return Reference(name, schema)


def array(element: Any) -> Array:
    return Array(coerce_type(element))


def union(*members: Any) -> Union:
    if len(members) == 1 and isinstance(members[0], (list, tuple)):
        members = tuple(members[0])
    return Union(tuple(coerce_type(member) for member in members))


def lazy(inner: Any) -> Lazy:
    return Lazy(coerce_type(inner))


def map_of(key_name: str, values: Any) -> MapOf:
    return MapOf(key_name, coerce_type(values))


def enum(*symbols: str) -> Enum:
    return Enum(tuple(str(symbol) for symbol in symbols))


def fmt_ref(namespace: str | None, name: str) -> str:
    """Qualify a struct name with its namespace."""
    if namespace is None:
        return str(name)
    return f"{namespace}:{name}"


def format_type(expr: TypeExpression, namespace: str | None) -> str:
    """Return the display string of ``expr``.

    References without an owning schema are qualified with ``namespace``, the
    namespace of the struct holding the field. Remote references use the
    namespace of their own schema.
    """
    match expr:
        case Primitive(name=name):
            return name
        case Array(element=element):
            return f"array({format_type(element, namespace)})"
        case Reference(name=name, schema=None):
            return f"ref({fmt_ref(namespace, name)})"
        case Reference(name=name, schema=schema):
            return f"ref({fmt_ref(_namespace_of(schema), name)})"
        case Union(members=members):
            return " | ".join(_format_member(member, namespace) for member in members)
        case Lazy(inner=inner):
            return format_type(inner, namespace)
        case MapOf(key_name=key_name, values=values):
            return f"map({key_name}, {format_type(values, namespace)})"
        case Enum(symbols=symbols):
            return f"enum({', '.join(symbols)})"
    raise TypeError(f"Not a type expression: {expr!r}")


def contains_reference(expr: TypeExpression) -> bool:
    """Return whether a struct reference is reachable inside ``expr``."""
    match expr:
        case Reference():
            return True
        case Array(element=inner) | Lazy(inner=inner) | MapOf(values=inner):
            return contains_reference(inner)
        case Union(members=members):
            return any(contains_reference(member) for member in members)
    return False


def _format_member(member: TypeExpression, namespace: str | None) -> str:
    text = format_type(member, namespace)
    if isinstance(member, Union) and len(member.members) > 1:
        return f"({text})"
    return text


def _namespace_of(schema: Any) -> str | None:
    if isinstance(schema, Mapping):
        return schema.get("namespace")
    return getattr(schema, "namespace", None)
