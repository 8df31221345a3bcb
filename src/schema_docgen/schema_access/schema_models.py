"""Schema declaration entities."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from schema_docgen.type_model import TypeExpression, coerce_type


@dataclass(frozen=True)
class Deprecated:
    """Deprecation marker carrying the version the field was deprecated in."""

    since: str


@dataclass(frozen=True)
class DescRef:
    """Description stored in the description cache under ``namespace``/``id``."""

    namespace: str
    id: str


@dataclass(frozen=True)
class FieldSchema:  # pylint: disable=too-many-instance-attributes
    """Declared attributes of one field or root binding.

    ``None`` marks an absent attribute.
    """

    type: TypeExpression
    default: Any = None
    aliases: tuple[str, ...] = ()
    hidden: bool = False
    deprecated: Deprecated | None = None
    desc: Any = None
    examples: Sequence[Any] | None = None
    example: Any = None
    extra: Mapping[str, Any] | None = None
    tags: tuple[str, ...] = ()

    @property
    def is_deprecated(self) -> bool:
        return self.deprecated is not None


def field(type_expr: Any, **attributes: Any) -> FieldSchema:
    """Build a field schema, normalizing aliases, tags and deprecation markers."""
    if "aliases" in attributes:
        attributes["aliases"] = tuple(str(alias) for alias in attributes["aliases"])
    if "tags" in attributes:
        attributes["tags"] = tuple(str(tag) for tag in attributes["tags"])
    deprecated = attributes.get("deprecated")
    if deprecated is False or deprecated == "":
        attributes["deprecated"] = None
    elif deprecated is not None and not isinstance(deprecated, Deprecated):
        attributes["deprecated"] = Deprecated(since=str(deprecated))
    return FieldSchema(type=coerce_type(type_expr), **attributes)


def as_field_schema(declaration: Any) -> FieldSchema:
    """Accept a field schema or a bare type expression."""
    if isinstance(declaration, FieldSchema):
        return declaration
    return FieldSchema(type=coerce_type(declaration))


def names_and_aliases(fields: Iterable[tuple[str, FieldSchema]]) -> list[str]:
    """Return every field name followed by its aliases, hidden fields included."""
    names: list[str] = []
    for name, field_schema in fields:
        names.append(name)
        names.extend(field_schema.aliases)
    return names
