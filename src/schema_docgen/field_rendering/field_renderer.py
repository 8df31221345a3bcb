"""Field rendering service."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from enum import Enum as _StdEnum
from typing import Any

from schema_docgen.schema_access import Field, FieldSchema, names_and_aliases
from schema_docgen.type_model import format_type

from .default_printer import format_default
from .rendering_models import RenderOptions


class DuplicateFieldNamesError(Exception):
    """Raised when field names and aliases of one struct collide."""

    reason = "duplicated_field_names_and_aliases"

    def __init__(self, path: str, duplicated: Sequence[str]) -> None:
        super().__init__(
            f"Duplicated field names and aliases in {path}: {', '.join(duplicated)}"
        )
        self.path = path
        self.duplicated = list(duplicated)


def assert_unique_names(full_name: str, fields: Sequence[Field]) -> None:
    """Fail when a name or alias appears more than once, hidden fields included."""
    counts = Counter(names_and_aliases(fields))
    duplicated = sorted(name for name, count in counts.items() if count > 1)
    if duplicated:
        raise DuplicateFieldNamesError(full_name, duplicated)


def render_fields(
    namespace: str | None, fields: Sequence[Field], options: RenderOptions
) -> list[dict[str, Any]]:
    """Render visible fields in declaration order; hidden fields are omitted."""
    return [
        options.formatter(namespace, name, field_schema, options)
        for name, field_schema in fields
        if not field_schema.hidden
    ]


def render_field(
    namespace: str | None, name: str, field_schema: FieldSchema, options: RenderOptions
) -> dict[str, Any]:
    """Default field formatter."""
    common = {
        "name": name,
        "aliases": list(field_schema.aliases),
        "type": format_type(field_schema.type, namespace),
    }
    if field_schema.deprecated is not None:
        return {**common, "desc": f"Deprecated since {field_schema.deprecated.since}."}

    rendered = {
        **common,
        "default": format_default(field_schema.default),
        "raw_default": field_schema.default,
        "examples": field_examples(field_schema),
        "desc": render_desc(field_schema.desc, options),
        "extra": dict(field_schema.extra) if field_schema.extra is not None else None,
    }
    return {key: value for key, value in rendered.items() if value is not None}


def field_examples(field_schema: FieldSchema) -> list[Any] | None:
    if field_schema.examples is not None:
        return list(field_schema.examples)
    if field_schema.example is not None:
        return [field_schema.example]
    return None


def render_desc(raw: Any, options: RenderOptions) -> str | None:
    """Resolve a raw description into text in ``options.lang``."""
    if raw is None:
        return None
    structured, value = options.cache.resolve(raw)
    if structured:
        localized = value.get("desc")
        if not isinstance(localized, Mapping):
            return None
        return to_text(localized.get(options.lang))
    return to_text(value)


def to_text(value: Any) -> str | None:
    """Coerce strings, bytes, enum members and fragment lists to text."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if isinstance(value, _StdEnum):
        return to_text(value.value)
    if isinstance(value, (list, tuple)):
        return "".join(to_text(part) or "" for part in value)
    return str(value)
