"""Schema loading service for data files and importable module schemas."""

from __future__ import annotations

import importlib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_docgen.configuration.runtime_settings import SchemaSource
from schema_docgen.schema_access import DescRef, FieldSchema, as_schema, field
from schema_docgen.type_model import (
    Array,
    Enum,
    Lazy,
    MapOf,
    Primitive,
    Reference,
    TypeExpression,
    Union,
)

_FIELD_KEYS = frozenset(
    {
        "name",
        "type",
        "default",
        "aliases",
        "hidden",
        "deprecated",
        "desc",
        "desc_ref",
        "examples",
        "example",
        "extra",
        "tags",
    }
)


class SchemaLoadError(Exception):
    """Raised when a schema source cannot be loaded."""


def load_schema(source: SchemaSource) -> Any:
    """Return the schema handle described by ``source``."""
    if source.module:
        return import_schema(source.module)
    if source.path is None:
        raise SchemaLoadError("Schema source requires either a path or a module.")
    return load_schema_file(source.path)


def import_schema(reference: str) -> Any:
    """Import a ``package.module:attribute`` schema handle."""
    module_name, _, attribute = reference.partition(":")
    if not module_name or not attribute:
        raise SchemaLoadError(
            f"Schema module must look like 'package.module:attribute': {reference}"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SchemaLoadError(f"Cannot import schema module {module_name}: {exc}") from exc
    try:
        handle = getattr(module, attribute)
    except AttributeError as exc:
        raise SchemaLoadError(f"Module {module_name} has no attribute {attribute}.") from exc
    try:
        as_schema(handle)
    except TypeError as exc:
        raise SchemaLoadError(str(exc)) from exc
    return handle


def load_schema_file(path: Path | str) -> dict[str, Any]:
    """Load a YAML/JSON schema document as a mapping schema."""
    schema_path = Path(path)
    if not schema_path.exists():
        raise SchemaLoadError(f"Schema file not found: {schema_path}")
    try:
        parsed = yaml.safe_load(schema_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise SchemaLoadError(f"Failed to parse schema file: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise SchemaLoadError("Schema document root must be a mapping.")
    return parse_schema_document(parsed)


def parse_schema_document(document: Mapping[str, Any]) -> dict[str, Any]:
    """Convert a plain data document into a mapping schema with typed fields."""
    structs = document.get("fields") or {}
    if not isinstance(structs, Mapping):
        raise SchemaLoadError("Schema 'fields' must map struct names to field lists.")
    schema: dict[str, Any] = {
        "roots": _parse_field_list(document.get("roots") or [], "roots"),
        "fields": {str(name): _parse_struct(str(name), entry) for name, entry in structs.items()},
    }
    if document.get("namespace") is not None:
        schema["namespace"] = str(document["namespace"])
    if document.get("tags"):
        schema["tags"] = [str(tag) for tag in _require_list(document["tags"], "tags")]
    return schema


def parse_type(declaration: Any, where: str = "type") -> TypeExpression:
    """Parse ``integer``, ``{ref: name}``, ``{array: ...}``, ``{union: [...]}``,
    ``{lazy: ...}``, ``{map: {name: ..., values: ...}}`` or ``{enum: [...]}``."""
    if isinstance(declaration, str):
        return Primitive(declaration)
    if not isinstance(declaration, Mapping) or len(declaration) != 1:
        raise SchemaLoadError(f"{where} must be a type name or a single-key type mapping.")
    kind, value = next(iter(declaration.items()))
    if kind == "ref":
        return Reference(str(value))
    if kind == "array":
        return Array(parse_type(value, f"{where}.array"))
    if kind == "union":
        members = _require_list(value, f"{where}.union")
        return Union(tuple(parse_type(member, f"{where}.union") for member in members))
    if kind == "lazy":
        return Lazy(parse_type(value, f"{where}.lazy"))
    if kind == "map":
        if not isinstance(value, Mapping) or "name" not in value or "values" not in value:
            raise SchemaLoadError(f"{where}.map requires 'name' and 'values'.")
        return MapOf(str(value["name"]), parse_type(value["values"], f"{where}.map"))
    if kind == "enum":
        return Enum(tuple(str(symbol) for symbol in _require_list(value, f"{where}.enum")))
    raise SchemaLoadError(f"Unsupported type kind in {where}: {kind}")


def _parse_struct(name: str, entry: Any) -> Any:
    if isinstance(entry, Mapping) and "fields" in entry:
        struct: dict[str, Any] = {"fields": _parse_field_list(entry["fields"], name)}
        if entry.get("desc") is not None:
            struct["desc"] = entry["desc"]
        if entry.get("tags"):
            struct["tags"] = [str(tag) for tag in _require_list(entry["tags"], f"{name}.tags")]
        return struct
    return _parse_field_list(entry, name)


def _parse_field_list(entries: Any, where: str) -> list[tuple[str, FieldSchema]]:
    if isinstance(entries, Mapping):
        return [
            (str(name), _parse_field(declaration, f"{where}.{name}"))
            for name, declaration in entries.items()
        ]
    parsed: list[tuple[str, FieldSchema]] = []
    for index, entry in enumerate(_require_list(entries, where)):
        if not isinstance(entry, Mapping) or "name" not in entry:
            raise SchemaLoadError(f"{where}[{index}] must be a mapping with a name.")
        parsed.append((str(entry["name"]), _parse_field(entry, f"{where}.{entry['name']}")))
    return parsed


def _parse_field(declaration: Any, where: str) -> FieldSchema:
    if not isinstance(declaration, Mapping) or "type" not in declaration:
        return field(parse_type(declaration, where))
    unknown = sorted(set(declaration) - _FIELD_KEYS)
    if unknown:
        raise SchemaLoadError(f"{where} has unsupported keys: {', '.join(unknown)}")
    attributes = {
        key: value
        for key, value in declaration.items()
        if key not in {"name", "type", "desc_ref"} and value is not None
    }
    desc_ref = declaration.get("desc_ref")
    if desc_ref is not None:
        if not isinstance(desc_ref, Mapping) or "namespace" not in desc_ref or "id" not in desc_ref:
            raise SchemaLoadError(f"{where}.desc_ref requires 'namespace' and 'id'.")
        attributes["desc"] = DescRef(str(desc_ref["namespace"]), str(desc_ref["id"]))
    deprecated = attributes.get("deprecated")
    if isinstance(deprecated, Mapping):
        attributes["deprecated"] = deprecated.get("since")
    if "hidden" in attributes:
        attributes["hidden"] = bool(attributes["hidden"])
    return field(parse_type(declaration["type"], f"{where}.type"), **attributes)


def _require_list(value: Any, where: str) -> Sequence[Any]:
    if not isinstance(value, list):
        raise SchemaLoadError(f"{where} must be a list.")
    return value
