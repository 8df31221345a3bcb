"""Read-only accessor surface over module-declared and mapping schemas."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from schema_docgen.type_model import TypeExpression, fmt_ref, format_type

from .schema_models import FieldSchema, as_field_schema

Field = tuple[str, FieldSchema]
MapSchema = Mapping[str, Any]


class UnresolvedReferenceError(Exception):
    """Raised when a reference names a struct the schema does not define."""

    def __init__(self, namespace: str | None, name: str) -> None:
        super().__init__(f"Struct not found in schema: {fmt_ref(namespace, name)}")
        self.namespace = namespace
        self.name = name


class ModuleSchema(ABC):
    """Base class for schemas declared as code.

    Subclasses override :meth:`roots` and :meth:`fields`. A field entry is a
    ``(name, declaration)`` pair where the declaration is a
    :class:`FieldSchema` or a bare type expression. :meth:`fields` raises
    ``KeyError`` (or returns ``None``) for unknown struct names.
    """

    namespace: str | None = None

    @abstractmethod
    def roots(self) -> Sequence[tuple[str, Any]]:
        """Ordered root bindings."""

    @abstractmethod
    def fields(self, name: str) -> Sequence[tuple[str, Any]] | None:
        """Fields of struct ``name``."""

    def tags(self) -> Sequence[str]:
        return ()

    def desc(self, name: str) -> Any:  # pylint: disable=unused-argument
        return None


class SchemaAccessor(ABC):
    """Capabilities the discovery and rendering pipeline needs from a schema."""

    @property
    @abstractmethod
    def namespace(self) -> str | None:
        """Namespace qualifying the names of this schema's structs."""

    @abstractmethod
    def roots(self) -> list[Field]:
        """Ordered root bindings."""

    @abstractmethod
    def fields(self, name: str) -> list[Field]:
        """Ordered fields of struct ``name``."""

    @abstractmethod
    def struct_desc(self, name: str) -> Any:
        """Raw description of struct ``name`` or ``None``."""

    @abstractmethod
    def struct_tags(self, name: str) -> list[str]:
        """Tags declared by the schema and by struct ``name`` itself."""

    def fmt_type(self, type_expr: TypeExpression) -> str:
        return format_type(type_expr, self.namespace)


class ModuleSchemaAccessor(SchemaAccessor):
    """Accessor for a :class:`ModuleSchema` instance."""

    def __init__(self, schema: ModuleSchema) -> None:
        self._schema = schema

    @property
    def namespace(self) -> str | None:
        return self._schema.namespace

    def roots(self) -> list[Field]:
        return _normalize_fields(self._schema.roots())

    def fields(self, name: str) -> list[Field]:
        try:
            declarations = self._schema.fields(name)
        except LookupError as exc:
            raise UnresolvedReferenceError(self.namespace, name) from exc
        if declarations is None:
            raise UnresolvedReferenceError(self.namespace, name)
        return _normalize_fields(declarations)

    def struct_desc(self, name: str) -> Any:
        return self._schema.desc(name)

    def struct_tags(self, name: str) -> list[str]:
        return [str(tag) for tag in self._schema.tags()]


class MapSchemaAccessor(SchemaAccessor):
    """Accessor for a mapping with ``roots`` and ``fields`` entries.

    A struct entry is either a field list or a mapping with ``fields`` and
    optional ``desc`` and ``tags`` keys.
    """

    def __init__(self, schema: MapSchema) -> None:
        self._schema = schema

    @property
    def namespace(self) -> str | None:
        return self._schema.get("namespace")

    def roots(self) -> list[Field]:
        return _normalize_fields(self._schema.get("roots") or ())

    def fields(self, name: str) -> list[Field]:
        entry = self._struct_entry(name)
        if isinstance(entry, Mapping):
            return _normalize_fields(entry.get("fields") or ())
        return _normalize_fields(entry)

    def struct_desc(self, name: str) -> Any:
        entry = self._struct_entry(name)
        if isinstance(entry, Mapping):
            return entry.get("desc")
        return None

    def struct_tags(self, name: str) -> list[str]:
        tags = [str(tag) for tag in self._schema.get("tags") or ()]
        entry = self._struct_entry(name)
        if isinstance(entry, Mapping):
            tags.extend(str(tag) for tag in entry.get("tags") or ())
        return tags

    def _struct_entry(self, name: str) -> Any:
        structs = self._schema.get("fields") or {}
        if name not in structs:
            raise UnresolvedReferenceError(self.namespace, name)
        return structs[name]


def as_schema(handle: Any) -> SchemaAccessor:
    """Return the accessor for a schema handle.

    Accepts an accessor, a :class:`ModuleSchema` subclass or instance, or a
    mapping with a ``fields`` entry.
    """
    if isinstance(handle, SchemaAccessor):
        return handle
    if isinstance(handle, type) and issubclass(handle, ModuleSchema):
        return ModuleSchemaAccessor(handle())
    if isinstance(handle, ModuleSchema):
        return ModuleSchemaAccessor(handle)
    if isinstance(handle, Mapping) and "fields" in handle:
        return MapSchemaAccessor(handle)
    raise TypeError(f"Unsupported schema handle: {handle!r}")


def _normalize_fields(declarations: Sequence[tuple[Any, Any]]) -> list[Field]:
    return [(str(name), as_field_schema(declaration)) for name, declaration in declarations]
