"""Schema access exports."""

from .schema_accessor import (
    Field,
    MapSchema,
    MapSchemaAccessor,
    ModuleSchema,
    ModuleSchemaAccessor,
    SchemaAccessor,
    UnresolvedReferenceError,
    as_schema,
)
from .schema_models import (
    Deprecated,
    DescRef,
    FieldSchema,
    as_field_schema,
    field,
    names_and_aliases,
)

__all__ = [
    "Deprecated",
    "DescRef",
    "Field",
    "FieldSchema",
    "MapSchema",
    "MapSchemaAccessor",
    "ModuleSchema",
    "ModuleSchemaAccessor",
    "SchemaAccessor",
    "UnresolvedReferenceError",
    "as_field_schema",
    "as_schema",
    "field",
    "names_and_aliases",
]
