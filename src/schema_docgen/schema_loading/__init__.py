"""Schema loading exports."""

from .schema_loader import (
    SchemaLoadError,
    import_schema,
    load_schema,
    load_schema_file,
    parse_schema_document,
    parse_type,
)

__all__ = [
    "SchemaLoadError",
    "import_schema",
    "load_schema",
    "load_schema_file",
    "parse_schema_document",
    "parse_type",
]
