"""Type model exports."""

from .type_expressions import (
    BOOLEAN,
    DURATION,
    FLOAT,
    INTEGER,
    STRING,
    Array,
    Enum,
    Lazy,
    MapOf,
    Primitive,
    Reference,
    TypeExpression,
    Union,
    array,
    coerce_type,
    contains_reference,
    enum,
    fmt_ref,
    format_type,
    lazy,
    map_of,
    ref,
    union,
)

__all__ = [
    "Array",
    "Enum",
    "Lazy",
    "MapOf",
    "Primitive",
    "Reference",
    "TypeExpression",
    "Union",
    "BOOLEAN",
    "DURATION",
    "FLOAT",
    "INTEGER",
    "STRING",
    "array",
    "coerce_type",
    "contains_reference",
    "enum",
    "fmt_ref",
    "format_type",
    "lazy",
    "map_of",
    "ref",
    "union",
]
