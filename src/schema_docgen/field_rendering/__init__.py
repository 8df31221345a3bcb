"""Field rendering exports."""

from .default_printer import format_default, pretty_print
from .description_cache import DescriptionCache, DescriptionError
from .field_renderer import (
    DuplicateFieldNamesError,
    assert_unique_names,
    field_examples,
    render_desc,
    render_field,
    render_fields,
    to_text,
)
from .rendering_models import FieldFormatter, RenderOptions

__all__ = [
    "DescriptionCache",
    "DescriptionError",
    "DuplicateFieldNamesError",
    "FieldFormatter",
    "RenderOptions",
    "assert_unique_names",
    "field_examples",
    "format_default",
    "pretty_print",
    "render_desc",
    "render_field",
    "render_fields",
    "to_text",
]
