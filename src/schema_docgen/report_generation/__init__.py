"""Report generation exports."""

from .generation_options import DEFAULT_LANG, ROOT_STRUCT_NAME, GenerateOptions
from .report_generator import EmptyVisibleStructError, generate, render_struct

__all__ = [
    "DEFAULT_LANG",
    "ROOT_STRUCT_NAME",
    "EmptyVisibleStructError",
    "GenerateOptions",
    "generate",
    "render_struct",
]
