"""Report generation entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from schema_docgen.field_rendering import FieldFormatter, render_field

ROOT_STRUCT_NAME = "Root Config Keys"
DEFAULT_LANG = "en"

_RECOGNIZED_OPTIONS = frozenset({"formatter", "desc_file", "lang"})


@dataclass(frozen=True)
class GenerateOptions:
    """Options accepted by :func:`generate`.

    ``formatter_options`` carries any extra settings for a custom formatter.
    """

    formatter: FieldFormatter = render_field
    desc_file: Path | str | None = None
    lang: str = DEFAULT_LANG
    formatter_options: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> GenerateOptions:
        """Build options from a plain mapping; unrecognized keys go to the formatter."""
        return cls(
            formatter=options.get("formatter") or render_field,
            desc_file=options.get("desc_file"),
            lang=options.get("lang") or DEFAULT_LANG,
            formatter_options={
                key: value for key, value in options.items() if key not in _RECOGNIZED_OPTIONS
            },
        )
