"""Field rendering entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from schema_docgen.schema_access import FieldSchema

from .description_cache import DescriptionCache

FieldFormatter = Callable[[str | None, str, FieldSchema, "RenderOptions"], dict[str, Any]]


@dataclass(frozen=True)
class RenderOptions:
    """Options shared by every field rendered during one report generation."""

    cache: DescriptionCache
    formatter: FieldFormatter
    lang: str = "en"
    formatter_options: Mapping[str, Any] = field(default_factory=dict)
