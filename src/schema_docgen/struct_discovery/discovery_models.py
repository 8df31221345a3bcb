"""Struct discovery entities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from schema_docgen.schema_access import Field, SchemaAccessor

ARRAY_INDEX_SEGMENT = "$INDEX"


@dataclass
class DiscoveredStruct:  # pylint: disable=too-many-instance-attributes
    """Reachable struct with the paths and tags accumulated during discovery."""

    namespace: str | None
    name: str
    schema: SchemaAccessor
    fields: tuple[Field, ...]
    desc: Any = None
    paths: set[str] = field(default_factory=set)
    tags: list[str] = field(default_factory=list)

    def merge(self, path: str, tags: Iterable[str]) -> None:
        """Record one more path reaching this struct and the tags it carries."""
        self.paths.add(path)
        for tag in tags:
            if tag not in self.tags:
                self.tags.append(tag)


@dataclass(frozen=True)
class DiscoveryResult:
    """Root bindings and the ordered reachable structs."""

    root_namespace: str | None
    root_fields: tuple[Field, ...]
    structs: tuple[DiscoveredStruct, ...]
