"""Scoped lookup of localized descriptions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_docgen.schema_access import DescRef

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())


class DescriptionError(Exception):
    """Raised when a description file or entry cannot be resolved."""


class DescriptionCache:
    """Description table loaded from an optional YAML/JSON file.

    The file maps ``namespace -> id -> {"desc": {lang: text}, ...}``. Use the
    cache as a context manager so the table is dropped on every exit path.
    """

    def __init__(self, desc_file: Path | str | None = None) -> None:
        self._desc_file = Path(desc_file) if desc_file else None
        self._table: dict[str, Any] | None = None

    @property
    def closed(self) -> bool:
        return self._table is None

    def open(self) -> DescriptionCache:
        self._table = _load_table(self._desc_file) if self._desc_file else {}
        return self

    def close(self) -> None:
        if self._table is not None:
            _LOGGER.debug("Releasing description cache with %d namespaces", len(self._table))
        self._table = None

    def __enter__(self) -> DescriptionCache:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def resolve(self, raw: Any) -> tuple[bool, Any]:
        """Return ``(is_structured, value)`` for a raw description."""
        if self._table is None:
            raise DescriptionError("Description cache is closed.")
        if isinstance(raw, DescRef):
            return True, self._lookup(self._table, raw)
        if isinstance(raw, Mapping):
            return True, raw
        return False, raw

    def _lookup(self, table: Mapping[str, Any], desc_ref: DescRef) -> Mapping[str, Any]:
        entries = table.get(desc_ref.namespace)
        entry = entries.get(desc_ref.id) if isinstance(entries, Mapping) else None
        if not isinstance(entry, Mapping):
            source = self._desc_file or "<no description file>"
            raise DescriptionError(
                f"Description {desc_ref.namespace}.{desc_ref.id} not found in {source}"
            )
        return entry


def _load_table(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise DescriptionError(f"Description file not found: {path}")
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise DescriptionError(f"Failed to parse description file: {exc}") from exc
    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise DescriptionError("Description file root must be a mapping.")
    _LOGGER.debug("Loaded descriptions for %d namespaces from %s", len(parsed), path)
    return dict(parsed)
