"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaSource:
    """Where the documented schema comes from: a data file or a module attribute."""

    path: Path | None
    module: str | None


@dataclass(frozen=True)
class OutputSettings:
    """Report destination; ``path`` is ``None`` for standard output."""

    path: Path | None
    indent: int


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaSource
    desc_file: Path | None
    lang: str
    output: OutputSettings
