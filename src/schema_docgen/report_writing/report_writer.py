"""Report serialization service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any


def dump_report(report: Sequence[Mapping[str, Any]], indent: int = 2) -> str:
    """Return the report as JSON text."""
    return json.dumps(list(report), indent=indent or None, ensure_ascii=False, default=str)


def write_report(
    report: Sequence[Mapping[str, Any]], output_path: Path | str, indent: int = 2
) -> Path:
    """Write the report as UTF-8 JSON and return the resolved destination."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_report(report, indent) + "\n", encoding="utf-8")
    return output.resolve()
