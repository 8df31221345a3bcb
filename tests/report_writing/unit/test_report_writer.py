"""Report writer tests."""

from __future__ import annotations

import json
from pathlib import Path

from schema_docgen.report_writing import dump_report, write_report

_REPORT = [
    {"full_name": "Root Config Keys", "paths": [], "tags": [], "fields": []},
    {"full_name": "zone", "paths": ["zones.$name"], "tags": ["区域"], "fields": []},
]


def test_dump_report_keeps_non_ascii_text() -> None:
    text = dump_report(_REPORT, indent=2)

    assert "区域" in text
    assert json.loads(text) == _REPORT


def test_dump_report_without_indent_is_compact() -> None:
    assert "\n" not in dump_report(_REPORT, indent=0)


def test_write_report_creates_parent_directories(tmp_path: Path) -> None:
    output_path = tmp_path / "docs" / "reference.json"

    written = write_report(_REPORT, output_path)

    assert written == output_path.resolve()
    assert json.loads(output_path.read_text(encoding="utf-8")) == _REPORT
