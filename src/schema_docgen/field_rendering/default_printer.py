"""HOCON-style pretty printing of default values."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from enum import Enum as _StdEnum
from typing import Any

_INDENT = "  "
_BARE_STRING = re.compile(r"^[A-Za-z_][A-Za-z0-9_.\-]*$")
_BARE_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_\-]*$")
_KEYWORDS = frozenset({"true", "false", "null"})


def pretty_print(value: Any) -> list[str]:
    """Return ``value`` as HOCON text lines.

    Scalars and lists of scalars fit on one line; non-empty mappings and lists
    holding them are printed as indented blocks.
    """
    return _render(value)


def format_default(value: Any) -> dict[str, Any] | None:
    """Wrap the printed default as ``{"oneliner": bool, "text": str}``."""
    if value is None:
        return None
    lines = pretty_print(value)
    if len(lines) == 1:
        return {"oneliner": True, "text": lines[0]}
    return {"oneliner": False, "text": "\n".join(lines)}


def _render(value: Any) -> list[str]:
    if isinstance(value, Mapping):
        return _render_mapping(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return _render_sequence(value)
    return [_format_scalar(value)]


def _render_mapping(value: Mapping[Any, Any]) -> list[str]:
    if not value:
        return ["{}"]
    lines = ["{"]
    for key, item in value.items():
        item_lines = _render(item)
        separator = " " if isinstance(item, Mapping) and item else " = "
        lines.append(f"{_INDENT}{_format_key(key)}{separator}{item_lines[0]}")
        lines.extend(f"{_INDENT}{line}" for line in item_lines[1:])
    lines.append("}")
    return lines


def _render_sequence(value: Sequence[Any]) -> list[str]:
    rendered = [_render(item) for item in value]
    if all(len(item_lines) == 1 for item_lines in rendered):
        return ["[" + ", ".join(item_lines[0] for item_lines in rendered) + "]"]
    lines = ["["]
    for index, item_lines in enumerate(rendered):
        lines.extend(f"{_INDENT}{line}" for line in item_lines[:-1])
        trailer = "," if index < len(rendered) - 1 else ""
        lines.append(f"{_INDENT}{item_lines[-1]}{trailer}")
    lines.append("]")
    return lines


def _format_key(key: Any) -> str:
    text = str(key.value if isinstance(key, _StdEnum) else key)
    if _BARE_KEY.match(text):
        return text
    return json.dumps(text, ensure_ascii=False)


def _format_scalar(value: Any) -> str:
    if isinstance(value, _StdEnum):
        return _format_scalar(value.value)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    text = str(value)
    if _BARE_STRING.match(text) and text not in _KEYWORDS:
        return text
    return json.dumps(text, ensure_ascii=False)
