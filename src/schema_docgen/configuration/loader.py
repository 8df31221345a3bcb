"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, OutputSettings, SchemaSource

DEFAULT_LANG = "en"
DEFAULT_INDENT = 2


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.parent
    schema = _parse_schema_section(parsed.get("schema"), base_path)
    desc_file = _parse_descriptions_section(parsed.get("descriptions"), base_path)
    lang = _require_non_empty_string(parsed.get("lang", DEFAULT_LANG), "lang")
    output = _parse_output_section(parsed.get("output"), base_path)

    return Configuration(
        path=path,
        schema=schema,
        desc_file=desc_file,
        lang=lang,
        output=output,
    )


def _parse_schema_section(value: Any, base_path: Path) -> SchemaSource:
    section = _require_mapping(value, "schema")
    path_value = _optional_string(section.get("path"), "schema.path")
    module = _optional_string(section.get("module"), "schema.module")
    if path_value and module:
        raise ConfigurationError("Schema section must not set both path and module.")
    if module:
        if ":" not in module:
            raise ConfigurationError("schema.module must look like 'package.module:attribute'.")
        return SchemaSource(path=None, module=module)
    if path_value:
        schema_path = _resolve_path(base_path, path_value)
        if not schema_path.exists():
            raise ConfigurationError(f"Schema file not found: {schema_path}")
        return SchemaSource(path=schema_path, module=None)
    raise ConfigurationError("Schema section requires either path or module.")


def _parse_descriptions_section(value: Any, base_path: Path) -> Path | None:
    if value is None:
        return None
    section = _require_mapping(value, "descriptions")
    path_value = _optional_string(section.get("path"), "descriptions.path")
    if path_value is None:
        return None
    desc_path = _resolve_path(base_path, path_value)
    if not desc_path.exists():
        raise ConfigurationError(f"Description file not found: {desc_path}")
    return desc_path


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    if value is None:
        return OutputSettings(path=None, indent=DEFAULT_INDENT)
    section = _require_mapping(value, "output")
    path_value = _optional_string(section.get("path"), "output.path")
    indent = _require_non_negative_int(section.get("indent", DEFAULT_INDENT), "output.indent")
    return OutputSettings(
        path=_resolve_path(base_path, path_value) if path_value else None,
        indent=indent,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
