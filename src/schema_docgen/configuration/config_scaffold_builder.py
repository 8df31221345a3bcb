"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "docgen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Docgen configuration template for schema-docgen.
# Replace every <REQUIRED> placeholder before running generate or check.
# Remove <OPTIONAL> entries your setup does not need.

schema:
  # Choose exactly one schema source.
  # A YAML/JSON schema document with roots and fields:
  path: "<REQUIRED>"
  # Or a schema declared in code, as package.module:attribute:
  # module: "<OPTIONAL>"

descriptions:
  # YAML/JSON file with localized descriptions (namespace -> id -> desc -> lang).
  path: "<OPTIONAL>"

# Language tag used to pick localized descriptions.
lang: "en"

output:
  # Report file to write; the report is printed on stdout when unset.
  path: "<OPTIONAL>"
  indent: 2
"""


def build_placeholder_configuration() -> str:
    """Build a YAML docgen configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder docgen configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Docgen configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
