"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from typing import Any

import click

from schema_docgen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from schema_docgen.field_rendering import DescriptionError, DuplicateFieldNamesError
from schema_docgen.report_generation import EmptyVisibleStructError, GenerateOptions, generate
from schema_docgen.report_writing import dump_report, write_report
from schema_docgen.schema_access import UnresolvedReferenceError
from schema_docgen.schema_loading import SchemaLoadError, load_schema

_REPORT_ERRORS = (
    ConfigurationError,
    SchemaLoadError,
    UnresolvedReferenceError,
    DuplicateFieldNamesError,
    EmptyVisibleStructError,
    DescriptionError,
    OSError,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-docgen")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Configuration schema reference generator."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML docgen configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML docgen configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON docgen configuration file",
)
@click.option(
    "--lang",
    "lang",
    required=False,
    help="Language tag for descriptions, overriding the configuration",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Report file to write, overriding the configuration",
)
def generate_reference(config_path: str, lang: str | None, output_path: str | None) -> None:
    """Generate the JSON configuration reference of a schema."""
    try:
        configuration = load_configuration(config_path)
        report = _build_report(configuration, lang)
        destination = output_path or configuration.output.path
        if destination is None:
            click.echo(dump_report(report, configuration.output.indent))
            return
        written = write_report(report, destination, configuration.output.indent)
    except _REPORT_ERRORS as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


@cli.command(name="check")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON docgen configuration file",
)
def check(config_path: str) -> None:
    """Validate that the schema renders without authoring errors."""
    try:
        report = _build_report(load_configuration(config_path), None)
    except _REPORT_ERRORS as exc:
        raise CliError(str(exc)) from exc
    field_count = sum(len(struct["fields"]) for struct in report)
    click.echo(f"ok: {len(report)} structs, {field_count} visible fields")


def _build_report(configuration: Configuration, lang: str | None) -> list[dict[str, Any]]:
    schema = load_schema(configuration.schema)
    options = GenerateOptions(
        desc_file=configuration.desc_file,
        lang=lang or configuration.lang,
    )
    return generate(schema, options)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
