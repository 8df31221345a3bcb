"""Configuration reference report generation use case."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from schema_docgen.field_rendering import (
    DescriptionCache,
    RenderOptions,
    assert_unique_names,
    render_desc,
    render_fields,
)
from schema_docgen.schema_access import Field
from schema_docgen.struct_discovery import find_structs
from schema_docgen.type_model import fmt_ref

from .generation_options import ROOT_STRUCT_NAME, GenerateOptions

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())

_EMPTY_STRUCT_HINT = "If all children are hidden fields, please set the parent field as hidden."


class EmptyVisibleStructError(Exception):
    """Raised when a reachable struct has no visible field to document."""

    def __init__(self, namespace: str | None, name: str, meta: Mapping[str, Any]) -> None:
        super().__init__(
            f"Struct {fmt_ref(namespace, name)} has no visible fields. {_EMPTY_STRUCT_HINT}"
        )
        self.namespace = namespace
        self.name = name
        self.meta = copy.deepcopy(dict(meta))
        self.msg = _EMPTY_STRUCT_HINT


def generate(
    schema: Any, options: GenerateOptions | Mapping[str, Any] | None = None
) -> list[dict[str, Any]]:
    """Return the JSON-compatible reference report of ``schema``.

    The first record is the root struct built from the root bindings; the
    remaining records follow struct discovery order.
    """
    resolved = _resolve_options(options)
    discovery = find_structs(schema)
    root_namespace = discovery.root_namespace

    with DescriptionCache(resolved.desc_file) as cache:
        render_options = RenderOptions(
            cache=cache,
            formatter=resolved.formatter,
            lang=resolved.lang,
            formatter_options=resolved.formatter_options,
        )
        report = [
            render_struct(
                root_namespace,
                ROOT_STRUCT_NAME,
                discovery.root_fields,
                render_options,
            )
        ]
        for struct in discovery.structs:
            record = render_struct(
                struct.namespace,
                struct.name,
                struct.fields,
                render_options,
                paths=struct.paths,
                tags=struct.tags,
                desc=struct.desc,
            )
            if not record["fields"]:
                raise EmptyVisibleStructError(struct.namespace, struct.name, record)
            report.append(record)

    _LOGGER.debug("Generated report with %d structs in language %s", len(report), resolved.lang)
    return report


# pylint: disable=too-many-arguments
def render_struct(
    namespace: str | None,
    name: str,
    fields: Sequence[Field],
    options: RenderOptions,
    *,
    paths: Iterable[str] = (),
    tags: Iterable[str] = (),
    desc: Any = None,
) -> dict[str, Any]:
    """Render one struct record after checking its names and aliases."""
    full_name = fmt_ref(namespace, name)
    assert_unique_names(full_name, fields)
    record: dict[str, Any] = {
        "full_name": full_name,
        "paths": sorted(paths),
        "tags": list(tags),
        "fields": render_fields(namespace, fields, options),
    }
    rendered_desc = render_desc(desc, options)
    if rendered_desc is not None:
        record["desc"] = rendered_desc
    return record


# pylint: enable=too-many-arguments


def _resolve_options(options: GenerateOptions | Mapping[str, Any] | None) -> GenerateOptions:
    if options is None:
        return GenerateOptions()
    if isinstance(options, GenerateOptions):
        return options
    return GenerateOptions.from_mapping(options)
