"""Reachable struct discovery service."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from schema_docgen.schema_access import SchemaAccessor, as_schema
from schema_docgen.type_model import (
    Array,
    Lazy,
    MapOf,
    Reference,
    TypeExpression,
    Union,
    contains_reference,
    fmt_ref,
)

from .discovery_models import ARRAY_INDEX_SEGMENT, DiscoveredStruct, DiscoveryResult

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())


def find_structs(schema: Any) -> DiscoveryResult:
    """Return the root bindings and every struct reachable from visible roots.

    Structs are listed in first-discovery order: roots in declaration order,
    depth-first through each root's type expression.
    """
    accessor = as_schema(schema)
    root_fields = accessor.roots()
    walker = _StructWalker()
    for name, root in root_fields:
        if root.hidden:
            continue
        walker.walk(accessor, root.type, (name,), root.tags)
    structs = walker.discovered()
    _LOGGER.debug(
        "Discovered %d structs from %d root bindings", len(structs), len(root_fields)
    )
    return DiscoveryResult(
        root_namespace=accessor.namespace,
        root_fields=tuple(root_fields),
        structs=structs,
    )


class _StructWalker:
    """Depth-first walker keeping the already-discovered set."""

    def __init__(self) -> None:
        self._discovered: dict[tuple[str | None, str], DiscoveredStruct] = {}
        self._hidden: set[tuple[str | None, str]] = set()
        self._accessors: dict[int, SchemaAccessor] = {}

    def discovered(self) -> tuple[DiscoveredStruct, ...]:
        return tuple(self._discovered.values())

    def walk(
        self,
        schema: SchemaAccessor,
        type_expr: TypeExpression,
        stack: tuple[str, ...],
        path_tags: Iterable[str],
    ) -> None:
        if not contains_reference(type_expr):
            return
        match type_expr:
            case Array(element=element):
                self.walk(schema, element, (*stack, ARRAY_INDEX_SEGMENT), path_tags)
            case MapOf(key_name=key_name, values=values):
                self.walk(schema, values, (*stack, f"${key_name}"), path_tags)
            case Union(members=members):
                for member in members:
                    self.walk(schema, member, stack, path_tags)
            case Lazy(inner=inner):
                self.walk(schema, inner, stack, path_tags)
            case Reference(name=name, schema=owner):
                self._visit(self._owner(schema, owner), name, stack, tuple(path_tags))

    def _visit(
        self,
        schema: SchemaAccessor,
        name: str,
        stack: tuple[str, ...],
        path_tags: tuple[str, ...],
    ) -> None:
        key = (schema.namespace, name)
        path = ".".join(stack)
        if key in self._hidden:
            return
        existing = self._discovered.get(key)
        if existing is not None:
            existing.merge(path, path_tags)
            return

        fields = schema.fields(name)
        if fields and all(field_schema.hidden for _, field_schema in fields):
            _LOGGER.debug("Skipping struct %s: every field is hidden", fmt_ref(*key))
            self._hidden.add(key)
            return

        struct = DiscoveredStruct(
            namespace=schema.namespace,
            name=name,
            schema=schema,
            fields=tuple(fields),
            desc=schema.struct_desc(name),
        )
        struct.merge(path, (*schema.struct_tags(name), *path_tags))
        self._discovered[key] = struct
        _LOGGER.debug("Discovered struct %s via %s", fmt_ref(*key), path)

        for field_name, field_schema in fields:
            if field_schema.hidden:
                continue
            self.walk(
                schema,
                field_schema.type,
                (*stack, field_name),
                (*path_tags, *field_schema.tags),
            )

    def _owner(self, current: SchemaAccessor, handle: Any) -> SchemaAccessor:
        if handle is None:
            return current
        accessor = self._accessors.get(id(handle))
        if accessor is None:
            accessor = as_schema(handle)
            self._accessors[id(handle)] = accessor
        return accessor
