#!/usr/bin/env python3
"""
Purpose:
    Interop adapter for libraries that accept "fluent schema" objects
    (duck-typed: an `is_fluent_schema` marker plus `value_of()` returning the
    JSON Schema document). Kept outside the node classes.
"""
from __future__ import annotations

from typing import Any, Dict

from schemakit.core.errors import InvalidArgumentError
from schemakit.core.schema.base import BaseSchema


class FluentSchemaAdapter:
    """Wraps a node; `value_of()` returns a fresh `json_schema()` each call."""

    is_fluent_schema = True

    def __init__(self, schema: BaseSchema) -> None:
        if not isinstance(schema, BaseSchema):
            raise InvalidArgumentError(f"Expected a schema node, got {type(schema).__name__}")
        self.schema = schema

    def value_of(self) -> Dict[str, Any]:
        return self.schema.json_schema()

    def __repr__(self) -> str:
        return f"FluentSchemaAdapter({self.schema!r})"


def as_fluent(schema: BaseSchema) -> FluentSchemaAdapter:
    return FluentSchemaAdapter(schema)


def is_fluent_schema(obj: Any) -> bool:
    """True for objects that carry a truthy `is_fluent_schema` marker."""
    return bool(getattr(obj, "is_fluent_schema", False))
