#!/usr/bin/env python3
"""
Purpose:
    The `S` factory: the entry point for building schema trees.

Example:
    >>> user = S.obj({
    ...     "name": S.str.min(1),
    ...     "age": S.int.min(0).optional(),
    ... })
    >>> user.json_schema()["required"]
    ['name']
"""
from __future__ import annotations

from typing import Mapping, MutableMapping, Optional, TypeVar

from schemakit.core.errors import ValidationError
from schemakit.core.schema.base import BaseSchema
from schemakit.core.schema.common import SCHEMAS
from schemakit.core.schema.containers import ArraySchema, MapSchema, ObjectSchema
from schemakit.core.schema.scalars import BooleanSchema, IntegerSchema, MediaSchema, NumberSchema, StringSchema

M = TypeVar("M", bound=MutableMapping[str, BaseSchema])


class SchemaFactory:
    """Node accessors. Every accessor returns a new, unlocked node."""

    SCHEMAS = SCHEMAS
    ValidationError = ValidationError

    def obj(self, props: Optional[Mapping[str, BaseSchema]] = None) -> ObjectSchema:
        """Same as `S.obj().props(props)`."""
        return ObjectSchema(props)

    def arr(self, items: Optional[BaseSchema] = None) -> ArraySchema:
        """Same as `S.arr().items(items)`."""
        return ArraySchema(items)

    @property
    def str(self) -> StringSchema:
        return StringSchema()

    @property
    def int(self) -> IntegerSchema:
        return IntegerSchema()

    @property
    def double(self) -> NumberSchema:
        return NumberSchema()

    @property
    def bool(self) -> BooleanSchema:
        return BooleanSchema()

    @property
    def map(self) -> MapSchema:
        return MapSchema()

    @property
    def media(self) -> MediaSchema:
        return MediaSchema()

    # --- Bulk helpers (in place; return the mapping) --- #

    @staticmethod
    def lock(schemas: M) -> M:
        for schema in schemas.values():
            schema.lock()
        return schemas

    @staticmethod
    def optional(schemas: M) -> M:
        for schema in schemas.values():
            schema.optional()
        return schemas


S = SchemaFactory()
