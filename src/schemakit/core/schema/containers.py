#!/usr/bin/env python3
"""
Purpose:
    Container node variants: object (named + pattern properties), array
    (single item schema) and map (key -> value dictionary).

Notes:
    - Attaching a child locks it; the parent keeps a reference, not a copy.
    - Child schemas are rendered at export time, so a visitor passed to
      `properties()` sees every node of the tree.
    - A map is exported as an object with exactly one pattern property: the
      anchored key pattern (default `^.*$`) mapped to the value schema.
"""
from __future__ import annotations

import re
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Union

from schemakit.core.constants import DEFAULT_KEY_PATTERN
from schemakit.core.errors import (
    DuplicatePatternError,
    DuplicatePropertyError,
    InvalidArgumentError,
    ItemsAlreadySetError,
    MissingValueSchemaError,
    PropertyAlreadySetError,
    UnsupportedOperationError,
)
from schemakit.core.schema.base import BaseSchema
from schemakit.core.schema.node_kind import NodeKind
from schemakit.core.schema.scalars import StringSchema
from schemakit.core.utils import anchor_pattern, pattern_source


def _render(child: BaseSchema, visitor: Any) -> Any:
    if visitor is None:
        return child.properties()
    return child.export(visitor)


def _require_node(child: Any, what: str) -> BaseSchema:
    if not isinstance(child, BaseSchema):
        raise InvalidArgumentError(f"{what} must be a schema node, got {type(child).__name__}")
    return child


# --- Object --- #

class ObjectSchema(BaseSchema):
    """
    Object with named properties and/or pattern properties.

    `additionalProperties` is derived on export: True when there are no
    children at all, or when explicitly allowed; False otherwise.
    """

    KIND: ClassVar[NodeKind] = NodeKind.OBJECT

    def __init__(self, props: Optional[Mapping[str, BaseSchema]] = None) -> None:
        super().__init__()
        self._object_schemas: Dict[str, BaseSchema] = {}
        self._pattern_schemas: Dict[str, BaseSchema] = {}
        self._additional_properties = False
        if props:
            self.props(props)

    @property
    def object_schemas(self) -> Dict[str, BaseSchema]:
        return dict(self._object_schemas)

    @property
    def pattern_schemas(self) -> Dict[str, BaseSchema]:
        return dict(self._pattern_schemas)

    def prop(self, name: str, schema: BaseSchema) -> "ObjectSchema":
        """Attach `schema` under `name`. The child is locked."""
        self._require_unlocked(f"prop {name!r}")
        if not isinstance(name, str):
            raise InvalidArgumentError("Property name must be strings.")
        _require_node(schema, f"Property {name}")
        if name in self._object_schemas:
            raise DuplicatePropertyError(f"Property with key {name} already exists")
        self._object_schemas[name] = schema.lock()
        return self

    def props(self, props: Mapping[str, BaseSchema]) -> "ObjectSchema":
        """Call `prop` for each entry. Not atomic: earlier entries stay attached on failure."""
        for name, schema in props.items():
            self.prop(name, schema)
        return self

    def pattern_props(self, props: Mapping[Union[str, re.Pattern], BaseSchema]) -> "ObjectSchema":
        """Attach schemas for keys matching each (anchored) pattern."""
        for pattern, schema in props.items():
            self._require_unlocked("pattern_props")
            source = pattern_source(pattern)
            if not isinstance(source, str):
                raise InvalidArgumentError("Pattern must be a string")
            anchored = anchor_pattern(source)
            _require_node(schema, f"Pattern {anchored}")
            if anchored in self._pattern_schemas:
                raise DuplicatePatternError(f"Pattern {anchored} already exists")
            self._pattern_schemas[anchored] = schema.lock()
        return self

    def allow_additional_properties(self, allow: bool = True) -> "ObjectSchema":
        """Export `additionalProperties: true` even when properties are declared."""
        self._require_unlocked("allow_additional_properties")
        if not isinstance(allow, bool):
            raise InvalidArgumentError("allow must be a boolean.")
        self._additional_properties = allow
        return self

    def properties(self, visitor: Any = None) -> Dict[str, Any]:
        ret = dict(self._properties)
        if self._object_schemas:
            ret["properties"] = {n: _render(c, visitor) for n, c in self._object_schemas.items()}
            required = [n for n, c in self._object_schemas.items() if c.required]
            if required:
                ret["required"] = required
        if self._pattern_schemas:
            ret["patternProperties"] = {p: _render(c, visitor) for p, c in self._pattern_schemas.items()}
        has_children = bool(self._object_schemas or self._pattern_schemas)
        ret["additionalProperties"] = not has_children or self._additional_properties
        return ret

    def copy(self) -> "ObjectSchema":
        ret = super().copy()
        ret._object_schemas = dict(self._object_schemas)
        ret._pattern_schemas = dict(self._pattern_schemas)
        ret._additional_properties = self._additional_properties
        return ret

    def traverse(self, callback: Callable[[BaseSchema], None]) -> None:
        callback(self)
        for child in [*self._object_schemas.values(), *self._pattern_schemas.values()]:
            child.traverse(callback)


# --- Array --- #

class ArraySchema(BaseSchema):
    KIND: ClassVar[NodeKind] = NodeKind.ARRAY

    def __init__(self, items: Optional[BaseSchema] = None) -> None:
        super().__init__()
        self._items_schema: Optional[BaseSchema] = None
        if items is not None:
            self.items(items)

    @property
    def items_schema(self) -> Optional[BaseSchema]:
        return self._items_schema

    def items(self, items: BaseSchema) -> "ArraySchema":
        """Set the schema every element must match. Set-once; the child is locked."""
        self._require_unlocked("items")
        if self._items_schema is not None:
            raise ItemsAlreadySetError("Items is already set.")
        self._items_schema = _require_node(items, "Items").lock()
        return self

    def properties(self, visitor: Any = None) -> Dict[str, Any]:
        ret = dict(self._properties)
        if self._items_schema is not None:
            ret["items"] = _render(self._items_schema, visitor)
        return ret

    def copy(self) -> "ArraySchema":
        ret = super().copy()
        ret._items_schema = self._items_schema
        return ret

    def traverse(self, callback: Callable[[BaseSchema], None]) -> None:
        callback(self)
        if self._items_schema is not None:
            self._items_schema.traverse(callback)


# --- Map --- #

class MapSchema(ObjectSchema):
    """
    Dictionary of string keys to values of one schema.

    Finalization (on first lock, export, copy or properties call) requires a
    value schema, defaults the key to an unconstrained string and installs
    the single pattern property. It runs once.
    """

    KIND: ClassVar[NodeKind] = NodeKind.MAP

    def __init__(self) -> None:
        super().__init__()
        self._key_schema: Optional[BaseSchema] = None
        self._value_schema: Optional[BaseSchema] = None
        self._finalized = False

    @property
    def key_schema(self) -> Optional[BaseSchema]:
        return self._key_schema

    @property
    def value_schema(self) -> Optional[BaseSchema]:
        return self._value_schema

    # Object vocabulary is not available on maps
    def prop(self, name: str, schema: BaseSchema) -> "MapSchema":
        raise UnsupportedOperationError("Map does not support prop")

    def props(self, props: Mapping[str, BaseSchema]) -> "MapSchema":
        raise UnsupportedOperationError("Map does not support props")

    def pattern_props(self, props: Mapping[Union[str, re.Pattern], BaseSchema]) -> "MapSchema":
        raise UnsupportedOperationError("Map does not support pattern_props")

    def allow_additional_properties(self, allow: bool = True) -> "MapSchema":
        raise UnsupportedOperationError("Map does not support allow_additional_properties")

    def key(self, key: BaseSchema) -> "MapSchema":
        """Set the key schema: a required string (or media) node. Locked on attach."""
        self._require_unlocked("key")
        if self._key_schema is not None:
            raise PropertyAlreadySetError("Key schema is already set.")
        _require_node(key, "Key")
        if not key.KIND.is_string_typed():
            raise InvalidArgumentError("Key must be strings")
        if not key.required:
            raise InvalidArgumentError("key must be required")
        self._key_schema = key.lock()
        return self

    def key_pattern(self, pattern: Union[str, re.Pattern]) -> "MapSchema":
        """Shorthand for `key(S.str.pattern(pattern))`."""
        self._require_unlocked("key_pattern")
        if self._key_schema is not None:
            raise PropertyAlreadySetError("Key schema is already set.")
        self._key_schema = StringSchema().pattern(pattern).lock()
        return self

    def value(self, value: BaseSchema) -> "MapSchema":
        """Set the value schema. It must be required; it is locked on attach."""
        self._require_unlocked("value")
        if self._value_schema is not None:
            raise PropertyAlreadySetError("Value schema is already set.")
        _require_node(value, "Value")
        if not value.required:
            raise InvalidArgumentError("value must be required")
        self._value_schema = value.lock()
        return self

    def _finalize(self) -> None:
        if self._finalized:
            return
        if self._value_schema is None:
            raise MissingValueSchemaError("Must have a value schema")
        if self._key_schema is None:
            self._key_schema = StringSchema().lock()
        pattern = self._key_schema.get_prop("pattern") or DEFAULT_KEY_PATTERN
        ObjectSchema.pattern_props(self, {pattern: self._value_schema})
        self._finalized = True

    def lock(self) -> "MapSchema":
        self._finalize()
        super().lock()
        return self

    def export(self, visitor: Any, **context: Any) -> Any:
        self._finalize()
        return super().export(visitor, **context)

    def properties(self, visitor: Any = None) -> Dict[str, Any]:
        self._finalize()
        return super().properties(visitor)

    def copy(self) -> "MapSchema":
        self._finalize()
        ret = super().copy()
        ret._key_schema = self._key_schema
        ret._value_schema = self._value_schema
        ret._finalized = True
        return ret

    def traverse(self, callback: Callable[[BaseSchema], None]) -> None:
        if self._value_schema is None:
            raise MissingValueSchemaError("Cannot traverse map before value schema is set")
        callback(self)
        if self._key_schema is not None:
            self._key_schema.traverse(callback)
        self._value_schema.traverse(callback)
