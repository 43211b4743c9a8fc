#!/usr/bin/env python3
"""
Purpose:
    Defines the NodeKind enumeration for SchemaKit nodes, along with the
    per-kind registry of exported JSON type, shape type and min/max
    bound-property names.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple, Optional


class KindInfo(NamedTuple):
    """Static facts about one node kind."""
    json_type: str
    shape_type: str
    min_prop: Optional[str]
    max_prop: Optional[str]


class NodeKind(str, Enum):
    """
    Supported schema node kinds.

    - object  : named and pattern-matched properties
    - array   : homogeneous list with a single item schema
    - map     : key -> value dictionary (exported as an object with one pattern property)
    - string  : textual scalar
    - media   : string carrying content media type / encoding
    - integer : integral scalar with optional safe-range helpers
    - number  : numeric scalar (int or float)
    - boolean : true/false scalar
    """

    OBJECT = "object"
    ARRAY = "array"
    MAP = "map"
    STRING = "string"
    MEDIA = "media"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"

    # --- Parsing helpers --- #

    @classmethod
    def try_parse(cls, value: str | NodeKind | None) -> NodeKind | None:
        """
        Coerce arbitrary input to a `NodeKind`; unknowns and `None` -> `None`.
        Strings are trimmed and lowercased before lookup.
        """
        if isinstance(value, NodeKind):
            return value
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None

    # --- Registry accessors --- #

    @property
    def info(self) -> KindInfo:
        return KIND_REGISTRY[self]

    @property
    def json_type(self) -> str:
        return self.info.json_type

    @property
    def shape_type(self) -> str:
        return self.info.shape_type

    @property
    def min_prop(self) -> Optional[str]:
        return self.info.min_prop

    @property
    def max_prop(self) -> Optional[str]:
        return self.info.max_prop

    # --- Introspection helpers --- #

    def is_container(self) -> bool:
        """True if nodes of this kind own child nodes (object, array, map)."""
        return self in {NodeKind.OBJECT, NodeKind.ARRAY, NodeKind.MAP}

    def is_numeric(self) -> bool:
        """True for `integer` and `number`."""
        return self in {NodeKind.INTEGER, NodeKind.NUMBER}

    def is_string_typed(self) -> bool:
        """True if the node exports `type: string` (string and media)."""
        return self.json_type == "string"

    def has_bounds(self) -> bool:
        """True if `min`/`max` are meaningful for this kind."""
        return self.min_prop is not None and self.max_prop is not None


# --- Per-kind registry --- #

KIND_REGISTRY: Dict[NodeKind, KindInfo] = {
    NodeKind.OBJECT:  KindInfo("object",  "structure", "minProperties", "maxProperties"),
    NodeKind.ARRAY:   KindInfo("array",   "list",      "minItems",      "maxItems"),
    NodeKind.MAP:     KindInfo("object",  "map",       "minProperties", "maxProperties"),
    NodeKind.STRING:  KindInfo("string",  "string",    "minLength",     "maxLength"),
    NodeKind.MEDIA:   KindInfo("string",  "blob",      "minLength",     "maxLength"),
    NodeKind.INTEGER: KindInfo("integer", "integer",   "minimum",       "maximum"),
    NodeKind.NUMBER:  KindInfo("number",  "double",    "minimum",       "maximum"),
    NodeKind.BOOLEAN: KindInfo("boolean", "boolean",   None,            None),
}
