#!/usr/bin/env python3
"""
Purpose:
    Registry of reusable, pre-locked schema nodes (exposed as `S.SCHEMAS`).
    Use `.copy()` to derive a modifiable variant.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from schemakit.core.schema.base import BaseSchema
from schemakit.core.schema.scalars import IntegerSchema, StringSchema

_STR_BASE32 = (
    StringSchema()
    .pattern(r"^[ABCDEFGHJLMNPQRSTUVWXYZ023456789]+$")
    .desc("Only select digits and uppercase ASCII characters")
)

_COMMON: dict = {
    "UUID": StringSchema()
    .desc("An UUID. It is normally generated by calling uuid.uuid4().")
    .pattern(r"^[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}$"),
    "STR_ANDU": StringSchema()
    .desc("Only hyphens, underscores, letters and numbers are permitted.")
    .pattern(r"^[-_a-zA-Z0-9]+$"),
    # quick check that a string looks like an e-mail address
    "STR_EMAIL": StringSchema().pattern(r"^[^A-Z ]+@.+$").desc("an e-mail address (lowercase only)"),
    "STR_BASE32": _STR_BASE32,
    "TIMESTAMP": StringSchema()
    .pattern(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$")
    .desc("An ISO-8601 date-time, e.g. 2024-01-31T12:00:00Z"),
    "EPOCH_SECONDS": IntegerSchema().min(0).as_int64().desc("Seconds since the Unix epoch"),
    "EPOCH_MILLIS": IntegerSchema().min(0).as_int64().desc("Milliseconds since the Unix epoch"),
}

for _node in _COMMON.values():
    _node.lock()

SCHEMAS: Mapping[str, BaseSchema] = MappingProxyType(_COMMON)
