#!/usr/bin/env python3
"""
Purpose:
    JSON Schema exporter: the default visitor over a SchemaKit node tree.
    Every node kind exports its JSON-Schema view as-is; the root gets the
    draft marker.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

from schemakit.core.constants import JSON_SCHEMA_DRAFT_URI


class JSONSchemaExporter:
    """
    Visitor producing a draft-07 JSON Schema document.

    Containers export their children through the same visitor, so a subclass
    overriding one `export_<kind>` method affects that kind at every depth.
    """

    def _export_properties(self, schema: Any) -> Dict[str, Any]:
        return schema.properties(self)

    export_string = _export_properties
    export_media = _export_properties
    export_integer = _export_properties
    export_number = _export_properties
    export_boolean = _export_properties
    export_object = _export_properties
    export_array = _export_properties
    export_map = _export_properties

    def export(self, schema: Any) -> Dict[str, Any]:
        """Return an independent copy of the exported document with `$schema` set."""
        ret = deepcopy(schema.export(self))
        ret["$schema"] = JSON_SCHEMA_DRAFT_URI
        return ret
