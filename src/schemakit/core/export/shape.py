#!/usr/bin/env python3
"""
Purpose:
    Shape exporter: walks a node tree and registers a flat set of named
    shapes (structure/list/map/scalars) in a container, with members
    referencing each other by name.

Naming:
    A node's shape name is `to_string_id(title or default_name)`. Children
    are named by prefixing: an object `User` with property `home-address`
    yields `UserHomeAddress`; an array defaults to `<default_name>List` and
    its items to `<default_name>`; a map's key/value to `<default_name>Key`
    and `<default_name>Value`.

Notes:
    Pattern properties have no shape equivalent and are not exported.
"""
from __future__ import annotations

from typing import Any, Dict, NamedTuple, Optional

from schemakit.core.errors import InvalidArgumentError, MissingNameError
from schemakit.core.export.shape_models import Shape, ShapeMember
from schemakit.core.export.shape_registry import ShapeRegistry
from schemakit.core.utils import to_string_id


class ShapeResult(NamedTuple):
    name: str
    shape: Dict[str, Any]
    doc: Optional[str]


class ShapeExporter:
    """
    Visitor producing shapes into `container` (anything with
    `add_shape(name, shape)`; defaults to a new ShapeRegistry).

    Each `export_<kind>` accepts:
        default_name: name used when the node has no title; prefix for children.
        add_to_container: register this node's shape (children always are).
        location: copied onto object members (e.g. "header").
    """

    def __init__(self, container: Any = None) -> None:
        self.container = container if container is not None else ShapeRegistry()

    # --- Scalars --- #

    def export_string(self, schema: Any, *, default_name: str = "", add_to_container: bool = True,
                      location: Optional[str] = None) -> ShapeResult:
        name, fields = self._base(schema, default_name)
        for prop in ("pattern", "enum"):
            val = schema.get_prop(prop)
            if val:
                fields[prop] = val
        return self._finish(schema, name, fields, add_to_container)

    export_media = export_string

    def export_integer(self, schema: Any, *, default_name: str = "", add_to_container: bool = True,
                       location: Optional[str] = None) -> ShapeResult:
        shape_type = "long" if getattr(schema, "safe_range", None) == "int64" else None
        name, fields = self._base(schema, default_name, shape_type)
        return self._finish(schema, name, fields, add_to_container)

    def export_number(self, schema: Any, *, default_name: str = "", add_to_container: bool = True,
                      location: Optional[str] = None) -> ShapeResult:
        shape_type = "float" if getattr(schema, "is_float", False) else None
        name, fields = self._base(schema, default_name, shape_type)
        return self._finish(schema, name, fields, add_to_container)

    def export_boolean(self, schema: Any, *, default_name: str = "", add_to_container: bool = True,
                       location: Optional[str] = None) -> ShapeResult:
        name, fields = self._base(schema, default_name)
        return self._finish(schema, name, fields, add_to_container)

    # --- Containers --- #

    def export_object(self, schema: Any, *, default_name: str = "", add_to_container: bool = True,
                      location: Optional[str] = None) -> ShapeResult:
        name, fields = self._base(schema, default_name)
        members: Dict[str, ShapeMember] = {}
        required = []
        for prop_name, child in schema.object_schemas.items():
            member_id = to_string_id(prop_name)
            res = child.export(self, default_name=name + member_id)
            if child.required:
                required.append(member_id)
            members[member_id] = ShapeMember(
                shape=res.name,
                location_name=prop_name,
                location=location,
                documentation=res.doc or None,
            )
        fields["members"] = members
        if required:
            fields["required"] = required
        return self._finish(schema, name, fields, add_to_container)

    def export_array(self, schema: Any, *, default_name: str = "", add_to_container: bool = True,
                     location: Optional[str] = None) -> ShapeResult:
        items = schema.items_schema
        if items is None:
            raise InvalidArgumentError("Array must have an items schema to export shapes")
        name, fields = self._base(schema, default_name + "List")
        res = items.export(self, default_name=default_name)
        fields["member"] = ShapeMember(shape=res.name, documentation=res.doc or None)
        return self._finish(schema, name, fields, add_to_container)

    def export_map(self, schema: Any, *, default_name: str = "", add_to_container: bool = True,
                   location: Optional[str] = None) -> ShapeResult:
        name, fields = self._base(schema, default_name)
        for member_name, child in (("key", schema.key_schema), ("value", schema.value_schema)):
            res = child.export(self, default_name=default_name + to_string_id(member_name))
            fields[member_name] = ShapeMember(
                shape=res.name,
                location_name=member_name,
                documentation=res.doc or None,
            )
        return self._finish(schema, name, fields, add_to_container)

    # --- Internals --- #

    def _base(self, schema: Any, default_name: str, shape_type: Optional[str] = None):
        kind = schema.kind
        name = to_string_id(schema.get_prop("title") or default_name)
        fields: Dict[str, Any] = {"type": shape_type or kind.shape_type}
        if kind.has_bounds():
            lower = schema.get_prop(kind.min_prop)
            upper = schema.get_prop(kind.max_prop)
            if lower is not None:
                fields["min"] = lower
            if upper is not None:
                fields["max"] = upper
        return name, fields

    def _finish(self, schema: Any, name: str, fields: Dict[str, Any], add_to_container: bool) -> ShapeResult:
        shape = Shape(**fields).to_dict()
        if add_to_container:
            self.container.add_shape(name, shape)
        return ShapeResult(name=name, shape=shape, doc=schema.get_prop("description"))


# --- Convenience --- #

def export_shapes(schema: Any, name: str, container: Any = None, location: Optional[str] = None) -> Any:
    """
    Export `schema` and all nested nodes as shapes. `name` is the root's
    default name (its title wins when set). Returns the container.
    """
    if not name:
        raise MissingNameError("name is required")
    exporter = ShapeExporter(container)
    schema.export(exporter, default_name=name, location=location)
    return exporter.container
