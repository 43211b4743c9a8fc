#!/usr/bin/env python3
import pytest

from schemakit.core.errors import InvalidArgumentError, ShapeConflictError
from schemakit.core.export.shape_models import Shape, ShapeMember
from schemakit.core.export.shape_registry import ShapeRegistry


# --- Registry --- #

def test_add_and_query():
    reg = ShapeRegistry()
    reg.add_shape("Name", {"type": "string"})
    assert "Name" in reg
    assert len(reg) == 1
    assert reg.names() == ["Name"]
    assert reg.require("Name") == {"type": "string"}
    assert reg.get("Missing") is None
    with pytest.raises(LookupError):
        reg.require("Missing")


def test_identical_re_add_is_accepted_and_conflict_raises():
    reg = ShapeRegistry()
    reg.add_shape("Id", {"type": "string"})
    reg.add_shape("Id", {"type": "string"})
    with pytest.raises(ShapeConflictError):
        reg.add_shape("Id", {"type": "integer"})


def test_returned_shapes_are_copies():
    reg = ShapeRegistry()
    shape = {"type": "string", "enum": ["a"]}
    reg.add_shape("E", shape)
    shape["enum"].append("b")
    reg.get("E")["enum"].append("c")
    reg.shapes()["E"]["type"] = "boolean"
    assert reg.get("E") == {"type": "string", "enum": ["a"]}


@pytest.mark.parametrize("bad", ["", "   ", "has-dash", None])
def test_invalid_names_rejected(bad):
    with pytest.raises(InvalidArgumentError):
        ShapeRegistry().add_shape(bad, {"type": "string"})


# --- Models --- #

def test_shape_dump_uses_aliases_and_drops_none():
    shape = Shape(type="list", member=ShapeMember(shape="Item", location_name="item"))
    assert shape.to_dict() == {"type": "list", "member": {"shape": "Item", "locationName": "item"}}


def test_shape_rejects_unknown_type_and_fields():
    with pytest.raises(ValueError):
        Shape(type="tuple")
    with pytest.raises(ValueError):
        Shape(type="string", colour="red")
