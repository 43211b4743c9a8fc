#!/usr/bin/env python3
import pytest

from schemakit.core.schema.node_kind import KIND_REGISTRY, NodeKind


# --- Parser Helpers --- #

@pytest.mark.parametrize("raw,expected", [
    ("string", NodeKind.STRING),
    (" Object ", NodeKind.OBJECT),
    ("MAP", NodeKind.MAP),
    (NodeKind.MEDIA, NodeKind.MEDIA),
    (None, None),
    ("unknown", None),
    (123, None),
])
def test_try_parse(raw, expected):
    assert NodeKind.try_parse(raw) is expected


# --- Registry --- #

def test_registry_covers_every_kind():
    assert set(KIND_REGISTRY) == set(NodeKind)


@pytest.mark.parametrize("kind,json_type,shape_type,min_prop,max_prop", [
    (NodeKind.OBJECT, "object", "structure", "minProperties", "maxProperties"),
    (NodeKind.ARRAY, "array", "list", "minItems", "maxItems"),
    (NodeKind.MAP, "object", "map", "minProperties", "maxProperties"),
    (NodeKind.STRING, "string", "string", "minLength", "maxLength"),
    (NodeKind.MEDIA, "string", "blob", "minLength", "maxLength"),
    (NodeKind.INTEGER, "integer", "integer", "minimum", "maximum"),
    (NodeKind.NUMBER, "number", "double", "minimum", "maximum"),
])
def test_registry_entries(kind, json_type, shape_type, min_prop, max_prop):
    assert kind.json_type == json_type
    assert kind.shape_type == shape_type
    assert kind.min_prop == min_prop
    assert kind.max_prop == max_prop
    assert kind.has_bounds()


def test_boolean_has_no_bounds():
    assert NodeKind.BOOLEAN.min_prop is None
    assert not NodeKind.BOOLEAN.has_bounds()


# --- Introspection --- #

def test_introspection_helpers():
    assert {k for k in NodeKind if k.is_container()} == {NodeKind.OBJECT, NodeKind.ARRAY, NodeKind.MAP}
    assert {k for k in NodeKind if k.is_numeric()} == {NodeKind.INTEGER, NodeKind.NUMBER}
    assert {k for k in NodeKind if k.is_string_typed()} == {NodeKind.STRING, NodeKind.MEDIA}
