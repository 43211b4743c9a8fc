#!/usr/bin/env python3
import pytest

from schemakit.compat import FluentSchemaAdapter, as_fluent, is_fluent_schema
from schemakit.core.errors import InvalidArgumentError
from schemakit.core.schema.factory import S


def test_adapter_exposes_marker_and_value_of():
    node = S.obj({"a": S.str})
    adapter = as_fluent(node)
    assert isinstance(adapter, FluentSchemaAdapter)
    assert is_fluent_schema(adapter)
    assert adapter.value_of() == node.json_schema()
    assert adapter.value_of() is not adapter.value_of()


def test_nodes_themselves_are_not_fluent():
    assert not is_fluent_schema(S.str)
    assert not is_fluent_schema({"type": "string"})


def test_adapter_requires_a_node():
    with pytest.raises(InvalidArgumentError):
        FluentSchemaAdapter({"type": "string"})
