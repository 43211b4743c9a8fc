#!/usr/bin/env python3
import pytest

from schemakit.core.compiler import CompilerSettings, JsonSchemaCompiler
from schemakit.core.errors import LockedSchemaError, MissingNameError, SchemaError, ValidationError
from schemakit.core.schema.base import CompiledSchema
from schemakit.core.schema.factory import S


# --- Helpers --- #

class _RecordingCompiler:
    """Accepts values equal to `accept`; records the schema it compiled."""

    def __init__(self, accept):
        self.accept = accept
        self.schemas = []

    def compile(self, schema):
        self.schemas.append(schema)

        def validate(value):
            validate.errors = None if value == self.accept else [{"path": [], "message": "nope"}]
            return validate.errors is None

        validate.errors = None
        return validate


# --- compile --- #

def test_compile_requires_name():
    with pytest.raises(MissingNameError):
        S.str.compile("")


def test_compile_locks_node():
    node = S.obj({"name": S.str})
    node.compile("User")
    assert node.locked
    with pytest.raises(LockedSchemaError):
        node.prop("age", S.int)


def test_assert_valid_passes_and_raises():
    assert_valid = S.obj({"name": S.str, "age": S.int.optional()}).compile("User")
    assert assert_valid({"name": "Ada"}) is None

    with pytest.raises(ValidationError) as ei:
        assert_valid({"age": "old"})
    err = ei.value
    assert err.name == "User"
    assert err.value == {"age": "old"}
    assert str(err) == "Validation Error: User"
    assert {e["keyword"] for e in err.errors} == {"required", "type"}
    assert err.schema["$schema"].startswith("http://json-schema.org/draft-07")
    assert not isinstance(err, SchemaError)


def test_compile_returns_schema_and_validator_pair():
    res = S.int.min(0).compile("Count", return_schema_and_validator=True)
    assert isinstance(res, CompiledSchema)
    assert res.json_schema["minimum"] == 0
    with pytest.raises(ValidationError):
        res.assert_valid(-1)


def test_get_validator_and_json_schema_shorthand():
    json_schema, assert_valid = S.str.get_validator_and_json_schema("Name")
    assert json_schema["type"] == "string"
    assert_valid("ok")


def test_explicit_compiler_is_used():
    compiler = _RecordingCompiler(accept=42)
    assert_valid = S.int.compile("Answer", compiler)
    assert compiler.schemas[0]["type"] == "integer"
    assert_valid(42)
    with pytest.raises(ValidationError) as ei:
        assert_valid(41)
    assert ei.value.errors == [{"path": [], "message": "nope"}]


def test_defaults_are_filled_during_validation():
    assert_valid = S.obj({"n": S.int.default(3).optional()}).compile("WithDefault")
    value = {}
    assert_valid(value)
    assert value == {"n": 3}


def test_defaults_not_filled_when_disabled():
    compiler = JsonSchemaCompiler(CompilerSettings(use_defaults=False))
    assert_valid = S.obj({"n": S.int.default(3).optional()}).compile("NoDefault", compiler)
    value = {}
    assert_valid(value)
    assert value == {}


def test_map_validation():
    assert_valid = S.map.key_pattern("[a-z]+").value(S.int).compile("Counts")
    assert_valid({"abc": 1})
    with pytest.raises(ValidationError):
        assert_valid({"ABC": 1})
    with pytest.raises(ValidationError):
        assert_valid({"abc": "1"})


def test_returned_schema_is_independent_of_validator():
    res = S.obj({"a": S.str}).compile("Detached", return_schema_and_validator=True)
    res.json_schema["properties"]["a"]["type"] = "integer"
    res.assert_valid({"a": "ok"})

    with pytest.raises(ValidationError) as ei:
        res.assert_valid({"a": 1})
    ei.value.schema["properties"]["a"]["type"] = "integer"
    res.assert_valid({"a": "still ok"})
