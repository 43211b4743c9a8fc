#!/usr/bin/env python3
import pytest

from schemakit.core import errors as E


# --- Hierarchy --- #

@pytest.mark.parametrize("cls,parent", [
    (E.SchemaError, E.SchemaKitError),
    (E.LockedSchemaError, E.SchemaError),
    (E.DuplicatePropertyError, E.PropertyAlreadySetError),
    (E.DuplicatePatternError, E.DuplicatePropertyError),
    (E.ItemsAlreadySetError, E.PropertyAlreadySetError),
    (E.InvalidArgumentError, ValueError),
    (E.MissingNameError, E.InvalidArgumentError),
    (E.RangeInversionError, E.InvalidArgumentError),
    (E.MissingValueSchemaError, E.SchemaError),
    (E.UnsupportedOperationError, E.SchemaError),
    (E.CompilationError, E.SchemaError),
    (E.ShapeConflictError, E.SchemaError),
    (E.ValidationError, E.SchemaKitError),
])
def test_hierarchy(cls, parent):
    assert issubclass(cls, parent)


def test_validation_error_is_distinct_from_schema_errors():
    assert not issubclass(E.ValidationError, E.SchemaError)


# --- Payloads --- #

def test_validation_error_payload():
    err = E.ValidationError("User", {"a": 1}, [{"message": "x"}], {"type": "object"})
    assert str(err) == "Validation Error: User"
    assert err.name == "User"
    assert err.value == {"a": 1}
    assert err.errors == [{"message": "x"}]
    assert err.schema == {"type": "object"}


def test_internal_details_are_kept_out_of_message():
    err = E.CompilationError("bad schema", internal_details="type: 5 is not valid")
    assert str(err) == "bad schema"
    assert err.message == "bad schema"
    assert err.internal_details == "type: 5 is not valid"


def test_locked_error_fixed_message():
    assert str(E.LockedSchemaError()) == "Schema is locked. Call copy then further modify the schema"
