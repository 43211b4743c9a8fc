#!/usr/bin/env python3
"""
Purpose:
    Validator-compiler boundary for SchemaKit. Defines the `Compiler`
    protocol consumed by `BaseSchema.compile` and a default implementation
    backed by `jsonschema` (draft-07).
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Callable, Dict, Iterator, List, Optional, Protocol

from jsonschema import Draft7Validator, FormatChecker, validators
from jsonschema.exceptions import SchemaError as JsonSchemaSchemaError
from pydantic import BaseModel, ConfigDict, Field

from schemakit.core.errors import CompilationError


# --- Settings --- #

class CompilerSettings(BaseModel):
    """
    Options for the default compiler.

    Fields
    ------
    all_errors:
        Collect every diagnostic instead of stopping at the first one.
    use_defaults:
        Fill `default` values into objects while validating (mutates the
        validated value in place).
    check_formats:
        Enforce `format` keywords through `jsonschema.FormatChecker`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    all_errors: bool = Field(default=True, description="Report all diagnostics, not just the first.")
    use_defaults: bool = Field(default=True, description="Populate missing properties from `default`.")
    check_formats: bool = Field(default=False, description="Validate `format` keywords.")


# --- Protocol --- #

class Compiler(Protocol):
    """
    Anything that turns a JSON Schema document into a predicate.

    The returned callable answers True/False and exposes the diagnostics of
    the last failed call through an `errors` attribute.
    """

    def compile(self, schema: Dict[str, Any]) -> Callable[[Any], bool]:
        ...


# --- Default implementation --- #

class CompiledValidator:
    """Predicate returned by `JsonSchemaCompiler.compile`."""

    def __init__(self, validator: Any, *, all_errors: bool = True) -> None:
        self._validator = validator
        self._all_errors = all_errors
        self.errors: Optional[List[Dict[str, Any]]] = None

    def __call__(self, value: Any) -> bool:
        found = self._validator.iter_errors(value)
        if self._all_errors:
            errors = list(found)
        else:
            first = next(found, None)
            errors = [first] if first is not None else []
        self.errors = [_diagnostic(e) for e in errors] or None
        return not errors


class JsonSchemaCompiler:
    """
    Default compiler built on `jsonschema.Draft7Validator`.

    Example:
        >>> validate = JsonSchemaCompiler().compile({"type": "string"})
        >>> validate(3)
        False
        >>> validate.errors[0]["keyword"]
        'type'
    """

    def __init__(self, settings: Optional[CompilerSettings] = None) -> None:
        self.settings = settings or CompilerSettings()
        base = Draft7Validator
        self._validator_class = _extend_with_default(base) if self.settings.use_defaults else base

    def compile(self, schema: Dict[str, Any]) -> CompiledValidator:
        """
        Check `schema` against the draft-07 meta-schema and build a validator.

        Raises:
            CompilationError: if the document is not a valid draft-07 schema.
        """
        try:
            self._validator_class.check_schema(schema)
        except JsonSchemaSchemaError as e:
            raise CompilationError(
                "JSON Schema rejected by the compiler",
                internal_details=e.message,
            ) from e
        format_checker = FormatChecker() if self.settings.check_formats else None
        validator = self._validator_class(schema, format_checker=format_checker)
        return CompiledValidator(validator, all_errors=self.settings.all_errors)


# --- Internals --- #

def _diagnostic(err: Any) -> Dict[str, Any]:
    return {
        "path": list(err.absolute_path),
        "schema_path": list(err.absolute_schema_path),
        "keyword": err.validator,
        "message": err.message,
    }


def _extend_with_default(validator_class: Any) -> Any:
    """Return a validator class whose `properties` keyword also fills defaults."""
    validate_properties = validator_class.VALIDATORS["properties"]

    def set_defaults(validator: Any, properties: Dict[str, Any], instance: Any, schema: Dict[str, Any]) -> Iterator[Any]:
        if isinstance(instance, dict):
            for name, subschema in properties.items():
                if isinstance(subschema, dict) and "default" in subschema:
                    instance.setdefault(name, deepcopy(subschema["default"]))
        yield from validate_properties(validator, properties, instance, schema)

    return validators.extend(validator_class, {"properties": set_defaults})
