#!/usr/bin/env python3
"""
Purpose:
    Implements BaseSchema, the abstract SchemaKit node: property bag,
    lock and copy-on-write discipline, metadata setters, min/max dispatch,
    export/compile entry points and traversal.

Copy-on-write contract:
    Every mutating call returns the node that now holds the change. It is
    `self` for a first write on an unlocked node, and a fresh unlocked copy
    when the node is locked (override-allowed metadata only) or when an
    override-allowed property already has a value. Always chain from the
    returned reference.
"""
from __future__ import annotations

import re
from copy import deepcopy
from typing import Any, Callable, ClassVar, Dict, NamedTuple, Optional, Sequence, Union

import structlog

from schemakit.core.compiler import Compiler, JsonSchemaCompiler
from schemakit.core.errors import (
    InvalidArgumentError,
    LockedSchemaError,
    MissingNameError,
    PropertyAlreadySetError,
    RangeInversionError,
    ValidationError,
)
from schemakit.core.export.json_schema import JSONSchemaExporter
from schemakit.core.formatting import format_validation_errors
from schemakit.core.schema.node_kind import NodeKind
from schemakit.core.utils import is_integer, is_string_sequence

logger = structlog.get_logger(__name__)

# A newline plus the whitespace around it collapses to one space
_NEWLINE_RUN_RE = re.compile(r"\s*\n\s*")


class CompiledSchema(NamedTuple):
    """Exported schema paired with the validator compiled from it."""
    json_schema: Dict[str, Any]
    assert_valid: Callable[[Any], None]


class BaseSchema:
    """
    Abstract schema node. Concrete subclasses set `KIND`.

    Nodes are required by default; see `optional()`.
    """

    KIND: ClassVar[NodeKind]

    def __init__(self) -> None:
        self._properties: Dict[str, Any] = {}
        self._locked: bool = False
        self._optional: bool = False
        self._set_prop("type", self.KIND.json_type)

    # --- State --- #

    @property
    def kind(self) -> NodeKind:
        return self.KIND

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def required(self) -> bool:
        """True unless `optional()` was called."""
        return not self._optional

    def lock(self) -> "BaseSchema":
        """Lock the node against further modification. Idempotent."""
        self._locked = True
        return self

    def copy(self) -> "BaseSchema":
        """
        Return an unlocked copy with a deep-copied property bag.
        The optional flag carries over; set-once properties stay set.
        """
        ret = self.__class__()
        ret._properties = deepcopy(self._properties)
        ret._optional = self._optional
        return ret

    # --- Property bag --- #

    def get_prop(self, name: str, default: Any = None) -> Any:
        """Return the raw value stored under `name` in the property bag."""
        return self._properties.get(name, default)

    def _set_prop(self, name: str, val: Any, *, allow_override: bool = False) -> "BaseSchema":
        """
        Store `val` under `name`, copying first when required.

        Raises:
            LockedSchemaError: node is locked and override is not allowed.
            PropertyAlreadySetError: `name` already set and override is not allowed.
        """
        if self._locked and not allow_override:
            raise LockedSchemaError(internal_details=f"{self!r}: set {name!r}")
        exists = name in self._properties
        if exists and not allow_override:
            raise PropertyAlreadySetError(f"Property {name} is already set.")
        should_copy = self._locked or exists
        ret = self.copy() if should_copy else self
        ret._properties[name] = val
        return ret

    def _require_unlocked(self, action: str) -> None:
        if self._locked:
            raise LockedSchemaError(internal_details=f"{self!r}: {action}")

    # --- Metadata --- #

    def title(self, t: str) -> "BaseSchema":
        """Set the title. Override-allowed: a second call copies and replaces."""
        if not isinstance(t, str):
            raise InvalidArgumentError("Title must be a string.")
        return self._set_prop("title", t, allow_override=True)

    def desc(self, d: Union[str, Sequence[str]]) -> "BaseSchema":
        """
        Set the description. Override-allowed.

        A list of strings is joined with single spaces. Surrounding whitespace
        is trimmed and each newline (with its indentation) becomes one space,
        so long descriptions can be written as triple-quoted blocks.
        """
        if isinstance(d, (list, tuple)):
            if not is_string_sequence(d):
                raise InvalidArgumentError("Description must be a string or a list of strings.")
            d = " ".join(d)
        if not isinstance(d, str):
            raise InvalidArgumentError("Description must be a string or a list of strings.")
        d = _NEWLINE_RUN_RE.sub(" ", d.strip())
        return self._set_prop("description", d, allow_override=True)

    def examples(self, es: Sequence[Any]) -> "BaseSchema":
        """
        Set examples. Override-allowed.

        An example given as a list of strings is joined by spaces into one
        example, so long examples can be split across literals.
        """
        if not isinstance(es, (list, tuple)):
            raise InvalidArgumentError("Examples must be a list")
        normalized = []
        for e in es:
            if isinstance(e, (list, tuple)):
                if not is_string_sequence(e):
                    raise InvalidArgumentError("Multi-part examples must be lists of strings")
                e = " ".join(e)
            normalized.append(deepcopy(e))
        return self._set_prop("examples", normalized, allow_override=True)

    def default(self, d: Any) -> "BaseSchema":
        """
        Set a default value (metadata only; not validated against the schema).
        A private deep copy is stored so later changes to `d` have no effect.
        """
        return self._set_prop("default", deepcopy(d))

    def has_default(self) -> bool:
        return "default" in self._properties

    def get_default(self) -> Any:
        """Return a copy of the default value (None when unset)."""
        return deepcopy(self._properties.get("default"))

    def read_only(self, r: bool = True) -> "BaseSchema":
        if not isinstance(r, bool):
            raise InvalidArgumentError("readOnly must be a boolean.")
        return self._set_prop("readOnly", r)

    def optional(self) -> "BaseSchema":
        """Mark the node as not required. Set-once."""
        self._require_unlocked("optional")
        if self._optional:
            raise PropertyAlreadySetError("Property optional is already set.")
        self._optional = True
        return self

    # --- min / max --- #

    def min(self, val: Any) -> "BaseSchema":
        """Set the kind's lower bound (minLength, minimum, minItems, minProperties)."""
        name = self._bound_name(self.KIND.min_prop, "min")
        self._validate_range_property(name, val)
        upper = self.get_prop(self.KIND.max_prop)
        if upper is not None and val > upper:
            raise RangeInversionError(f"min must be less than max ({name}={val!r} > {upper!r})")
        return self._set_prop(name, val)

    def max(self, val: Any) -> "BaseSchema":
        """Set the kind's upper bound (maxLength, maximum, maxItems, maxProperties)."""
        name = self._bound_name(self.KIND.max_prop, "max")
        self._validate_range_property(name, val)
        lower = self.get_prop(self.KIND.min_prop)
        if lower is not None and val < lower:
            raise RangeInversionError(f"max must be more than min ({name}={val!r} < {lower!r})")
        return self._set_prop(name, val)

    def _bound_name(self, name: Optional[str], which: str) -> str:
        if name is None:
            raise InvalidArgumentError(f"{self.KIND.value} schemas do not support {which}()")
        return name

    def _validate_range_property(self, name: str, val: Any) -> None:
        """Length/count bounds: a non-negative integer."""
        if not is_integer(val):
            raise InvalidArgumentError(f"{name} must be an integer")
        if val < 0:
            raise InvalidArgumentError(f"{name} must be a non-negative number")

    # --- Export --- #

    def properties(self, visitor: Any = None) -> Dict[str, Any]:
        """
        JSON-Schema view of this node. Scalars return the live property bag;
        containers add their children (exported through `visitor` if given).
        """
        return self._properties

    def export(self, visitor: Any, **context: Any) -> Any:
        """Dispatch to `visitor.export_<kind>(self, **context)`."""
        method = getattr(visitor, f"export_{self.KIND.value}")
        return method(self, **context)

    def json_schema(self) -> Dict[str, Any]:
        """Return a fresh JSON Schema document with `$schema` at the root."""
        return JSONSchemaExporter().export(self)

    def traverse(self, callback: Callable[["BaseSchema"], None]) -> None:
        """Call `callback` on this node, then on every nested node depth-first."""
        callback(self)

    # --- Compile --- #

    def compile(
        self,
        name: str,
        compiler: Optional[Compiler] = None,
        return_schema_and_validator: bool = False,
    ) -> Union[Callable[[Any], None], CompiledSchema]:
        """
        Lock the node and compile it into a validator.

        Args:
            name: Name reported by `ValidationError` (distinguishes schemas).
            compiler: Object with `compile(schema) -> validate`. Defaults to a
                new `JsonSchemaCompiler` with default settings.
            return_schema_and_validator: Return a `CompiledSchema` pair
                instead of just the validator.

        Returns:
            `assert_valid(value)`, which raises `ValidationError` when the
            value does not match and returns None otherwise.
        """
        if not name:
            raise MissingNameError("name is required")
        if compiler is None:
            compiler = JsonSchemaCompiler()
        self.lock()
        json_schema = self.json_schema()
        validate = compiler.compile(self.json_schema())
        logger.debug("schema_compiled", name=name, kind=self.KIND.value)

        def assert_valid(value: Any) -> None:
            if not validate(value):
                errors = getattr(validate, "errors", None)
                logger.debug("validation_failed", name=name, errors=format_validation_errors(errors))
                raise ValidationError(name, value, errors, json_schema)

        if return_schema_and_validator:
            return CompiledSchema(json_schema=json_schema, assert_valid=assert_valid)
        return assert_valid

    def get_validator_and_json_schema(self, name: str, compiler: Optional[Compiler] = None) -> CompiledSchema:
        """Shorthand for `compile(name, compiler, return_schema_and_validator=True)`."""
        return self.compile(name, compiler, True)  # type: ignore[return-value]

    def __repr__(self) -> str:
        state = "locked" if self._locked else "unlocked"
        return f"<{type(self).__name__} {state} props={sorted(self._properties)}>"
