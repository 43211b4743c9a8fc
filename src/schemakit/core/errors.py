#!/usr/bin/env python3
"""
Purpose:
    Exception hierarchy for SchemaKit.

    - SchemaKitError: base for everything raised by the library
    - SchemaError: misuse of the builder API (bad schema construction)
    - ValidationError: input data rejected by a compiled schema

    Callers branch on "bad schema usage" (SchemaError) vs. "bad input data"
    (ValidationError). Construction errors are raised immediately by the call
    that violates the invariant.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

logger = structlog.get_logger(__name__)


class SchemaKitError(Exception):
    """
    Base exception for SchemaKit.

    Args:
        message: Message carried by the exception.
        internal_details: Optional technical context. It is logged, never
            folded into the message.
    """

    def __init__(self, message: str, *, internal_details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.internal_details = internal_details

        if internal_details:
            logger.debug(
                "schemakit_error",
                error_type=self.__class__.__name__,
                message=message,
                internal_details=internal_details,
            )


# --- Construction errors --- #

class SchemaError(SchemaKitError):
    """Raised when the builder API is used in a way that breaks a schema invariant."""


class LockedSchemaError(SchemaError):
    """Mutation attempted on a locked node."""

    def __init__(self, *, internal_details: Optional[str] = None) -> None:
        super().__init__(
            "Schema is locked. Call copy then further modify the schema",
            internal_details=internal_details,
        )


class PropertyAlreadySetError(SchemaError):
    """A set-once property was set a second time."""


class DuplicatePropertyError(PropertyAlreadySetError):
    """An object property name is already attached."""


class DuplicatePatternError(DuplicatePropertyError):
    """An (anchored) pattern property is already attached."""


class ItemsAlreadySetError(PropertyAlreadySetError):
    """An array already has an item schema."""


class InvalidArgumentError(SchemaError, ValueError):
    """A setter received input of the wrong type or shape."""


class MissingNameError(InvalidArgumentError):
    """`compile` was called without a schema name."""


class RangeInversionError(InvalidArgumentError):
    """A min/max bound would invert the range or leave the safe integer range."""


class MissingValueSchemaError(SchemaError):
    """A map was finalized (locked, exported or copied) without a value schema."""


class UnsupportedOperationError(SchemaError):
    """The operation is not part of this node type's vocabulary."""


class CompilationError(SchemaError):
    """The validator compiler rejected the exported schema."""


class ShapeConflictError(SchemaError):
    """Two different shapes were registered under the same name."""


# --- Data errors --- #

class ValidationError(SchemaKitError):
    """
    Raised by a compiled validator when a value does not conform to the schema.

    Attributes:
        name: Caller-provided name of the compiled schema.
        value: The value that failed validation.
        errors: Diagnostics reported by the compiler (may be None).
        schema: The JSON Schema document the value was checked against.
    """

    def __init__(
        self,
        name: str,
        value: Any,
        errors: Optional[List[Dict[str, Any]]],
        schema: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(f"Validation Error: {name}")
        self.name = name
        self.value = value
        self.errors = errors
        self.schema = schema
