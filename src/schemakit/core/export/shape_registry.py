#!/usr/bin/env python3
"""
Purpose:
    Implements ShapeRegistry, the default container the shape exporter
    registers named shapes into.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from schemakit.core.annotated_types import SHAPE_NAME_ADAPTER
from schemakit.core.errors import InvalidArgumentError, ShapeConflictError


class ShapeRegistry:
    """
    Flat mapping of shape name -> shape dict.

    Re-adding an identical shape under an existing name is a no-op; adding a
    different shape under that name raises ShapeConflictError.
    """

    def __init__(self) -> None:
        self._shapes: Dict[str, Dict[str, Any]] = {}

    def add_shape(self, name: str, shape: Dict[str, Any]) -> None:
        try:
            name = SHAPE_NAME_ADAPTER.validate_python(name)
        except PydanticValidationError as e:
            raise InvalidArgumentError(
                f"Invalid shape name {name!r}",
                internal_details=str(e),
            ) from e
        existing = self._shapes.get(name)
        if existing is not None and existing != shape:
            raise ShapeConflictError(f"Shape {name} is already registered with a different definition")
        self._shapes[name] = deepcopy(shape)

    # --- Query API --- #

    def get(self, name: str) -> Optional[Dict[str, Any]]:
        """Return a copy of the named shape, or None."""
        shape = self._shapes.get(name)
        return deepcopy(shape) if shape is not None else None

    def require(self, name: str) -> Dict[str, Any]:
        """Return the named shape or raise LookupError if not registered."""
        shape = self.get(name)
        if shape is None:
            raise LookupError(f"Shape {name!r} not found")
        return shape

    def names(self) -> List[str]:
        """Sorted names of registered shapes."""
        return sorted(self._shapes.keys())

    def shapes(self) -> Dict[str, Dict[str, Any]]:
        """Copy of the whole registry."""
        return deepcopy(self._shapes)

    def __contains__(self, name: object) -> bool:
        return name in self._shapes

    def __len__(self) -> int:
        return len(self._shapes)
