#!/usr/bin/env python3
"""
Purpose:
    Pydantic models for the structural shape format: one `Shape` per named
    entry in a shape registry, with `ShapeMember` references between them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ShapeType = Literal[
    "structure", "list", "map", "string", "blob",
    "integer", "long", "double", "float", "boolean",
]


class ShapeMember(BaseModel):
    """Reference from a shape to another named shape."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    shape: str = Field(..., description="Name of the referenced shape.")
    location_name: Optional[str] = Field(
        default=None,
        alias="locationName",
        description="Wire name of the member (the declared property name).",
    )
    location: Optional[str] = Field(default=None, description="e.g. header, querystring.")
    documentation: Optional[str] = Field(default=None, description="Referenced node's description.")


class Shape(BaseModel):
    """
    One shape descriptor.

    Only the fields relevant to `type` are populated:
      - structure: members, required
      - list:      member
      - map:       key, value
      - string:    pattern, enum
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: ShapeType
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    members: Optional[Dict[str, ShapeMember]] = None
    required: Optional[List[str]] = None
    member: Optional[ShapeMember] = None
    key: Optional[ShapeMember] = None
    value: Optional[ShapeMember] = None
    pattern: Optional[str] = None
    enum: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form: wire aliases, unset fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)
