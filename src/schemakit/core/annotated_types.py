#!/usr/bin/env python3
"""
Purpose:
    Provides reusable annotated types and normalization helpers for
    SchemaKit's Pydantic models, such as shape names.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, TypeAdapter

from schemakit.core.constants import SHAPE_NAME_ALLOWED_RE


# --- Normalizers --- #

def _normalize_shape_name(v: Any) -> str:
    """
    Normalize a shape name:
    - coerce to str
    - strip surrounding whitespace
    - validate via fullmatch against SHAPE_NAME_ALLOWED_RE (case preserved)
    """
    text = "" if v is None else str(v).strip()
    if not text:
        raise ValueError("Invalid shape name: must be a non-empty string")
    if not SHAPE_NAME_ALLOWED_RE.fullmatch(text):
        raise ValueError(
            f"Invalid shape name: {text!r}. Allowed pattern: {SHAPE_NAME_ALLOWED_RE.pattern!r}"
        )
    return text


# --- Reusable Annotated types --- #

ShapeName = Annotated[str, BeforeValidator(_normalize_shape_name)]

SHAPE_NAME_ADAPTER: TypeAdapter = TypeAdapter(ShapeName)
