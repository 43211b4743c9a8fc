#!/usr/bin/env python3
"""
Purpose:
    Scalar node variants: string, media, number, integer and boolean.
    Each variant validates its own min/max inputs; integers add the
    32/64-bit safe-range helpers.
"""
from __future__ import annotations

import re
from typing import Any, ClassVar, Optional, Sequence, Tuple, Union

from schemakit.core.constants import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN, MEDIA_ENCODINGS
from schemakit.core.errors import InvalidArgumentError, PropertyAlreadySetError, RangeInversionError
from schemakit.core.schema.base import BaseSchema
from schemakit.core.schema.node_kind import NodeKind
from schemakit.core.utils import anchor_pattern, is_finite_number, is_integer, pattern_source


# --- Strings --- #

class StringSchema(BaseSchema):
    KIND: ClassVar[NodeKind] = NodeKind.STRING

    def enum(self, valid_values: Sequence[str]) -> "StringSchema":
        """Restrict the string to `valid_values` (at least one string)."""
        if not isinstance(valid_values, (list, tuple)):
            raise InvalidArgumentError("Enum must be a list.")
        if len(valid_values) < 1:
            raise InvalidArgumentError("Enum must contain at least 1 value.")
        if not all(isinstance(v, str) for v in valid_values):
            raise InvalidArgumentError("Enum values must be strings.")
        return self._set_prop("enum", list(valid_values))

    def pattern(self, pattern: Union[str, re.Pattern]) -> "StringSchema":
        """
        Set the regex the whole string must match. Compiled patterns are
        accepted; the stored pattern is always anchored (`^...$`).
        """
        pattern = pattern_source(pattern)
        if not isinstance(pattern, str):
            raise InvalidArgumentError("Pattern must be a string")
        return self._set_prop("pattern", anchor_pattern(pattern))


class MediaSchema(StringSchema):
    """String carrying binary or encoded content."""

    KIND: ClassVar[NodeKind] = NodeKind.MEDIA

    def media_type(self, t: str) -> "MediaSchema":
        """Set `contentMediaType`, e.g. "image/png"."""
        if not isinstance(t, str) or not t:
            raise InvalidArgumentError("Media type must be a non-empty string")
        return self._set_prop("contentMediaType", t)

    def encoding(self, e: str) -> "MediaSchema":
        if e not in MEDIA_ENCODINGS:
            raise InvalidArgumentError(f"Encoding must be one of {sorted(MEDIA_ENCODINGS)}")
        return self._set_prop("contentEncoding", e)


# --- Numbers --- #

class NumberSchema(BaseSchema):
    KIND: ClassVar[NodeKind] = NodeKind.NUMBER

    def __init__(self) -> None:
        super().__init__()
        self._is_float = False

    @property
    def is_float(self) -> bool:
        return self._is_float

    def as_float(self) -> "NumberSchema":
        """Mark as single precision. Advisory only; no validation effect."""
        self._require_unlocked("as_float")
        self._is_float = True
        return self

    def copy(self) -> "NumberSchema":
        ret = super().copy()
        ret._is_float = self._is_float
        return ret

    def _validate_range_property(self, name: str, val: Any) -> None:
        if not is_finite_number(val):
            raise InvalidArgumentError(f"{name} must be a number")


class IntegerSchema(NumberSchema):
    KIND: ClassVar[NodeKind] = NodeKind.INTEGER

    # label -> (lower, upper)
    SAFE_RANGES: ClassVar[dict] = {
        "int32": (INT32_MIN, INT32_MAX),
        "int64": (INT64_MIN, INT64_MAX),
    }

    def __init__(self) -> None:
        super().__init__()
        self._safe_range: Optional[str] = None

    @property
    def safe_range(self) -> Optional[str]:
        """"int32", "int64" or None."""
        return self._safe_range

    def as_int32(self) -> "IntegerSchema":
        """Constrain to the signed 32-bit range, filling unset bounds."""
        return self._apply_safe_range("int32")

    def as_int64(self) -> "IntegerSchema":
        """Constrain to the signed 64-bit range, filling unset bounds."""
        return self._apply_safe_range("int64")

    def _apply_safe_range(self, label: str) -> "IntegerSchema":
        self._require_unlocked(f"as_{label}")
        if self._safe_range is not None:
            raise PropertyAlreadySetError(f"Safe range is already set to {self._safe_range}.")
        lower, upper = self.SAFE_RANGES[label]
        current_min = self.get_prop("minimum")
        current_max = self.get_prop("maximum")
        if current_max is not None and current_max > upper:
            raise RangeInversionError(f"maximum {current_max} exceeds the {label} range")
        if current_min is not None and current_min < lower:
            raise RangeInversionError(f"minimum {current_min} is below the {label} range")
        if current_min is None:
            self._set_prop("minimum", lower)
        if current_max is None:
            self._set_prop("maximum", upper)
        self._safe_range = label
        return self

    def _safe_bounds(self) -> Optional[Tuple[int, int]]:
        if self._safe_range is None:
            return None
        return self.SAFE_RANGES[self._safe_range]

    def _validate_range_property(self, name: str, val: Any) -> None:
        if not is_integer(val):
            raise InvalidArgumentError(f"{name} must be an integer")
        bounds = self._safe_bounds()
        if bounds is not None and not bounds[0] <= val <= bounds[1]:
            raise RangeInversionError(f"{name}={val} is outside the {self._safe_range} range")

    def copy(self) -> "IntegerSchema":
        ret = super().copy()
        ret._safe_range = self._safe_range
        return ret


# --- Booleans --- #

class BooleanSchema(BaseSchema):
    """True/false scalar. Has no bounds; min/max raise InvalidArgumentError."""

    KIND: ClassVar[NodeKind] = NodeKind.BOOLEAN
