#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as argument checks, pattern
    anchoring, identifier derivation, dictionary merge, and file I/O
    utilities for SchemaKit.
"""

import json
import math
import re
from pathlib import Path
from typing import Any, Dict, Union

from schemakit.core.constants import DEFAULT_TEXT_ENCODING, STRING_ID_SPLIT_RE


# --- Validation Helpers --- #

def is_integer(value: Any) -> bool:
    """Return True for ints (bools are rejected even though they subclass int)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    """Return True for finite ints/floats (bools, NaN and infinities are rejected)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # ints are always finite; math.isfinite overflows on very large ones
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def is_string_sequence(value: Any) -> bool:
    """Return True for a list/tuple whose elements are all strings."""
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


# --- Pattern & Identifier Helpers --- #

def pattern_source(pattern: Union[str, re.Pattern]) -> Any:
    """Return the source text of a compiled regex, or the value unchanged."""
    if isinstance(pattern, re.Pattern):
        return pattern.pattern
    return pattern


def anchor_pattern(pattern: str) -> str:
    """
    Anchor a regex so it matches the whole string rather than a substring.

    Examples:
        "abc"   -> "^abc$"
        "^abc"  -> "^abc$"
        "^abc$" -> "^abc$"
    """
    anchored = pattern
    if not pattern.startswith("^"):
        anchored = "^" + anchored
    if not pattern.endswith("$"):
        anchored += "$"
    return anchored


def to_string_id(text: str) -> str:
    """
    Strip non-alphanumeric characters and capitalize the character following
    each of them (upper camel case).

    Examples:
        "user-account_id" -> "UserAccountId"
        "myShape"         -> "MyShape"
        ""                -> ""
    """
    if not text:
        return text
    return "".join(part[:1].upper() + part[1:] for part in STRING_ID_SPLIT_RE.split(text))


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
