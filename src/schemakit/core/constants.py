#!/usr/bin/env python3
"""
Core constants used across SchemaKit.

- JSON Schema: the draft marker written at the root of every exported document.
- Integer ranges: fixed signed 32-bit and 64-bit bounds for the safe-range helpers.
- Media: the closed set of content encodings a media node accepts.
- File handling: default text encoding for configuration files.
- Regular expressions: compiled patterns used by normalizers.
"""

import re
from typing import Final

# --- JSON Schema constants --- #

# Written under "$schema" at the root of every exported JSON Schema document
JSON_SCHEMA_DRAFT_URI: Final[str] = "http://json-schema.org/draft-07/schema#"

# Pattern used for map keys when no key schema (or no key pattern) is given
DEFAULT_KEY_PATTERN: Final[str] = ".*"


# --- Integer safe ranges --- #

INT32_MIN: Final[int] = -(2 ** 31)
INT32_MAX: Final[int] = 2 ** 31 - 1
INT64_MIN: Final[int] = -(2 ** 63)
INT64_MAX: Final[int] = 2 ** 63 - 1


# --- Media --- #

MEDIA_ENCODINGS: Final[frozenset[str]] = frozenset({"binary", "base64", "utf-8"})


# --- Files --- #

DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Regular Expressions --- #
# Separators dropped when deriving shape names ("user-id" -> "UserId")
STRING_ID_SPLIT_RE: re.Pattern[str] = re.compile(r"[^a-zA-Z0-9]")

# Valid derived shape names: letters and digits only
SHAPE_NAME_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[A-Za-z0-9]*$")


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    if not (INT64_MIN < INT32_MIN < 0 < INT32_MAX < INT64_MAX):
        raise RuntimeError("Integer safe ranges must nest: int64 must contain int32")
    if not JSON_SCHEMA_DRAFT_URI.endswith("#"):
        raise RuntimeError(f"JSON_SCHEMA_DRAFT_URI must end with '#', got {JSON_SCHEMA_DRAFT_URI!r}")

validate_constants()
