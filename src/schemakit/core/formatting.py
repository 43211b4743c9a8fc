#!/usr/bin/env python3
"""
Formatting helpers for SchemaKit.

- Stable, minimal one-line formatting for compiled-validator diagnostics.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence


# --- Public API --- #

def format_validation_errors(errors: Optional[Sequence[Dict[str, Any]]]) -> List[str]:
    """
    Return stable one-line messages from validator diagnostics.

    Example:
        items[1].name: 3 is not of type 'string'

    Diagnostics without a `path` are reported against `<root>`; entries
    without a `message` fall back to "Validation error". Non-dict entries
    (from third-party compilers) are rendered with `str()`.
    """
    if not errors:
        return []

    msgs: List[str] = []
    for err in errors:
        if not isinstance(err, dict):
            msgs.append(f"<root>: {err}")
            continue
        path = _format_error_loc(err.get("path", ()))
        msg = err.get("message", "Validation error")
        msgs.append(f"{path}: {msg}")
    return msgs


# --- Internals --- #

def _format_error_loc(loc: Iterable[Any]) -> str:
    """
    Convert an error location sequence into a dotted path with index suffixes.

    Examples:
        ('items', 1, 'name') -> "items[1].name"
        (0, 'items')         -> "[0].items"
        ()                   -> "<root>"
    """
    parts: List[str] = []
    for seg in loc:
        if isinstance(seg, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{seg}]"
            else:
                parts.append(f"[{seg}]")
        else:
            parts.append(str(seg))
    return ".".join(parts) if parts else "<root>"
