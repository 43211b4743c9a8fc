#!/usr/bin/env python3
"""
Purpose:
    Composition root: merges configuration, configures logging and builds
    the default validator compiler once, to be passed explicitly to
    `compile(...)`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from schemakit.core.compiler import Compiler, CompilerSettings, JsonSchemaCompiler
from schemakit.core.config import load_config
from schemakit.core.errors import InvalidArgumentError
from schemakit.core.observability import configure_logging


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and the shared compiler."""
    config: Dict[str, Any]
    compiler: Compiler


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    compiler: Optional[Compiler] = None,
    configure_logs: bool = True,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If None, `load_config()` is used.
        compiler:
            Optional compiler override. Defaults to a `JsonSchemaCompiler`
            built from `config['compiler']`.
        configure_logs:
            If True, applies `config['logging']` via `configure_logging`.

    Returns:
        AppContext: immutable bundle of config and compiler.
    """
    cfg = config if config is not None else load_config()

    if configure_logs:
        log_cfg = cfg.get("logging", {})
        configure_logging(log_cfg.get("level", "INFO"), json_format=bool(log_cfg.get("json", False)))

    if compiler is None:
        try:
            settings = CompilerSettings(**cfg.get("compiler", {}))
        except PydanticValidationError as e:
            raise InvalidArgumentError(
                "Invalid 'compiler' configuration",
                internal_details=str(e),
            ) from e
        compiler = JsonSchemaCompiler(settings)

    return AppContext(config=cfg, compiler=compiler)
