#!/usr/bin/env python3
"""
SchemaKit configuration loader.
"""

import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Final, Optional

from schemakit.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "compiler": {"all_errors": True, "use_defaults": True, "check_formats": False},
    "logging": {"level": "INFO", "json": False},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "schemakit" / "config.json"
PROJECT_CONFIG_NAME: Final[str] = "schemakit.json"

# env var -> key under config["compiler"]
_COMPILER_ENV_FLAGS: Final[Dict[str, str]] = {
    "SCHEMAKIT_ALL_ERRORS": "all_errors",
    "SCHEMAKIT_USE_DEFAULTS": "use_defaults",
    "SCHEMAKIT_CHECK_FORMATS": "check_formats",
}

_TRUE_VALUES: Final[frozenset] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset] = frozenset({"0", "false", "no", "off"})


# --- Public API --- #

def load_config(
    *,
    global_path: Optional[Path] = None,
    project_path: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Load SchemaKit configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/schemakit/config.json)
        3. Project config (./schemakit.json)
        4. Environment overrides:
           - SCHEMAKIT_LOG_LEVEL
           - SCHEMAKIT_ALL_ERRORS, SCHEMAKIT_USE_DEFAULTS, SCHEMAKIT_CHECK_FORMATS
             (1/0, true/false, yes/no, on/off)

    Returns:
        A merged configuration dictionary.

    Raises:
        ValueError: a config file holds invalid JSON, or a boolean env var
            has an unrecognized value.
    """
    # 1) start with defaults
    config = deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(global_path or GLOBAL_CONFIG_PATH))

    # 3) project config
    config = merge_dicts(config, load_json_file(project_path or Path.cwd() / PROJECT_CONFIG_NAME))

    # 4) environment overrides
    log_level_env = os.getenv("SCHEMAKIT_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    for env_name, key in _COMPILER_ENV_FLAGS.items():
        raw = os.getenv(env_name)
        if raw:
            config.setdefault("compiler", {})[key] = _parse_bool_env(env_name, raw)

    return config


# --- Internals --- #

def _parse_bool_env(name: str, value: str) -> bool:
    """
    Parse a boolean env var.

    Example:
        "Yes" -> True, "off" -> False, "maybe" -> ValueError
    """
    text = value.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of 1/0, true/false, yes/no, on/off; got {value!r}")
