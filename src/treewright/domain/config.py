from __future__ import annotations

"""
Configuration Domain Management.

Dict-based runtime settings: defaults, JSON persistence in the user data
directory and schema validation with type coercion. Invalid values are
replaced by defaults and reported as warnings unless strict mode is on.
"""

import codecs
import json
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from treewright.domain.constants import DEFAULT_ENCODING
from treewright.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_default_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "encoding": DEFAULT_ENCODING,
        "log_level": "INFO",
        "log_file": None,
        "dry_run": False,
        "json_output": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file, merged over the defaults.

    A missing file silently yields the defaults; an unreadable or malformed
    one is logged and also yields the defaults.

    Args:
        path: Config file location. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: Raw (unvalidated) configuration.
    """
    path = path or get_default_config_path()
    config = get_default_config()

    if not os.path.exists(path):
        logger.debug(f"No config file at {path}; using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read config file {path}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file {path} does not hold a JSON object. Using defaults.")
        return config

    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist settings as JSON, creating the parent directory if needed.

    Returns:
        bool: True on success.
    """
    path = path or get_default_config_path()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2, ensure_ascii=False)
        return True
    except OSError as e:
        logger.error(f"Failed to save config file {path}: {e}")
        return False


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------
def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise instead of falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on an unknown encoding or log level.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    merged["encoding"] = _as_str(merged.get("encoding"), defaults["encoding"], "encoding", warnings, strict)
    merged["log_level"] = _as_str(merged.get("log_level"), defaults["log_level"], "log_level", warnings, strict)
    merged["dry_run"] = _as_bool(merged.get("dry_run"), False, "dry_run", warnings, strict)
    merged["json_output"] = _as_bool(merged.get("json_output"), False, "json_output", warnings, strict)

    log_file = merged.get("log_file")
    merged["log_file"] = _as_str(log_file, "", "log_file", warnings, strict) or None

    merged["encoding"] = _normalize_encoding(merged["encoding"], warnings, strict)
    merged["log_level"] = _normalize_log_level(merged["log_level"], warnings, strict)

    unknown = sorted(set(merged) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown config key '{key}' ignored.")
        merged.pop(key)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------
def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce 0/1 and yes/no style values into booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _normalize_encoding(encoding: str, warnings: List[str], strict: bool) -> str:
    try:
        return codecs.lookup(encoding).name
    except LookupError:
        msg = f"Unknown encoding '{encoding}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{DEFAULT_ENCODING}'.")
        return DEFAULT_ENCODING


def _normalize_log_level(level: str, warnings: List[str], strict: bool) -> str:
    upper = level.upper()
    if upper == "WARN":
        upper = "WARNING"
    if upper in _LOG_LEVELS:
        return upper

    msg = f"Unknown log level '{level}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using 'INFO'.")
    return "INFO"
