"""Configuration loading for shuttle.

Config is stored in ~/.config/shuttle/config.json (or $SHUTTLE_CONFIG):

    {
        "matcher": "fuzzy",
        "http_timeout": 10.0,
        "providers": [
            {"type": "github", "organization": "my-org"},
            {"type": "jenkins", "endpoint": "https://ci.example.com"},
            {"type": "file", "path": "/tmp/urls"}
        ]
    }
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from shuttle.exceptions import ConfigurationError

from .constants import (
    DEFAULT_CACHE_FILE,
    DEFAULT_CONFIG_FILE,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_MATCHER,
    ENV_VAR_DEFINITIONS,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "matcher": DEFAULT_MATCHER,
    "http_timeout": DEFAULT_HTTP_TIMEOUT_SECONDS,
    "providers": [],
}


@dataclass
class ShuttleConfig:
    """Resolved configuration."""

    matcher: str = DEFAULT_MATCHER
    http_timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    providers: List[Dict[str, Any]] = field(default_factory=list)
    cache_path: Path = DEFAULT_CACHE_FILE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matcher": self.matcher,
            "http_timeout": self.http_timeout,
            "providers": self.providers,
        }


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS or value is None:
        return True, None

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error, setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_env_info() -> Dict[str, Dict[str, Any]]:
    """Describe all shuttle environment variables, masking sensitive values."""
    info = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = os.environ.get(name)
        is_valid, _ = validate_env_var(name, value)

        display_value = value
        if value and definition.get("sensitive"):
            display_value = value[:4] + "..." if len(value) > 4 else "***"

        info[name] = {
            "description": definition.get("description", ""),
            "value": display_value,
            "is_set": value is not None,
            "valid": is_valid,
        }
    return info


def get_config_path() -> Path:
    """Path of the configuration file, respecting $SHUTTLE_CONFIG."""
    override = get_env_var("SHUTTLE_CONFIG")
    return Path(override).expanduser() if override else DEFAULT_CONFIG_FILE


def get_cache_path() -> Path:
    """Path of the item cache snapshot, respecting $SHUTTLE_CACHE."""
    override = get_env_var("SHUTTLE_CACHE")
    return Path(override).expanduser() if override else DEFAULT_CACHE_FILE


def load_config(path: Optional[Path] = None) -> ShuttleConfig:
    """
    Load configuration from file.

    Missing keys fall back to defaults and a missing file yields the default
    configuration. $SHUTTLE_MATCHER overrides the configured matcher.

    Raises:
        ConfigurationError: If the file is not valid JSON or has bad values
    """
    path = path or get_config_path()
    data: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if path.exists():
        try:
            loaded = json.loads(path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(f"Cannot read config file: {e}", path=str(path)) from e
        if not isinstance(loaded, dict):
            raise ConfigurationError("Config file must contain a JSON object", path=str(path))
        data.update(loaded)
    else:
        logger.debug("No config file at %s, using defaults", path)

    matcher = get_env_var("SHUTTLE_MATCHER") or data["matcher"]

    providers = data["providers"]
    if not isinstance(providers, list) or not all(isinstance(p, dict) for p in providers):
        raise ConfigurationError("'providers' must be a list of objects", setting="providers")

    try:
        http_timeout = float(data["http_timeout"])
    except (TypeError, ValueError) as e:
        raise ConfigurationError("'http_timeout' must be a number", setting="http_timeout") from e

    return ShuttleConfig(
        matcher=str(matcher),
        http_timeout=http_timeout,
        providers=providers,
        cache_path=get_cache_path(),
    )


def save_config(config: ShuttleConfig, path: Optional[Path] = None) -> Path:
    """Write the configuration as JSON and return the path written."""
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2) + "\n")
    return path
