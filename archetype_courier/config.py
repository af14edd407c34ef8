"""
Archetype Courier Configuration

This module provides configuration management for the resolvers.
Includes default configuration, file and environment-based settings, and
validation.
"""

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .exceptions.errors import ConfigurationError


def _as_bool(value: str) -> bool:
    return value.lower() in ["true", "1", "yes"]


def _as_indent(value: str) -> Optional[int]:
    if value.lower() in ["", "none", "null"]:
        return None
    return int(value)


@dataclass
class CourierConfig:
    """Main configuration class for the composite resolvers"""

    # Editor settings
    editor_alias: str = "Imulus.Archetype"
    prevalue_alias: str = "archetypeConfig"
    dependency_provider_kind: str = "dataType"

    # Serialization
    json_indent: Optional[int] = 2

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(message)s"
    log_json: bool = False

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)


def get_default_config() -> CourierConfig:
    """Get default configuration"""
    return CourierConfig()


def load_config_from_file(config_path: Union[str, Path]) -> CourierConfig:
    """
    Load configuration from a JSON or YAML file

    Args:
        config_path: Path to configuration file

    Returns:
        CourierConfig instance
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        if config_path.suffix.lower() in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif config_path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported config file format: {config_path.suffix}"
            )

    return _config_from_dict(data or {})


def load_config_from_env() -> CourierConfig:
    """
    Load configuration from environment variables

    Environment variables are prefixed with COURIER_
    For example: COURIER_EDITOR_ALIAS=My.Archetype, COURIER_LOG_LEVEL=DEBUG

    Returns:
        CourierConfig instance
    """
    config = get_default_config()

    env_mappings = {
        "COURIER_EDITOR_ALIAS": ("editor_alias", str),
        "COURIER_PREVALUE_ALIAS": ("prevalue_alias", str),
        "COURIER_DEPENDENCY_PROVIDER_KIND": ("dependency_provider_kind", str),
        "COURIER_JSON_INDENT": ("json_indent", _as_indent),
        "COURIER_LOG_LEVEL": ("log_level", str),
        "COURIER_LOG_FORMAT": ("log_format", str),
        "COURIER_LOG_JSON": ("log_json", _as_bool),
    }

    for env_var, (attr_name, converter) in env_mappings.items():
        value = os.getenv(env_var)
        if value is not None:
            try:
                setattr(config, attr_name, converter(value))
            except (ValueError, TypeError) as e:
                raise ConfigurationError(
                    f"Invalid value for {env_var}: {value}. Error: {e}"
                )

    return config


def merge_configs(
    base_config: CourierConfig, override_config: Dict[str, Any]
) -> CourierConfig:
    """
    Merge override values into a CourierConfig instance

    Args:
        base_config: Base configuration
        override_config: Override values as dictionary

    Returns:
        Merged CourierConfig instance
    """
    merged = _deep_merge(asdict(base_config), override_config)
    return _config_from_dict(merged)


def validate_config(config: CourierConfig) -> List[str]:
    """
    Validate configuration and return list of issues

    Args:
        config: Configuration to validate

    Returns:
        List of validation error messages (empty if valid)
    """
    issues = []

    if not config.editor_alias:
        issues.append("editor_alias cannot be empty")

    if not config.prevalue_alias:
        issues.append("prevalue_alias cannot be empty")

    if not config.dependency_provider_kind:
        issues.append("dependency_provider_kind cannot be empty")

    if config.json_indent is not None and config.json_indent < 0:
        issues.append("json_indent cannot be negative")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.log_level.upper() not in valid_log_levels:
        issues.append(
            f"Invalid log_level: {config.log_level}. Must be one of {valid_log_levels}"
        )

    return issues


def _config_from_dict(data: Dict[str, Any]) -> CourierConfig:
    """Create CourierConfig from dictionary"""
    known = CourierConfig.__dataclass_fields__
    unknown = sorted(key for key in data if key not in known)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            {"unknown": unknown},
        )
    return CourierConfig(**data)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries"""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
