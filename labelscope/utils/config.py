"""
Configuration management utilities.

This module provides functions to load and manage configuration from YAML files
and to set up logging for the command-line scripts.

Functions:
    load_config: Load configuration from YAML file
    save_config: Save configuration to YAML file
    merge_configs: Merge multiple configurations
    get_config_value: Read a nested value with dot notation
    validate_config: Check required sections and value ranges
    setup_logging: Configure the root logger from the configuration
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "format": LOG_FORMAT,
    },
    "evaluation": {
        "threshold": 0.5,
        "metrics": None,
    },
    "output": {
        "results_dir": "results",
    },
    "datasets": {},
}

_LABEL_RULES = ("label_indices", "label_names", "label_amount", "label_file", "relation")


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Values missing from the file are filled in from DEFAULT_CONFIG.

    Args:
        config_path (Union[str, Path]): Path to the YAML configuration file

    Returns:
        Dict[str, Any]: Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is malformed

    Example:
        >>> config = load_config('config.yaml')
        >>> print(config['evaluation']['threshold'])
        0.5
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML config: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    return merge_configs(DEFAULT_CONFIG, config)


def save_config(
    config: Dict[str, Any], save_path: Union[str, Path]
) -> None:
    """
    Save configuration dictionary to a YAML file.

    Args:
        config (Dict[str, Any]): Configuration dictionary to save
        save_path (Union[str, Path]): Path where to save the YAML file
    """
    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    with open(save_path, "w") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def merge_configs(
    base_config: Dict[str, Any], override_config: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Merge two configuration dictionaries, with override_config taking precedence.

    Performs deep merge - nested dictionaries are merged recursively. Neither
    input is modified.

    Args:
        base_config (Dict[str, Any]): Base configuration
        override_config (Dict[str, Any]): Configuration to override base with

    Returns:
        Dict[str, Any]: Merged configuration

    Example:
        >>> base = {'evaluation': {'threshold': 0.5, 'metrics': None}}
        >>> override = {'evaluation': {'threshold': 0.3}}
        >>> merge_configs(base, override)['evaluation']
        {'threshold': 0.3, 'metrics': None}
    """
    merged = copy.deepcopy(base_config)

    for key, value in override_config.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            # Recursive merge for nested dictionaries
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)

    return merged


def get_config_value(
    config: Dict[str, Any], key_path: str, default: Any = None
) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config (Dict[str, Any]): Configuration dictionary
        key_path (str): Dot-separated path to the value (e.g., 'evaluation.threshold')
        default (Any, optional): Default value if key not found. Defaults to None.

    Returns:
        Any: Configuration value or default

    Example:
        >>> config = {'logging': {'level': 'DEBUG'}}
        >>> get_config_value(config, 'logging.level')
        'DEBUG'
        >>> get_config_value(config, 'logging.missing_key', default=42)
        42
    """
    keys = key_path.split(".")
    value = config

    try:
        for key in keys:
            value = value[key]
        return value
    except (KeyError, TypeError):
        return default


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration to ensure all required fields are present.

    Args:
        config (Dict[str, Any]): Configuration dictionary to validate

    Raises:
        ValueError: If required configuration fields are missing or invalid
    """
    required_keys = ["logging", "evaluation", "output", "datasets"]

    for key in required_keys:
        if key not in config:
            raise ValueError(
                f"Missing required configuration section: {key}"
            )

    level = get_config_value(config, "logging.level", "INFO")
    if not isinstance(logging.getLevelName(str(level).upper()), int):
        raise ValueError(f"Unknown logging level: {level}")

    threshold = get_config_value(config, "evaluation.threshold", 0.5)
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ValueError(f"evaluation.threshold must be a number, got {threshold!r}")
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"evaluation.threshold must lie in [0, 1], got {threshold}")

    metrics = get_config_value(config, "evaluation.metrics")
    if metrics is not None and not isinstance(metrics, list):
        raise ValueError("evaluation.metrics must be a list of metric names or null")

    datasets = config.get("datasets") or {}
    if not isinstance(datasets, dict):
        raise ValueError("datasets must map dataset names to their settings")

    for name, entry in datasets.items():
        if not isinstance(entry, dict) or "path" not in entry:
            raise ValueError(f"Dataset '{name}' needs a 'path' entry")
        if not any(rule in entry for rule in _LABEL_RULES):
            raise ValueError(
                f"Dataset '{name}' must define one of: {', '.join(_LABEL_RULES)}"
            )


def setup_logging(
    config: Optional[Dict[str, Any]] = None, level: Optional[str] = None
) -> None:
    """
    Configure the root logger.

    Args:
        config (Optional[Dict[str, Any]]): Configuration with a 'logging' section
        level (Optional[str]): Level overriding the configured one (e.g. 'DEBUG')
    """
    config = config or DEFAULT_CONFIG
    level = level or get_config_value(config, "logging.level", "INFO")
    fmt = get_config_value(config, "logging.format", LOG_FORMAT)

    logging.basicConfig(level=str(level).upper(), format=fmt, force=True)
