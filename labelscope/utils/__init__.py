"""
Utilities package.

This package provides utility functions for:
- Configuration management and logging setup
- JSON export and text reports

Modules:
    config: Configuration loading and logging setup
    reporting: Serialization and formatted summaries
"""

from .config import (
    DEFAULT_CONFIG,
    load_config,
    save_config,
    merge_configs,
    get_config_value,
    validate_config,
    setup_logging,
)

from .reporting import (
    to_serializable,
    save_json,
    dataset_report,
    format_measures,
    format_metrics,
)

__all__ = [
    # Config
    'DEFAULT_CONFIG',
    'load_config',
    'save_config',
    'merge_configs',
    'get_config_value',
    'validate_config',
    'setup_logging',

    # Reporting
    'to_serializable',
    'save_json',
    'dataset_report',
    'format_measures',
    'format_metrics',
]
