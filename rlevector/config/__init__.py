"""RLEVECTOR Configuration Module."""

from rlevector.config.loader import (
    CONFIG_PATH,
    DisplaySettings,
    ToleranceSettings,
    VectorConfig,
    get_config_path,
    get_default_config,
    load_config,
    get_vector_config,
    clear_config_cache,
)

__all__ = [
    'CONFIG_PATH',
    'DisplaySettings',
    'ToleranceSettings',
    'VectorConfig',
    'get_config_path',
    'get_default_config',
    'load_config',
    'get_vector_config',
    'clear_config_cache',
]
