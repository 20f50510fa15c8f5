"""
RLEVECTOR Configuration Loader
==============================

Load tolerance and display settings from rlevector.yaml.

Usage:
    from rlevector.config import load_config, get_vector_config

    config = load_config('exact')          # merged dict
    vc = get_vector_config()               # cached VectorConfig
    eq = vc.tolerance                      # Tolerance(rtol, atol)
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rlevector.core.numeric import Tolerance, DEFAULT_RTOL, DEFAULT_ATOL
from rlevector.validation.errors import ConfigError


logger = logging.getLogger(__name__)


# Default config path (can be overridden with RLEVECTOR_CONFIG_DIR)
CONFIG_PATH = Path(__file__).parent.parent.parent / 'config'
CONFIG_FILE = 'rlevector.yaml'

ENV_CONFIG_DIR = 'RLEVECTOR_CONFIG_DIR'
ENV_PROFILE = 'RLEVECTOR_PROFILE'


def get_config_path() -> Path:
    """Get config directory path."""
    candidates = []
    env_dir = os.environ.get(ENV_CONFIG_DIR)
    if env_dir:
        candidates.append(Path(env_dir))
    candidates.extend([
        CONFIG_PATH,
        Path('config'),
    ])

    for path in candidates:
        if (path / CONFIG_FILE).exists():
            return path

    return Path('config')


def get_default_config() -> Dict[str, Any]:
    """Built-in defaults, used when no rlevector.yaml is found."""
    return {
        'tolerance': {
            'rtol': DEFAULT_RTOL,
            'atol': DEFAULT_ATOL,
        },
        'display': {
            'float_format': '{:.6g}',
            'max_runs': 50,
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = {key: dict(value) if isinstance(value, dict) else value
              for key, value in base.items()}
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def _section(config: Dict[str, Any], key: str, source: Path) -> Dict[str, Any]:
    value = config.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' in {source} must be a mapping, got {type(value).__name__}")
    return value


def load_config(profile: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from rlevector.yaml.

    Args:
        profile: Profile name (e.g., 'exact', 'loose').
                 If None, RLEVECTOR_PROFILE is consulted; if that is unset
                 too, defaults only.

    Returns:
        Configuration dict with 'tolerance' and 'display' sections.

    Raises:
        ConfigError: unknown profile or malformed file
    """
    if profile is None:
        profile = os.environ.get(ENV_PROFILE) or None

    config_file = get_config_path() / CONFIG_FILE
    builtin = get_default_config()

    if not config_file.exists():
        logger.debug("No %s found at %s, using built-in defaults", CONFIG_FILE, config_file)
        if profile:
            raise ConfigError(f"profile '{profile}' requested but no {CONFIG_FILE} was found")
        return builtin

    with open(config_file) as f:
        all_config = yaml.safe_load(f) or {}

    if not isinstance(all_config, dict):
        raise ConfigError(f"{config_file} must contain a mapping at top level")

    merged = _merge(builtin, _section(all_config, 'defaults', config_file))

    if profile:
        profiles = _section(all_config, 'profiles', config_file)
        if profile not in profiles:
            raise ConfigError(
                f"unknown profile '{profile}' (available: {sorted(profiles)})"
            )
        merged = _merge(merged, _section(profiles, profile, config_file))

    logger.debug("Loaded config from %s (profile=%s)", config_file, profile)
    return merged


# =============================================================================
# SCHEMA
# =============================================================================

class ToleranceSettings(BaseModel):
    """Element equality settings (tolerance section)."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    rtol: float = Field(default=DEFAULT_RTOL, ge=0, description="Relative tolerance for inexact values")
    atol: float = Field(default=DEFAULT_ATOL, ge=0, description="Absolute tolerance for inexact values")


class DisplaySettings(BaseModel):
    """repr settings (display section)."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    float_format: str = Field(default='{:.6g}', description="Format string for inexact run values")
    max_runs: int = Field(default=50, ge=0, description="Runs shown before truncating the repr")


class VectorConfig(BaseModel):
    """Resolved settings shared by all vectors."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tolerance_settings: ToleranceSettings = Field(default_factory=ToleranceSettings, alias='tolerance')
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'VectorConfig':
        try:
            return cls.model_validate(config)
        except ValidationError as e:
            raise ConfigError(f"malformed configuration: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    @property
    def rtol(self) -> float:
        return self.tolerance_settings.rtol

    @property
    def atol(self) -> float:
        return self.tolerance_settings.atol

    @property
    def float_format(self) -> str:
        return self.display.float_format

    @property
    def max_runs(self) -> int:
        return self.display.max_runs

    @property
    def tolerance(self) -> Tolerance:
        return Tolerance(rtol=self.rtol, atol=self.atol)


@lru_cache(maxsize=None)
def get_vector_config(profile: Optional[str] = None) -> VectorConfig:
    """Cached VectorConfig for a profile."""
    return VectorConfig.from_dict(load_config(profile))


def clear_config_cache() -> None:
    """Forget cached configs (after editing rlevector.yaml or the environment)."""
    get_vector_config.cache_clear()
