"""Loading and saving ``EngineConfig`` as YAML."""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ..core_math.errors import ConfigError
from .schemas import EngineConfig

logger = logging.getLogger(__name__)


def load_config(path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """
    Read an ``EngineConfig`` from a YAML file.

    Settings may sit at the top level or under an ``engine:`` key. A missing
    file yields the defaults; unparsable or invalid content raises
    ``ConfigError``.
    """
    if path is None:
        return EngineConfig()
    path = Path(path)
    if not path.exists():
        logger.warning(f"Config file {path} not found, using defaults")
        return EngineConfig()

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    section = data.get('engine', data)
    if not isinstance(section, dict):
        raise ConfigError(f"'engine' section of {path} must be a mapping")

    try:
        config = EngineConfig(**section)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
    logger.info(f"Loaded configuration from {path}")
    return config


def save_config(config: EngineConfig, path: Union[str, Path]) -> Path:
    """Write ``config`` under an ``engine:`` key."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        yaml.safe_dump({'engine': config.model_dump()}, f, default_flow_style=False)
    return path
