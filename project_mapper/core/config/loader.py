# File: project_mapper/core/config/loader.py

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from project_mapper.core.common.errors import ConfigError
from .schema import MapperConfig

logger = logging.getLogger(__name__)

# Backslashes directly before "${" are doubled, then "${" itself is escaped
_INTERPOLATION = re.compile(r"(\\*)\$\{")


def default_config() -> MapperConfig:
    return MapperConfig()


def escape_interpolations(value: Any) -> Any:
    """
    Config values are plain text: "${name}" in a description stays literal
    instead of being resolved as an OmegaConf interpolation.
    """
    if isinstance(value, str):
        return _INTERPOLATION.sub(lambda m: m.group(1) * 2 + "\\${", value)
    if isinstance(value, dict):
        return {key: escape_interpolations(item) for key, item in value.items()}
    if isinstance(value, list):
        return [escape_interpolations(item) for item in value]
    return value


def _build(data: Dict[str, Any]) -> MapperConfig:
    merged = OmegaConf.merge(OmegaConf.structured(MapperConfig), OmegaConf.create(escape_interpolations(data)))
    return OmegaConf.to_object(merged)


def config_from_dict(data: Dict[str, Any]) -> MapperConfig:
    """
    Validates a plain mapping against the schema.
    Missing keys take their defaults; unknown keys or wrong types raise ConfigError.
    """
    try:
        return _build(data)
    except OmegaConfBaseException as e:
        raise ConfigError(f"Invalid config: {e}") from e


def load_config(config_path) -> MapperConfig:
    """
    Loads a project config file (JSON or YAML, snake_case keys).
    """
    path = Path(config_path)
    if not path.is_file():
        raise ConfigError(f"Config file not found at {path}")

    try:
        raw = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
        config = _build(raw)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    logger.info(f"Configuration loaded from {path}")
    return config


def create_default_config(config_path, force: bool = False) -> Path:
    """
    Writes the default configuration as JSON.
    Refuses to overwrite an existing file unless force=True.
    """
    path = Path(config_path)
    if path.exists() and not force:
        raise ConfigError(f"Config file already exists at {path} (use force=True to overwrite)")

    container = OmegaConf.to_container(OmegaConf.structured(MapperConfig))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(container, indent=2) + "\n", encoding="utf-8")

    logger.info(f"Configuration file created at {path}")
    return path
