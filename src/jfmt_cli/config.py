import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from jfmt_linter.errors import ConfigError
from jfmt_linter.models import Config

from .converters import config_file_to_config
from .models import ConfigFile

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "jfmt.toml"


def find_config_path(start_dir: Path) -> Path | None:
    """Walk from start_dir up to the filesystem root looking for jfmt.toml"""
    start_dir = start_dir.resolve()
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def load_config_file(path: Path) -> Config:
    """Load and validate one config file. Never falls back to defaults."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"io error: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid toml: {e}") from e

    try:
        return config_file_to_config(ConfigFile.model_validate(data))
    except ValidationError as e:
        raise ConfigError(f"invalid config {path}: {e}") from e


def load_config(start_dir: Path | None = None) -> Config:
    """Resolve the configuration for this invocation, defaults if no file exists"""
    path = find_config_path(start_dir or Path.cwd())
    if path is None:
        logger.debug("No %s found, using defaults", CONFIG_FILE_NAME)
        return Config()
    logger.debug("Using config %s", path)
    return load_config_file(path)
