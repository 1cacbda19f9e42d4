"""
Application settings.

Settings are read from an (optional) YAML file, CLI-style overrides are merged on top ("log_level=DEBUG"),
and the result is validated by a pydantic model so the rest of the code only ever sees typed values.
"""

from pathlib import Path
from typing import Optional

from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pydantic import BaseModel, ValidationError, field_validator
from yaml import YAMLError

from src.core.exceptions import ConfigError
from src.core.shared_types import Side

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    log_level: str = "INFO"
    log_file: Optional[str] = None
    # loguru file sink options, only used when log_file is set
    log_rotation: str = "10 MB"
    log_retention: str = "1 week"
    # White opens unless told otherwise (puzzles, tests)
    first_to_move: Side = Side.WHITE

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level: {value!r}. Pick one from {','.join(LOG_LEVELS)}"
            )
        return level


def load_settings(
    config_path: Optional[str | Path] = None, overrides: Optional[list[str]] = None
) -> Settings:
    """Load settings from a YAML file (if given) with optional dot-list overrides.

    No file and no overrides simply gives the defaults.
    Anything that cannot be read or does not validate raises ConfigError.
    """
    config = OmegaConf.create({})

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            loaded = OmegaConf.load(config_path)
        except (OSError, YAMLError) as exc:
            raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
        if not isinstance(loaded, DictConfig):
            raise ConfigError(
                f"Config file {config_path} must hold a mapping of settings, got {type(loaded).__name__}"
            )
        config = _merge(config, loaded)

    if overrides:
        try:
            dotlist = OmegaConf.from_dotlist(overrides)
        except OmegaConfBaseException as exc:
            raise ConfigError(f"Cannot parse overrides {overrides}: {exc}") from exc
        config = _merge(config, dotlist)

    values = OmegaConf.to_container(config, resolve=True)
    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc


def _merge(base: DictConfig, other: DictConfig) -> DictConfig:
    try:
        return OmegaConf.merge(base, other)
    except (OmegaConfBaseException, TypeError) as exc:
        raise ConfigError(f"Cannot merge settings: {exc}") from exc
