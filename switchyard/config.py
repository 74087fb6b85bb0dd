# Switchyard CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parser configuration for Switchyard.

`ParserConfig` holds the knobs that change how an `OptionParser` treats a token
stream without changing the switch set itself:

- `skip_arguments`: ignore declared positional arguments entirely.
- `unknown_switches`: what to do with switch-shaped tokens that match nothing.
- `fill_defaults`: fill absent switches with their declared defaults.

Configurations can be built in code or loaded from a YAML or TOML file with
`load_config()`. Settings are read from a top-level `switchyard` table when the
file has one, otherwise from the whole document:

    # switchyard.toml
    [switchyard]
    unknown_switches = "trailing"
    fill_defaults = false
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from switchyard.exceptions import ConfigError
from switchyard.logger import logger


class UnknownSwitchPolicy(Enum):
    """
    How the parser handles a switch-shaped token that resolves to no switch.

    Members:
        PASSTHROUGH: Treat the token like any plain token. It fills the next
            positional argument or lands in the trailing tokens.
        TRAILING: Append the token to the trailing tokens as-is.
        DROP: Consume the token and discard it.
    """

    PASSTHROUGH = "passthrough"
    TRAILING = "trailing"
    DROP = "drop"

    @classmethod
    def _missing_(cls, value: object) -> UnknownSwitchPolicy:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class ParserConfig(BaseModel):
    """Runtime settings for an `OptionParser`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    skip_arguments: bool = False
    unknown_switches: UnknownSwitchPolicy = UnknownSwitchPolicy.PASSTHROUGH
    fill_defaults: bool = True

    @field_validator("unknown_switches", mode="before")
    @classmethod
    def validate_unknown_switches(cls, value: Any) -> UnknownSwitchPolicy:
        if isinstance(value, UnknownSwitchPolicy):
            return value
        return UnknownSwitchPolicy(value)


def load_config(file_path: Path | str) -> ParserConfig:
    """
    Load a `ParserConfig` from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        ParserConfig: The validated configuration.

    Raises:
        ConfigError: If the file is missing, has an unsupported format, or
            contains invalid settings.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError, UnicodeDecodeError, OSError) as error:
        raise ConfigError(f"Could not parse config file {path}: {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping of parser settings.\n"
            "Example:\n"
            "switchyard:\n"
            "  unknown_switches: trailing\n"
            "  fill_defaults: false"
        )

    settings = raw_config.get("switchyard", raw_config)
    if not isinstance(settings, dict):
        raise ConfigError("The 'switchyard' section must be a mapping of settings.")

    try:
        config = ParserConfig(**settings)
    except ValidationError as error:
        raise ConfigError(f"Invalid parser configuration in {path}: {error}") from error
    logger.debug("[Config] Loaded %s from %s", config, path)
    return config
