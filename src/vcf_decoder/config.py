"""Configuration file support for vcf-decoder."""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

CONFIG_SECTION = "vcf_decoder"


@dataclass
class ParserConfig:
    """Configuration for VCF decoding."""

    strict: bool = True
    log_level: str = "WARNING"
    decode_breakends: bool = True


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


def validate_config(config_dict: dict[str, Any]) -> None:
    """Validate configuration values.

    Raises:
        ConfigValidationError: If any configuration value is invalid.
    """
    for key in ("strict", "decode_breakends"):
        if key in config_dict and not isinstance(config_dict[key], bool):
            raise ConfigValidationError(
                f"{key} must be a boolean, got {type(config_dict[key]).__name__}"
            )

    if "log_level" in config_dict:
        log_level = config_dict["log_level"]
        if not isinstance(log_level, str):
            raise ConfigValidationError(
                f"log_level must be a string, got {type(log_level).__name__}"
            )
        if log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"log_level must be one of {VALID_LOG_LEVELS}, got '{log_level}'"
            )


def load_config(config_path: Path, overrides: dict[str, Any] | None = None) -> ParserConfig:
    """Load configuration from a TOML file.

    Settings are read from the ``[vcf_decoder]`` table; unknown keys are
    ignored with a warning.

    Args:
        config_path: Path to the TOML configuration file.
        overrides: Optional dict of values to override loaded config.

    Returns:
        ParserConfig instance with loaded values.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ConfigValidationError: If any configuration value is invalid.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "rb") as f:
        toml_data = tomllib.load(f)

    config_dict = dict(toml_data.get(CONFIG_SECTION, {}))

    if overrides:
        config_dict.update(overrides)

    validate_config(config_dict)

    valid_fields = {"strict", "log_level", "decode_breakends"}
    unknown = sorted(set(config_dict) - valid_fields)
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

    filtered_config = {k: v for k, v in config_dict.items() if k in valid_fields}
    if "log_level" in filtered_config:
        filtered_config["log_level"] = filtered_config["log_level"].upper()

    return ParserConfig(**filtered_config)
