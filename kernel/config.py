"""Configuration management for just-ext.

Loads configuration from:
1. config.toml (defaults)
2. Environment variables (overrides)
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

CONFIG_FILE_NAME = "config.toml"


class ConfigError(Exception):
    """Raised when configuration cannot be read."""

    pass


@dataclass
class ExtensionsConfig:
    """Where extension binaries live."""

    # Binary directory (default: ~/.just/bin)
    bin_dir: str = ""


@dataclass
class ToolchainConfig:
    """External programs used to fetch and build extensions."""

    git: str = "git"
    cargo: str = "cargo"


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass
class Config:
    """Main configuration container."""

    extensions: ExtensionsConfig = field(default_factory=ExtensionsConfig)
    toolchain: ToolchainConfig = field(default_factory=ToolchainConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create Config from dictionary.

        Raises:
            ConfigError: If a section holds an unknown key.
        """
        try:
            return cls(
                extensions=ExtensionsConfig(**data.get("extensions", {})),
                toolchain=ToolchainConfig(**data.get("toolchain", {})),
                logging=LoggingConfig(**data.get("logging", {})),
            )
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


def find_config_file() -> Path | None:
    """Find config.toml in current or parent directories.

    Returns:
        Path to config.toml or None if not found.
    """
    current = Path.cwd()

    for directory in [current, *current.parents]:
        config_path = directory / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

    return None


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from file and environment.

    Args:
        config_path: Optional explicit path to config.toml

    Returns:
        Config object with merged settings.
    """
    config_data: dict[str, Any] = {}

    if config_path is None:
        config_path = find_config_file()

    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            with open(path, "rb") as f:
                try:
                    config_data = tomllib.load(f)
                except tomllib.TOMLDecodeError as e:
                    raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    env_overrides = {
        "extensions": {
            "bin_dir": os.getenv("JUST_EXT_BIN_DIR"),
        },
        "toolchain": {
            "git": os.getenv("JUST_EXT_GIT"),
            "cargo": os.getenv("JUST_EXT_CARGO"),
        },
        "logging": {
            "level": os.getenv("JUST_EXT_LOG_LEVEL"),
        },
    }

    # Merge env overrides (only non-None values)
    for section, values in env_overrides.items():
        if section not in config_data:
            config_data[section] = {}
        if not isinstance(config_data[section], dict):
            raise ConfigError(f"Invalid configuration: [{section}] must be a table")
        for key, value in values.items():
            if value is not None:
                config_data[section][key] = value

    return Config.from_dict(config_data)


# Global config instance (lazy loaded)
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config object (loaded once, cached).
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(config_path: Path | str | None = None) -> Config:
    """Force reload of configuration.

    Returns:
        Freshly loaded Config object.
    """
    global _config
    _config = load_config(config_path)
    return _config
