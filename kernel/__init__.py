"""Process-level collaborators: configuration, folders and logging."""

from kernel.config import Config, ConfigError, get_config, load_config, reload_config
from kernel.folder import Folder
from kernel.logging_setup import configure_logging

__all__ = [
    "Config",
    "ConfigError",
    "Folder",
    "configure_logging",
    "get_config",
    "load_config",
    "reload_config",
]
