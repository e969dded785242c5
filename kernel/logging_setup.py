"""Process-wide logging setup."""

import logging

from kernel.config import LoggingConfig


def configure_logging(config: LoggingConfig, verbose: bool = False) -> None:
    """Configure the root logger once per process.

    Args:
        config: Logging section of the configuration.
        verbose: Force DEBUG regardless of the configured level.
    """
    level = logging.DEBUG if verbose else getattr(logging, config.level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=config.format, force=True)
