"""Directory layout for installed extensions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from kernel.config import Config, get_config

DEFAULT_BIN_DIR = Path.home() / ".just" / "bin"


@dataclass(frozen=True)
class Folder:
    """Locations owned by just-ext.

    Attributes:
        bin_path: Root directory of all extension binaries.
    """

    bin_path: Path

    @classmethod
    def from_config(cls, config: Config | None = None, create: bool = True) -> Folder:
        """Build the folder layout from configuration.

        Args:
            config: Configuration (default: the global config).
            create: Create ``bin_path`` if it does not exist.

        Returns:
            Folder with an absolute ``bin_path``.
        """
        config = config or get_config()
        bin_dir = config.extensions.bin_dir
        bin_path = Path(bin_dir).expanduser() if bin_dir else DEFAULT_BIN_DIR
        bin_path = bin_path.resolve()

        if create:
            bin_path.mkdir(parents=True, exist_ok=True)

        return cls(bin_path=bin_path)
