"""Filesystem operations used by the extension manager."""

import logging
import os
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


class FileSystem(ABC):
    """Capability for the disk side effects of install, uninstall and list.

    Mutating methods raise ``OSError`` on failure.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool: ...

    @abstractmethod
    def remove_dir_all(self, path: Path) -> None: ...

    @abstractmethod
    def remove_file(self, path: Path) -> None: ...

    @abstractmethod
    def copy(self, source: Path, destination: Path) -> None: ...

    @abstractmethod
    def walk(self, root: Path) -> Iterator[tuple[Path, str]]:
        """Yield ``(path, file_name)`` for every file below ``root``.

        Entries that cannot be read are skipped.
        """
        ...


class LocalFileSystem(FileSystem):
    """FileSystem backed by the real disk."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def remove_dir_all(self, path: Path) -> None:
        shutil.rmtree(path)

    def remove_file(self, path: Path) -> None:
        Path(path).unlink()

    def copy(self, source: Path, destination: Path) -> None:
        # Keeps the executable bit of the built binary
        shutil.copy(source, destination)

    def walk(self, root: Path) -> Iterator[tuple[Path, str]]:
        def skip(error: OSError) -> None:
            logger.debug("Skipping unreadable entry %s: %s", error.filename, error)

        for dirpath, _dirnames, filenames in os.walk(root, onerror=skip):
            for filename in filenames:
                yield Path(dirpath) / filename, filename
