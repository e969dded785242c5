"""Install, uninstall and list just extensions.

Extensions are standalone binaries named ``just-<name>`` stored in the
folder's ``bin_path``. Installing clones a GitHub repository, builds it with
cargo in release mode and copies the resulting binary into place.
"""

from __future__ import annotations

import logging
from pathlib import Path

from extensions.errors import BuildError, ExtensionIOError, FetchError
from extensions.naming import (
    EXE_SUFFIX,
    canonicalize,
    is_extension_binary,
    parse_repository_name,
    platform_executable_name,
)
from kernel.config import ToolchainConfig
from kernel.folder import Folder
from tools.command_runner import CommandRunner, SubprocessRunner
from tools.filesystem import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)


class ExtensionManager:
    """Locate, install and remove extension binaries.

    Example:
        >>> manager = ExtensionManager(Folder.from_config())
        >>> manager.install("https://github.com/owner/ext")
        >>> manager.is_installed("ext")
        True
        >>> manager.uninstall("ext")
    """

    def __init__(
        self,
        folder: Folder,
        runner: CommandRunner | None = None,
        fs: FileSystem | None = None,
        toolchain: ToolchainConfig | None = None,
        work_root: Path | None = None,
    ):
        """Initialize the manager.

        Args:
            folder: Directory layout providing ``bin_path``.
            runner: Runs git and cargo (default: subprocess).
            fs: Disk access (default: the local filesystem).
            toolchain: Program names for git and cargo.
            work_root: Parent of the temporary clone (default: current directory
                at install time).
        """
        self.bin_path = folder.bin_path
        self.runner = runner or SubprocessRunner()
        self.fs = fs or LocalFileSystem()
        self.toolchain = toolchain or ToolchainConfig()
        self.work_root = work_root

    def resolve_path(self, name: str) -> Path:
        """Return where the binary for ``name`` lives, installed or not."""
        exe_name = platform_executable_name(canonicalize(name))
        return self.bin_path / exe_name

    def locate(self, name: str) -> Path | None:
        """Return the binary path for ``name`` if it exists on disk."""
        bin_path = self.resolve_path(name)
        if self.fs.exists(bin_path):
            return bin_path
        return None

    def is_installed(self, name: str) -> bool:
        return self.locate(name) is not None

    def list_installed(self) -> list[str]:
        """List installed extension file names.

        Walks ``bin_path`` recursively. Names come back in traversal order;
        sort them if you need a stable order.

        Returns:
            File names (not paths) matching ``just-*<suffix>``.
        """
        return [
            file_name
            for _path, file_name in self.fs.walk(self.bin_path)
            if is_extension_binary(file_name)
        ]

    def install(self, url: str) -> Path:
        """Clone, build and install an extension from a GitHub URL.

        The repository is cloned to ``<work_root>/<repo>``, which is removed
        first if a previous attempt left it behind. A failed build leaves the
        clone in place for inspection.

        Args:
            url: Repository URL, e.g. ``https://github.com/owner/repo``.

        Returns:
            Path of the installed binary.

        Raises:
            InvalidUrlError, UnsupportedProviderError, MissingRepositoryNameError:
                If the URL is rejected.
            FetchError: If git clone fails.
            BuildError: If cargo build fails.
            ExtensionIOError: If removing the clone or copying the binary fails.
        """
        repo = parse_repository_name(url)
        work_root = self.work_root or Path.cwd()
        repo_path = work_root / repo
        cargo_path = repo_path / "Cargo.toml"

        # The clone is removed recursively, so it must stay inside work_root
        if repo_path.parent != work_root:
            raise ExtensionIOError(f"Refusing to use {repo_path} as working directory")

        if self.fs.exists(repo_path):
            logger.debug("Remove existing %s", repo_path)
            try:
                self.fs.remove_dir_all(repo_path)
            except OSError as e:
                raise ExtensionIOError(f"Failed to remove {repo_path}: {e}") from e

        logger.debug("Clone %s from git", url)
        result = self.runner.run(self.toolchain.git, ["clone", url, str(repo_path)])
        if not result:
            logger.warning("Clone of %s failed: %s", url, result.error)
            raise FetchError(f"Failed to clone {url}: {result.error}")

        logger.debug("Build %s with cargo", cargo_path)
        result = self.runner.run(
            self.toolchain.cargo,
            ["build", "--release", "--manifest-path", str(cargo_path)],
        )
        if not result:
            logger.warning("Build of %s failed, leaving %s in place", repo, repo_path)
            raise BuildError(f"Failed to build {repo}: {result.error}")

        target_path = repo_path / "target" / "release" / f"{repo}{EXE_SUFFIX}"
        bin_path = self.resolve_path(repo)

        logger.debug("Copy %s into %s", target_path, bin_path)
        try:
            self.fs.copy(target_path, bin_path)
        except OSError as e:
            raise ExtensionIOError(f"Failed to copy {target_path} to {bin_path}: {e}") from e

        try:
            self.fs.remove_dir_all(repo_path)
        except OSError as e:
            raise ExtensionIOError(
                f"Installed {bin_path} but failed to remove {repo_path}: {e}"
            ) from e

        return bin_path

    def uninstall(self, name: str) -> None:
        """Remove an installed extension.

        Uninstalling an extension that is not installed does nothing.

        Raises:
            ExtensionIOError: If the binary cannot be deleted.
        """
        path = self.locate(name)
        if path is None:
            return

        logger.debug("Remove %s", path)
        try:
            self.fs.remove_file(path)
        except OSError as e:
            raise ExtensionIOError(f"Failed to remove {path}: {e}") from e
