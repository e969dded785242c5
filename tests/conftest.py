"""Shared fixtures for just-ext tests."""

from pathlib import Path
from typing import Sequence

import pytest

from extensions import ExtensionManager
from extensions.naming import EXE_SUFFIX
from kernel import Folder
from tools.base import ToolResult
from tools.command_runner import CommandRunner
from tools.filesystem import LocalFileSystem


class FakeRunner(CommandRunner):
    """Stands in for git and cargo.

    ``git clone`` creates the destination with a Cargo.toml, ``cargo build``
    writes a fake release binary next to the manifest.
    """

    def __init__(self, fail_fetch=False, fail_build=False, produce_binary=True):
        self.fail_fetch = fail_fetch
        self.fail_build = fail_build
        self.produce_binary = produce_binary
        self.calls: list[tuple[str, list[str]]] = []
        self.clone_target_existed: bool | None = None

    def run(self, program: str, args: Sequence[str], cwd=None) -> ToolResult:
        args = list(args)
        self.calls.append((program, args))

        if program == "git":
            if self.fail_fetch:
                return ToolResult.failed("git exited with status 128", returncode=128)
            dest = Path(args[2])
            self.clone_target_existed = dest.exists()
            dest.mkdir(parents=True)
            (dest / "Cargo.toml").write_text("[package]\n")
            return ToolResult.ok(returncode=0)

        if program == "cargo":
            if self.fail_build:
                return ToolResult.failed("cargo exited with status 101", returncode=101)
            repo_dir = Path(args[args.index("--manifest-path") + 1]).parent
            if self.produce_binary:
                release = repo_dir / "target" / "release"
                release.mkdir(parents=True)
                (release / f"{repo_dir.name}{EXE_SUFFIX}").write_bytes(b"\x7fELF")
            return ToolResult.ok(returncode=0)

        return ToolResult.failed(f"Command not found: {program}")

    @property
    def programs(self) -> list[str]:
        return [program for program, _ in self.calls]


class FlakyFileSystem(LocalFileSystem):
    """Local filesystem that raises OSError for the named operations."""

    def __init__(self, failing: set[str]):
        self.failing = failing

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.failing:
            raise OSError(f"{operation} denied")

    def remove_dir_all(self, path):
        self._maybe_fail("remove_dir_all")
        super().remove_dir_all(path)

    def remove_file(self, path):
        self._maybe_fail("remove_file")
        super().remove_file(path)

    def copy(self, source, destination):
        self._maybe_fail("copy")
        super().copy(source, destination)


@pytest.fixture
def bin_dir(tmp_path):
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def work_root(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def folder(bin_dir):
    return Folder(bin_path=bin_dir)


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def manager(folder, runner, work_root):
    return ExtensionManager(folder, runner=runner, work_root=work_root)


@pytest.fixture
def make_manager(folder, work_root):
    """Build a manager with a custom runner or filesystem."""

    def _make(runner=None, fs=None):
        return ExtensionManager(folder, runner=runner or FakeRunner(), fs=fs, work_root=work_root)

    return _make
