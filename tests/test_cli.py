"""Tests for the just-ext command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from cli.justext import __version__
from cli.justext.cli import app
from extensions import ExtensionManager
from extensions.naming import EXE_SUFFIX
from kernel import Folder
from tests.conftest import FakeRunner

cli_runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path, bin_dir):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("JUST_EXT_BIN_DIR", str(bin_dir))
    monkeypatch.delenv("JUST_EXT_LOG_LEVEL", raising=False)


@pytest.fixture
def fake_manager(monkeypatch, bin_dir, work_root):
    manager = ExtensionManager(Folder(bin_path=bin_dir), runner=FakeRunner(), work_root=work_root)
    monkeypatch.setattr("cli.justext.cli.get_manager", lambda: manager)
    return manager


def test_install(fake_manager, bin_dir):
    result = cli_runner.invoke(app, ["install", "https://github.com/owner/hello"])

    assert result.exit_code == 0, result.output
    assert "Installed" in result.output
    assert (bin_dir / f"just-hello{EXE_SUFFIX}").exists()


def test_install_rejects_unsupported_provider(fake_manager):
    result = cli_runner.invoke(app, ["install", "https://gitlab.com/owner/hello"])

    assert result.exit_code == 1
    assert "only github.com is supported" in result.output


def test_list_sorted(bin_dir):
    for name in ("just-zeta", "just-alpha", "unrelated"):
        (bin_dir / f"{name}{EXE_SUFFIX}").write_bytes(b"")

    result = cli_runner.invoke(app, ["list", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [f"just-alpha{EXE_SUFFIX}", f"just-zeta{EXE_SUFFIX}"]


def test_list_table(bin_dir):
    (bin_dir / f"just-fmt{EXE_SUFFIX}").write_bytes(b"")

    result = cli_runner.invoke(app, ["list"])

    assert result.exit_code == 0, result.output
    assert "just fmt" in result.output
    assert "Total: 1 extensions" in result.output


def test_list_empty():
    result = cli_runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "No extensions installed" in result.output


def test_path(bin_dir):
    (bin_dir / f"just-fmt{EXE_SUFFIX}").write_bytes(b"")

    result = cli_runner.invoke(app, ["path", "fmt"])

    assert result.exit_code == 0, result.output
    assert f"just-fmt{EXE_SUFFIX}" in result.output


def test_path_not_installed():
    result = cli_runner.invoke(app, ["path", "fmt"])

    assert result.exit_code == 1
    assert "not installed" in result.output


def test_uninstall(bin_dir):
    binary = bin_dir / f"just-fmt{EXE_SUFFIX}"
    binary.write_bytes(b"")

    result = cli_runner.invoke(app, ["uninstall", "just-fmt"])

    assert result.exit_code == 0, result.output
    assert not binary.exists()


def test_uninstall_not_installed():
    result = cli_runner.invoke(app, ["uninstall", "fmt"])

    assert result.exit_code == 0
    assert "not installed" in result.output


def test_version():
    result = cli_runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_explicit_config_file(tmp_path, monkeypatch):
    other_bin = tmp_path / "other-bin"
    config_path = tmp_path / "custom.toml"
    config_path.write_text(f'[extensions]\nbin_dir = "{other_bin.as_posix()}"\n')
    monkeypatch.delenv("JUST_EXT_BIN_DIR")

    result = cli_runner.invoke(app, ["--config", str(config_path), "list"])

    assert result.exit_code == 0, result.output
    assert other_bin.is_dir()


def test_unknown_config_key_reported(tmp_path):
    config_path = tmp_path / "bad.toml"
    config_path.write_text('[toolchain]\nmake = "make"\n')

    result = cli_runner.invoke(app, ["--config", str(config_path), "list"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert "Traceback" not in result.output


def test_list_help_mentions_dotted_names():
    result = cli_runner.invoke(app, ["list", "--help"])

    assert result.exit_code == 0
    assert "just-tool.rs" in result.output
