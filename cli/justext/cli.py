"""just-ext CLI.

Install, remove and list extensions for the just command runner.
"""

from pathlib import Path
from typing import Optional

import typer

from cli.justext.output import (
    console,
    print_error,
    print_extensions,
    print_info,
    print_json,
    print_success,
    print_warning,
)
from extensions import ExtensionError, ExtensionManager
from kernel import ConfigError, Folder, configure_logging, get_config, reload_config

app = typer.Typer(
    name="just-ext",
    help="Manage extensions for the just command runner.",
    no_args_is_help=True,
)


def get_manager() -> ExtensionManager:
    """Build an extension manager from the loaded configuration."""
    config = get_config()
    return ExtensionManager(Folder.from_config(config), toolchain=config.toolchain)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config.toml (default: search current and parent directories)",
    ),
) -> None:
    """Manage extensions for the just command runner."""
    try:
        config = reload_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)
    configure_logging(config.logging, verbose=verbose)


@app.command()
def install(
    url: str = typer.Argument(..., help="GitHub repository URL of the extension"),
) -> None:
    """Clone, build and install an extension.

    Example:
        just-ext install https://github.com/owner/my-extension
    """
    manager = get_manager()
    print_info(f"Installing from {url}")

    try:
        path = manager.install(url)
    except ExtensionError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(f"Installed {path}")


@app.command()
def uninstall(
    name: str = typer.Argument(..., help="Extension name, with or without the just- prefix"),
) -> None:
    """Remove an installed extension.

    Example:
        just-ext uninstall my-extension
    """
    manager = get_manager()

    if not manager.is_installed(name):
        print_warning(f"Extension '{name}' is not installed")
        return

    try:
        manager.uninstall(name)
    except ExtensionError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(f"Uninstalled {name}")


@app.command("list")
def list_extensions(
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List installed extensions.

    Only binaries named just-<name> with no file extension (.exe on Windows)
    are listed. An extension whose name contains a dot, such as just-tool.rs,
    is still installed and usable but does not appear here; use
    `just-ext path <name>` to check it.
    """
    manager = get_manager()
    names = sorted(manager.list_installed())

    if as_json:
        print_json(names)
        return

    if not names:
        console.print("[yellow]No extensions installed[/yellow]")
        console.print("[dim]Install extensions with: just-ext install <url>[/dim]")
        return

    print_extensions(names)


@app.command()
def path(
    name: str = typer.Argument(..., help="Extension name"),
) -> None:
    """Print the binary path of an installed extension."""
    manager = get_manager()
    located = manager.locate(name)

    if located is None:
        print_error(f"Extension '{name}' is not installed")
        raise typer.Exit(1)

    console.print(str(located), highlight=False, soft_wrap=True)


@app.command()
def version() -> None:
    """Show just-ext version."""
    from cli.justext import __version__

    console.print(f"just-ext v{__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
