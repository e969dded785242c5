"""just-ext CLI.

Command-line interface for managing just extensions.
"""

__version__ = "0.1.0"

from cli.justext.cli import app, main

__all__ = ["__version__", "app", "main"]
