"""Extension management for the just command runner.

Extensions are executables named ``just-<name>`` kept in a single binary
directory (``~/.just/bin`` by default). They are installed from GitHub
repositories by cloning and building them with cargo.
"""

from extensions.errors import (
    BuildError,
    ExtensionError,
    ExtensionIOError,
    FetchError,
    InvalidUrlError,
    MissingRepositoryNameError,
    UnsupportedProviderError,
)
from extensions.installer import ExtensionManager
from extensions.naming import (
    EXE_SUFFIX,
    JUST_PREFIX,
    canonicalize,
    parse_repository_name,
    platform_executable_name,
)

__all__ = [
    "BuildError",
    "EXE_SUFFIX",
    "ExtensionError",
    "ExtensionIOError",
    "ExtensionManager",
    "FetchError",
    "InvalidUrlError",
    "JUST_PREFIX",
    "MissingRepositoryNameError",
    "UnsupportedProviderError",
    "canonicalize",
    "parse_repository_name",
    "platform_executable_name",
]
