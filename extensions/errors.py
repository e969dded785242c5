"""Errors raised by the extension manager.

Every failure is terminal for the operation that raised it. Callers that
only need a message can catch ``ExtensionError`` and print it.
"""


class ExtensionError(Exception):
    """Base class for extension management failures."""

    pass


class InvalidUrlError(ExtensionError):
    """Raised when a repository URL cannot be parsed."""

    pass


class UnsupportedProviderError(ExtensionError):
    """Raised when a repository URL points at an unsupported host."""

    pass


class MissingRepositoryNameError(ExtensionError):
    """Raised when a repository URL has no repository segment."""

    pass


class FetchError(ExtensionError):
    """Raised when cloning the extension source fails."""

    pass


class BuildError(ExtensionError):
    """Raised when building the extension fails."""

    pass


class ExtensionIOError(ExtensionError):
    """Raised when a filesystem step of install or uninstall fails."""

    pass
