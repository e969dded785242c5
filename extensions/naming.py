"""Naming conventions for just extensions.

An extension binary is named ``just-<repository-name><suffix>`` where the
suffix is the platform executable suffix (``.exe`` on Windows, empty
elsewhere).
"""

from __future__ import annotations

import os
import re
from urllib.parse import SplitResult, urlsplit

from extensions.errors import (
    InvalidUrlError,
    MissingRepositoryNameError,
    UnsupportedProviderError,
)

JUST_PREFIX = "just-"
EXE_SUFFIX = ".exe" if os.name == "nt" else ""
SUPPORTED_HOST = "github.com"

# Schemes whose URLs are malformed without a host
_HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})
_FORBIDDEN_HOST_CHARS = re.compile(r"[\s#%/:<>?@\[\\\]^|]")
_SINGLE_DOT = frozenset({".", "%2e"})
_DOUBLE_DOT = frozenset({"..", ".%2e", "%2e.", "%2e%2e"})


def canonicalize(name: str) -> str:
    """Prepend the ``just-`` prefix unless the name already carries it."""
    if name.startswith(JUST_PREFIX):
        return name
    return f"{JUST_PREFIX}{name}"


def platform_executable_name(name: str) -> str:
    """Append the platform executable suffix."""
    return f"{name}{EXE_SUFFIX}"


def is_extension_binary(file_name: str) -> bool:
    """Check whether a file name follows the ``just-<name><suffix>`` pattern.

    The suffix is compared against the file extension, so on platforms
    without an executable suffix any name with an extension is rejected.
    """
    if not file_name.startswith(JUST_PREFIX):
        return False
    _, ext = os.path.splitext(file_name)
    return ext.lower() == EXE_SUFFIX


def is_github_url(host: str | None) -> bool:
    return host == SUPPORTED_HOST


def _check_host(parts: SplitResult) -> None:
    """Raise ValueError if the authority of ``parts`` is not a valid host."""
    # Out-of-range and non-numeric ports raise here
    parts.port

    host = parts.hostname
    if host is None or "[" in parts.netloc:
        return
    if _FORBIDDEN_HOST_CHARS.search(host):
        raise ValueError(f"forbidden character in host {host!r}")
    host.encode("idna")


def _path_segments(path: str) -> list[str]:
    """Split a URL path into segments with ``.`` and ``..`` resolved."""
    segments: list[str] = []
    parts = path.split("/")[1:]
    for i, segment in enumerate(parts):
        last = i == len(parts) - 1
        lowered = segment.lower()
        if lowered in _DOUBLE_DOT:
            if segments:
                segments.pop()
            if last:
                segments.append("")
        elif lowered in _SINGLE_DOT:
            if last:
                segments.append("")
        else:
            segments.append(segment)
    return segments


def parse_repository_name(url: str) -> str:
    """Extract the repository name from a GitHub URL.

    ``https://github.com/owner/repo`` yields ``repo``. Dot segments are
    resolved first, so ``https://github.com/owner/..`` has no repository.

    Args:
        url: Repository URL.

    Returns:
        The repository name.

    Raises:
        InvalidUrlError: If the URL is malformed.
        UnsupportedProviderError: If the host is not github.com.
        MissingRepositoryNameError: If there is no repository segment.
    """
    try:
        parts = urlsplit(url.strip())
        _check_host(parts)
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL {url!r}: {e}") from e

    scheme = parts.scheme.lower()
    if not scheme:
        raise InvalidUrlError(f"Invalid URL {url!r}")
    if parts.netloc and not parts.hostname:
        raise InvalidUrlError(f"Invalid URL {url!r}: empty host")
    if scheme in _HOST_REQUIRED_SCHEMES and not parts.hostname:
        raise InvalidUrlError(f"Invalid URL {url!r}: missing host")

    if not is_github_url(parts.hostname):
        raise UnsupportedProviderError(
            f"Currently, only {SUPPORTED_HOST} is supported for just components"
        )

    segments = _path_segments(parts.path.replace("\\", "/"))
    if len(segments) < 2 or not segments[1]:
        raise MissingRepositoryNameError(f"No repository name in {url!r}")

    return segments[1]
