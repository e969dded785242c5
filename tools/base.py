"""Result type shared by the external collaborators of the extension manager."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ToolStatus(Enum):
    """Outcome of a tool call."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class ToolResult:
    """Outcome of running an external program or filesystem operation.

    A result is truthy only on success, so callers can write
    ``if not result: raise ...``.
    """

    status: ToolStatus
    output: Any = None
    error: str | None = None
    returncode: int | None = None

    @classmethod
    def ok(cls, output: Any = None, returncode: int | None = None) -> ToolResult:
        return cls(status=ToolStatus.SUCCESS, output=output, returncode=returncode)

    @classmethod
    def failed(cls, error: str, returncode: int | None = None) -> ToolResult:
        return cls(status=ToolStatus.FAILURE, error=error, returncode=returncode)

    @property
    def success(self) -> bool:
        return self.status == ToolStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.success
