"""
Command and CommandResult models — the process execution contract.

A Command is a request to run an external program. A CommandResult is
what came back. Runners turn one into the other and never raise:
timeouts, missing executables and non-zero exits are all captured in
the result.
"""

from __future__ import annotations

import shlex
from typing import Any, Literal

from pydantic import BaseModel


class Command(BaseModel):
    """An external program invocation."""

    args: list[str]                 # argv, program first
    cwd: str | None = None          # working directory (None = inherit)
    timeout: int = 300              # seconds

    @property
    def display(self) -> str:
        """Shell-quoted command line for logs and error messages."""
        return shlex.join(self.args)


class CommandResult(BaseModel):
    """Outcome of running a Command."""

    command: str
    status: Literal["ok", "failed"] = "ok"
    return_code: int | None = None
    duration_ms: int = 0

    output: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the command succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the command failed."""
        return self.status == "failed"

    @classmethod
    def success(
        cls,
        command: str,
        output: str = "",
        **kwargs: Any,
    ) -> CommandResult:
        """Create a success result."""
        return cls(command=command, status="ok", output=output, **kwargs)

    @classmethod
    def failure(
        cls,
        command: str,
        error: str,
        **kwargs: Any,
    ) -> CommandResult:
        """Create a failure result."""
        return cls(command=command, status="failed", error=error, **kwargs)
