"""
Mock command runner — test double for external tool invocations.

Records every Command it receives and returns success unless a
configured failure matches the command line.
"""

from __future__ import annotations

from repo_tools.adapters.base import CommandRunner
from repo_tools.core.models.command import Command, CommandResult


class MockCommandRunner(CommandRunner):
    """Command runner that never spawns a process.

    By default every command succeeds. Failures are configured by
    substring match against the shell-quoted command line.
    """

    def __init__(
        self,
        runner_name: str = "mock",
        default_output: str = "[mock] executed",
    ):
        self._name = runner_name
        self._default_output = default_output
        self._failures: dict[str, tuple[str, int]] = {}
        self._call_log: list[Command] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[Command]:
        """All commands this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times run has been called."""
        return len(self._call_log)

    def set_failure(
        self,
        match: str,
        error: str = "Mock failure",
        return_code: int = 1,
    ) -> None:
        """Fail any command whose command line contains ``match``."""
        self._failures[match] = (error, return_code)

    def run(self, command: Command) -> CommandResult:
        self._call_log.append(command)
        display = command.display

        for match, (error, return_code) in self._failures.items():
            if match in display:
                return CommandResult.failure(
                    command=display,
                    error=error,
                    return_code=return_code,
                )

        return CommandResult.success(
            command=display,
            output=self._default_output,
            return_code=0,
        )

    def reset(self) -> None:
        """Clear call log and configured failures."""
        self._call_log.clear()
        self._failures.clear()
