"""
Command runner base — the contract between generators and external tools.

Generators never call ``subprocess`` directly. They hand a Command to a
CommandRunner and inspect the CommandResult, which keeps lint/format
tooling swappable and fakeable in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from repo_tools.core.models.command import Command, CommandResult


class CommandRunner(ABC):
    """Abstract base class for all command runners.

    Runners perform the external side effect and return a result.
    They NEVER raise exceptions — failures are captured in the
    CommandResult.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The runner identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def run(self, command: Command) -> CommandResult:
        """Run the command and return its result.

        MUST never raise exceptions. All failures are captured
        in the CommandResult with status='failed'.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
