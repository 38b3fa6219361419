"""Adapters — bindings for external tools.

Public re-exports for convenient access.
"""

from repo_tools.adapters.base import CommandRunner
from repo_tools.adapters.mock import MockCommandRunner
from repo_tools.adapters.shell.command import ShellCommandRunner

__all__ = [
    "CommandRunner",
    "MockCommandRunner",
    "ShellCommandRunner",
]
