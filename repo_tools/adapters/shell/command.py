"""
Shell command runner — execute external programs and capture output.

Arguments are passed as an argv list, never through a shell, so file
paths containing spaces or quotes reach the tool untouched.
"""

from __future__ import annotations

import logging
import subprocess
import time

from repo_tools.adapters.base import CommandRunner
from repo_tools.core.models.command import Command, CommandResult

logger = logging.getLogger(__name__)


class ShellCommandRunner(CommandRunner):
    """Run commands with ``subprocess.run`` and capture their output."""

    @property
    def name(self) -> str:
        return "shell"

    def run(self, command: Command) -> CommandResult:
        display = command.display
        logger.debug("Executing: %s (cwd=%s)", display, command.cwd)

        if not command.args:
            return CommandResult.failure(command=display, error="Empty command")

        start = time.monotonic()

        try:
            result = subprocess.run(
                command.args,
                cwd=command.cwd,
                capture_output=True,
                text=True,
                timeout=command.timeout,
            )

            elapsed_ms = int((time.monotonic() - start) * 1000)
            output = result.stdout.strip()
            stderr = result.stderr.strip()

            if result.returncode == 0:
                return CommandResult.success(
                    command=display,
                    output=output,
                    return_code=result.returncode,
                    duration_ms=elapsed_ms,
                )
            else:
                return CommandResult.failure(
                    command=display,
                    error=stderr or output or f"Command exited with code {result.returncode}",
                    output=output,
                    return_code=result.returncode,
                    duration_ms=elapsed_ms,
                )

        except subprocess.TimeoutExpired:
            return CommandResult.failure(
                command=display,
                error=f"Command timed out after {command.timeout}s",
            )
        except FileNotFoundError:
            return CommandResult.failure(
                command=display,
                error=f"Command not found: {command.args[0]}",
            )
        except Exception as e:
            return CommandResult.failure(
                command=display,
                error=f"Command execution error: {e}",
            )
