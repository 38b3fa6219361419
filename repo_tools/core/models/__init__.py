"""
Domain models — Pydantic types for repo-tools.

All models are re-exported here for convenient access:

    from repo_tools.core.models import Command, CommandResult, GeneratorSettings
"""

from repo_tools.core.models.command import Command, CommandResult
from repo_tools.core.models.generation import GenerationConfig, GenerationResult
from repo_tools.core.models.settings import GeneratorSettings

__all__ = [
    # command.py
    "Command",
    "CommandResult",
    # generation.py
    "GenerationConfig",
    "GenerationResult",
    # settings.py
    "GeneratorSettings",
]
