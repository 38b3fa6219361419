"""
Generation models — per-invocation options and per-directory outcomes.
"""

from __future__ import annotations

from pydantic import BaseModel


class GenerationConfig(BaseModel):
    """Options for a single generate() call."""

    skip_missing_yaml_file: bool = False


class GenerationResult(BaseModel):
    """Outcome of processing one directory in a batch.

    An empty ``result_text`` means success; anything else is the
    captured error message.
    """

    relative_dir: str
    result_text: str = ""

    @property
    def ok(self) -> bool:
        return not self.result_text
