"""
OpenAPI bulk generation use case.

Runs the schema module generator over every requested package via the
batch runner, skipping packages without a schema, and collects the
per-package outcomes into a report. Printing is left to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

from repo_tools.adapters.base import CommandRunner
from repo_tools.adapters.shell.command import ShellCommandRunner
from repo_tools.core.context import resolve_target_root
from repo_tools.core.engine.runner import run_bulk
from repo_tools.core.models.generation import GenerationConfig, GenerationResult
from repo_tools.core.models.settings import GeneratorSettings
from repo_tools.core.services.openapi_generate import generate

logger = logging.getLogger(__name__)


@dataclass
class BulkGenerationReport:
    """Outcome of a bulk generation run."""

    target_root: Path
    results: list[GenerationResult] = field(default_factory=list)

    @property
    def failures(self) -> list[GenerationResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict:
        return {
            "target_root": str(self.target_root),
            "ok": self.ok,
            "total": len(self.results),
            "failed": len(self.failures),
            "results": [r.model_dump(mode="json") for r in self.results],
        }


def generate_all(
    paths: Iterable[str | Path] = (),
    *,
    settings: GeneratorSettings | None = None,
    runner: CommandRunner | None = None,
    target_root: Path | None = None,
) -> BulkGenerationReport:
    """Generate schema modules for every package in ``paths``.

    Packages without an OpenAPI YAML file are skipped silently.
    """
    settings = settings or GeneratorSettings()
    runner = runner or ShellCommandRunner()
    root = (target_root or resolve_target_root()).resolve()

    task = partial(
        generate,
        config=GenerationConfig(skip_missing_yaml_file=True),
        settings=settings,
        runner=runner,
        target_root=root,
    )

    results = run_bulk(paths, task, root=root, concurrency=settings.concurrency)
    report = BulkGenerationReport(target_root=root, results=results)
    logger.info(
        "OpenAPI generation finished: %d package(s), %d failed",
        len(report.results),
        len(report.failures),
    )
    return report
