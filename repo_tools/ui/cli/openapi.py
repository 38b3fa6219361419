"""
CLI commands for OpenAPI schema module generation.

Thin wrappers over ``repo_tools.core.use_cases.openapi_generate``.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from pathlib import Path

import click

from repo_tools.adapters.base import CommandRunner
from repo_tools.core.models.settings import GeneratorSettings


def _load_settings(ctx: click.Context) -> GeneratorSettings:
    """Load settings from the config file found at startup, if any."""
    from repo_tools.core.config.loader import ConfigError, load_settings

    try:
        return load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


def bulk_command(
    paths: Iterable[str | Path] = (),
    *,
    settings: GeneratorSettings | None = None,
    runner: CommandRunner | None = None,
    target_root: Path | None = None,
) -> bool:
    """Generate every package's schema module and print a summary.

    Returns:
        True when every package succeeded (or was skipped), else False.
        Exiting the process is up to the caller.
    """
    from repo_tools.core.use_cases.openapi_generate import generate_all

    report = generate_all(
        paths,
        settings=settings,
        runner=runner,
        target_root=target_root,
    )

    for result in report.failures:
        click.echo()
        click.secho(
            f"OpenAPI yaml to Typescript generation failed in {result.relative_dir}:",
            fg="red",
        )
        click.echo(result.result_text.lstrip())

    if report.ok:
        click.secho("Generated all files.", fg="green")
    return report.ok


@click.group()
def openapi() -> None:
    """OpenAPI — generate typed schema modules from openapi.yaml."""


@openapi.command("generate")
@click.argument("paths", nargs=-1)
@click.option(
    "--concurrency",
    "-j",
    type=click.IntRange(min=1),
    default=None,
    help="Packages to process at once (default: from config, else 1).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate_cmd(
    ctx: click.Context,
    paths: tuple[str, ...],
    concurrency: int | None,
    as_json: bool,
) -> None:
    """Generate src/schema/openapi.generated.ts in each package.

    PATHS are package directories or glob patterns, relative to the
    workspace root. Packages without src/schema/openapi.yaml are skipped.

    Examples:

        repo-tools openapi generate plugins/catalog-backend

        repo-tools openapi generate 'plugins/*-backend' -j 4
    """
    settings = _load_settings(ctx)
    if concurrency is not None:
        settings = settings.model_copy(update={"concurrency": concurrency})

    if as_json:
        from repo_tools.core.use_cases.openapi_generate import generate_all

        report = generate_all(paths, settings=settings)
        click.echo(json.dumps(report.to_dict(), indent=2))
        if not report.ok:
            sys.exit(1)
        return

    if not bulk_command(paths, settings=settings):
        sys.exit(1)
