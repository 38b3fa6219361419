"""
repo-tools — CLI entrypoint.

Usage:
    python -m repo_tools.main --help
    python -m repo_tools.main openapi generate plugins/catalog-backend
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from repo_tools import __version__
from repo_tools.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="repo-tools")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to repo-tools.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """repo-tools — code generation helpers for workspace packages."""
    from repo_tools.core.config.loader import find_config_file, target_root
    from repo_tools.core.context import set_target_root

    cfg = Path(config_path) if config_path else find_config_file()
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = cfg

    # Batch labels and the formatter lookup are relative to this root
    set_target_root(target_root(cfg))

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
        quiet_third_party=not debug,
    )


# ── Register sub-command groups from repo_tools/ui/cli/ ─────────

from repo_tools.ui.cli.openapi import openapi

cli.add_command(openapi)


if __name__ == "__main__":
    cli()
