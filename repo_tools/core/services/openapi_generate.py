"""
OpenAPI schema module generator — channel-independent service.

Reads ``src/schema/openapi.yaml`` from a workspace package, writes
``src/schema/openapi.generated.ts`` embedding the document as a typed
constant plus a validated-router factory, then runs the package lint
fixer and (when installed) prettier over the written file.

Error policy:
    MissingInputFileError   no schema file and not told to skip
    yaml.YAMLError          invalid YAML or duplicated key, propagated unmodified
    OSError                 read/write failure, propagated unmodified
    ExternalToolError       lint or format command failed
"""

from __future__ import annotations

import json
import logging
import math
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

from repo_tools.adapters.base import CommandRunner
from repo_tools.adapters.shell.command import ShellCommandRunner
from repo_tools.core.context import resolve_target_root
from repo_tools.core.models.command import Command, CommandResult
from repo_tools.core.models.generation import GenerationConfig
from repo_tools.core.models.settings import GeneratorSettings
from repo_tools.core.services.openapi_yaml import load_openapi_yaml

logger = logging.getLogger(__name__)

BANNER = """\
//

// ******************************************************************
// * THIS IS AN AUTOGENERATED FILE. DO NOT EDIT THIS FILE DIRECTLY. *
// ******************************************************************
"""


class OpenApiGenerateError(Exception):
    """Base class for generator failures raised by this module."""


class MissingInputFileError(OpenApiGenerateError):
    """The package has no OpenAPI YAML file at the expected location."""

    def __init__(self, relative_path: str, path: Path):
        super().__init__(f"Could not find {relative_path} in root of directory.")
        self.relative_path = relative_path
        self.path = path


class ExternalToolError(OpenApiGenerateError):
    """A lint or format command exited non-zero or could not be run."""

    def __init__(self, tool: str, result: CommandResult):
        detail = (result.error or result.output or "").strip()
        code = f" (exit code {result.return_code})" if result.return_code is not None else ""
        message = f"{tool} failed{code}: {result.command}"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)
        self.tool = tool
        self.result = result


# ── Rendering ───────────────────────────────────────────────────


def _js_number(value: float) -> float | int | None:
    """Match how JSON.stringify writes a double."""
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def _js_key(key: Any) -> Any:
    """Mapping keys are strings in JS; coerce the ones json.dumps would get wrong."""
    if isinstance(key, float):
        if math.isnan(key):
            return "NaN"
        if math.isinf(key):
            return "Infinity" if key > 0 else "-Infinity"
        return _js_number(key)
    if isinstance(key, date):
        return _json_default(key)
    return key


def _normalize(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return _js_number(value)
    if isinstance(value, dict):
        return {_js_key(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_normalize(item) for item in value]
    if isinstance(value, (set, frozenset)):
        keys = [_js_key(item) for item in value]
        return {str(k): None for k in sorted(keys, key=str)}
    return value


def _json_default(value: Any) -> Any:
    """Serialize YAML timestamps the way JSON.stringify serializes a Date."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC).replace(tzinfo=None)
        return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"
    if isinstance(value, date):
        return f"{value.isoformat()}T00:00:00.000Z"
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_document(document: Any) -> str:
    """Pretty-print a parsed YAML document the way JSON.stringify(doc, null, 2) does.

    Whole-number floats lose their ``.0`` and non-finite floats become
    ``null``, so the result is always valid JSON.
    """
    return json.dumps(
        _normalize(document),
        indent=2,
        ensure_ascii=False,
        allow_nan=False,
        default=_json_default,
    )


def render_schema_module(document: Any, settings: GeneratorSettings | None = None) -> str:
    """Render the TypeScript module that embeds ``document``.

    The bare ``//`` first line lets the lint header rule replace its
    notice without removing the autogenerated banner.
    """
    settings = settings or GeneratorSettings()
    factory = settings.router_factory

    return (
        BANNER
        + f"import {{{factory}}} from '{settings.router_package}';\n"
        + f"export const spec = {serialize_document(document)} as const;\n"
        + "export const createOpenApiRouter = async (\n"
        + f"  options?: Parameters<typeof {factory}>['1'],\n"
        + f") => {factory}<typeof spec>(spec, options);\n"
    )


# ── Generation ──────────────────────────────────────────────────


def _run_tool(
    runner: CommandRunner,
    tool: str,
    args: list[str],
    cwd: Path,
    timeout: int,
) -> None:
    result = runner.run(Command(args=args, cwd=str(cwd), timeout=timeout))
    if result.failed:
        raise ExternalToolError(tool, result)
    logger.debug("%s finished in %dms", tool, result.duration_ms)


def generate(
    directory_path: str | Path,
    config: GenerationConfig | None = None,
    *,
    settings: GeneratorSettings | None = None,
    runner: CommandRunner | None = None,
    target_root: Path | None = None,
) -> None:
    """Generate the OpenAPI TypeScript module for one package directory.

    Args:
        directory_path: Package directory containing the schema.
        config: Per-call options; ``skip_missing_yaml_file`` turns a
            missing schema into a no-op.
        settings: File locations and tool commands (default: built-ins).
        runner: Command runner for lint/format (default: ShellCommandRunner).
        target_root: Workspace root holding ``node_modules``
            (default: the registered target root).

    Raises:
        MissingInputFileError: Schema missing and not skipped.
        yaml.YAMLError: Schema is not valid YAML or repeats a mapping key.
        OSError: Reading the schema or writing the module failed.
        ExternalToolError: Lint or format command failed.
    """
    config = config or GenerationConfig()
    settings = settings or GeneratorSettings()
    runner = runner or ShellCommandRunner()
    directory = Path(directory_path).resolve()

    openapi_path = directory / settings.yaml_schema_path
    if not openapi_path.is_file():
        if config.skip_missing_yaml_file:
            logger.debug("No %s in %s, skipping", settings.yaml_schema_path, directory)
            return
        raise MissingInputFileError(settings.yaml_schema_path, openapi_path)

    document = load_openapi_yaml(openapi_path.read_text(encoding="utf-8"))

    ts_path = directory / settings.ts_schema_path
    ts_path.parent.mkdir(parents=True, exist_ok=True)
    ts_path.write_text(render_schema_module(document, settings), encoding="utf-8")
    logger.info("Wrote %s", ts_path)

    _run_tool(
        runner,
        "lint",
        [*settings.lint_command, str(ts_path)],
        directory,
        settings.command_timeout,
    )

    root = target_root or resolve_target_root()
    if (root / settings.formatter_bin).exists():
        _run_tool(
            runner,
            "format",
            [*settings.format_command, str(ts_path)],
            directory,
            settings.command_timeout,
        )
    else:
        logger.debug("No formatter at %s, skipping format", root / settings.formatter_bin)
