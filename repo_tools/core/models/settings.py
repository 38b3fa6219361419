"""
Generator settings — file locations and external tool commands.

Defaults match a Backstage-style workspace package layout. Any field
can be overridden from ``repo-tools.yml`` (see core.config.loader).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

YAML_SCHEMA_PATH = "src/schema/openapi.yaml"
TS_MODULE = "src/schema/openapi.generated"
TS_SCHEMA_PATH = f"{TS_MODULE}.ts"


class GeneratorSettings(BaseModel):
    """Where to read the schema, where to write the module, what to run."""

    model_config = ConfigDict(extra="forbid")

    yaml_schema_path: str = YAML_SCHEMA_PATH
    ts_schema_path: str = TS_SCHEMA_PATH

    router_package: str = "@backstage/backend-openapi-utils"
    router_factory: str = "createValidatedOpenApiRouter"

    lint_command: list[str] = Field(
        default_factory=lambda: ["yarn", "backstage-cli", "package", "lint", "--fix"],
    )
    format_command: list[str] = Field(
        default_factory=lambda: ["yarn", "prettier", "--write"],
    )
    # Relative to the target root; formatting is skipped when absent
    formatter_bin: str = "node_modules/.bin/prettier"

    concurrency: int = Field(default=1, ge=1)
    command_timeout: int = Field(default=300, ge=1)
