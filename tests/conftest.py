"""
Shared test fixtures and configuration.
"""

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from repo_tools.adapters.mock import MockCommandRunner
from repo_tools.core import context
from repo_tools.core.models.settings import YAML_SCHEMA_PATH

PETSTORE_YAML = textwrap.dedent("""\
    openapi: 3.0.3
    info:
      title: petstore
      version: 1.0.0
    paths:
      /pets/{id}:
        get:
          operationId: getPet
          parameters:
            - name: id
              in: path
              required: true
              schema:
                type: string
          responses:
            200:
              description: A pet
""")


@pytest.fixture(autouse=True)
def _reset_target_root():
    """Keep the process-wide target root from leaking between tests."""
    context._target_root = None
    yield
    context._target_root = None


@pytest.fixture
def mock_runner() -> MockCommandRunner:
    return MockCommandRunner()


@pytest.fixture
def make_package(tmp_path: Path) -> Callable[..., Path]:
    """Create a package directory under tmp_path, optionally with a schema."""

    def _make(name: str = "pkg", schema: str | None = PETSTORE_YAML) -> Path:
        pkg = tmp_path / name
        pkg.mkdir(parents=True, exist_ok=True)
        if schema is not None:
            schema_file = pkg / YAML_SCHEMA_PATH
            schema_file.parent.mkdir(parents=True, exist_ok=True)
            schema_file.write_text(schema, encoding="utf-8")
        return pkg

    return _make
