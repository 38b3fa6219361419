"""
Target root context — the workspace root every command works against.

Set ONCE at startup by the CLI (``main.py``) from the location of
``repo-tools.yml``, or the working directory when there is none. Tests
set it to ``tmp_path``. Batch results are labeled relative to it and
the formatter binary is looked up under it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


_target_root: Optional[Path] = None


def set_target_root(root: Path) -> None:
    """Register the target root for the current process."""
    global _target_root
    _target_root = root


def resolve_target_root() -> Path:
    """Return the registered target root, falling back to the working directory."""
    return _target_root if _target_root is not None else Path.cwd().resolve()
