"""
Batch runner — apply a per-directory task across workspace packages.

Flow:
    paths → resolve (globs, relative to root) → task(dir) per package → results

The runner never raises on behalf of a task: each exception becomes
the ``result_text`` of that package's GenerationResult, so one broken
package cannot stop the rest of the batch. Results always come back in
the order the packages were resolved, whether run sequentially or on a
thread pool.
"""

from __future__ import annotations

import glob
import logging
import os
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from repo_tools.core.models.generation import GenerationResult

logger = logging.getLogger(__name__)

_GLOB_CHARS = ("*", "?", "[")


def relative_label(path: Path, root: Path) -> str:
    """Display label for ``path`` relative to ``root`` (POSIX separators)."""
    return Path(os.path.relpath(path, root)).as_posix()


def resolve_package_paths(paths: Iterable[str | Path], root: Path) -> list[Path]:
    """Resolve CLI path arguments to absolute package directories.

    Relative entries are taken from ``root``. Entries with glob
    characters expand to the matching directories in sorted order.
    Duplicates are dropped, keeping the first occurrence.
    """
    resolved: list[Path] = []
    seen: set[Path] = set()

    for entry in paths:
        text = str(entry)
        if any(ch in text for ch in _GLOB_CHARS):
            pattern = text if os.path.isabs(text) else str(root / text)
            candidates = [Path(m) for m in sorted(glob.glob(pattern)) if os.path.isdir(m)]
            if not candidates:
                logger.warning("No directories match %s", text)
        else:
            candidates = [root / text]

        for candidate in candidates:
            candidate = candidate.resolve()
            if candidate not in seen:
                seen.add(candidate)
                resolved.append(candidate)

    return resolved


def _describe_error(exc: Exception) -> str:
    message = str(exc)
    return message if message.strip() else type(exc).__name__


def _run_one(
    directory: Path,
    task: Callable[[Path], object],
    root: Path,
) -> GenerationResult:
    label = relative_label(directory, root)
    logger.info("Processing %s", label)
    try:
        task(directory)
    except Exception as e:
        logger.debug("Task failed in %s", label, exc_info=True)
        return GenerationResult(relative_dir=label, result_text=_describe_error(e))
    return GenerationResult(relative_dir=label)


def run_bulk(
    paths: Iterable[str | Path],
    task: Callable[[Path], object],
    *,
    root: Path,
    concurrency: int = 1,
) -> list[GenerationResult]:
    """Run ``task`` once per resolved package directory.

    Args:
        paths: Package directories or glob patterns.
        task: Callable receiving the absolute package directory.
        root: Workspace root for resolving paths and labeling results.
        concurrency: Maximum packages processed at once (1 = sequential).

    Returns:
        One GenerationResult per package, in resolution order.
    """
    root = root.resolve()
    directories = resolve_package_paths(paths, root)
    if not directories:
        return []

    if concurrency <= 1 or len(directories) == 1:
        return [_run_one(d, task, root) for d in directories]

    with ThreadPoolExecutor(max_workers=concurrency) as pool:
        return list(pool.map(lambda d: _run_one(d, task, root), directories))
