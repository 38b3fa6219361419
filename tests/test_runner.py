"""
Tests for the batch runner — path resolution, error capture, ordering.
"""

import threading
import time
from pathlib import Path

from repo_tools.core.engine.runner import relative_label, resolve_package_paths, run_bulk


def _mkdirs(root: Path, *names: str) -> None:
    for name in names:
        (root / name).mkdir(parents=True, exist_ok=True)


# ── Path Resolution ──────────────────────────────────────────────────


class TestResolvePackagePaths:
    def test_relative_to_root(self, tmp_path: Path):
        _mkdirs(tmp_path, "plugins/a")
        assert resolve_package_paths(["plugins/a"], tmp_path) == [(tmp_path / "plugins/a").resolve()]

    def test_absolute_kept(self, tmp_path: Path):
        target = tmp_path / "x"
        _mkdirs(tmp_path, "x")
        assert resolve_package_paths([str(target)], tmp_path / "elsewhere") == [target.resolve()]

    def test_glob_expands_sorted_dirs_only(self, tmp_path: Path):
        _mkdirs(tmp_path, "plugins/b-backend", "plugins/a-backend", "plugins/c-frontend")
        (tmp_path / "plugins" / "z-backend").write_text("not a dir")
        result = resolve_package_paths(["plugins/*-backend"], tmp_path)
        assert [p.name for p in result] == ["a-backend", "b-backend"]

    def test_glob_without_matches(self, tmp_path: Path):
        assert resolve_package_paths(["nothing/*"], tmp_path) == []

    def test_duplicates_dropped(self, tmp_path: Path):
        _mkdirs(tmp_path, "plugins/a", "plugins/b")
        result = resolve_package_paths(["plugins/b", "plugins/*", "plugins/b/"], tmp_path)
        assert [p.name for p in result] == ["b", "a"]

    def test_empty(self, tmp_path: Path):
        assert resolve_package_paths([], tmp_path) == []


class TestRelativeLabel:
    def test_nested(self, tmp_path: Path):
        assert relative_label(tmp_path / "plugins" / "a", tmp_path) == "plugins/a"

    def test_root_itself(self, tmp_path: Path):
        assert relative_label(tmp_path, tmp_path) == "."

    def test_outside_root(self, tmp_path: Path):
        assert relative_label(tmp_path / "other", tmp_path / "root") == "../other"


# ── run_bulk ─────────────────────────────────────────────────────────


class TestRunBulk:
    def test_empty_paths(self, tmp_path: Path):
        calls = []
        assert run_bulk([], calls.append, root=tmp_path) == []
        assert calls == []

    def test_success_has_empty_text(self, tmp_path: Path):
        _mkdirs(tmp_path, "a")
        results = run_bulk(["a"], lambda d: None, root=tmp_path)
        assert len(results) == 1
        assert results[0].relative_dir == "a"
        assert results[0].result_text == ""
        assert results[0].ok

    def test_task_receives_absolute_dir(self, tmp_path: Path):
        _mkdirs(tmp_path, "a")
        seen: list[Path] = []
        run_bulk(["a"], seen.append, root=tmp_path)
        assert seen == [(tmp_path / "a").resolve()]

    def test_errors_become_result_text(self, tmp_path: Path):
        _mkdirs(tmp_path, "good", "bad")

        def task(directory: Path) -> None:
            if directory.name == "bad":
                raise RuntimeError("boom")

        results = run_bulk(["good", "bad"], task, root=tmp_path)
        assert [(r.relative_dir, r.result_text) for r in results] == [("good", ""), ("bad", "boom")]

    def test_failure_does_not_stop_batch(self, tmp_path: Path):
        _mkdirs(tmp_path, "a", "b", "c")
        seen: list[str] = []

        def task(directory: Path) -> None:
            seen.append(directory.name)
            if directory.name == "a":
                raise ValueError("first one broke")

        run_bulk(["a", "b", "c"], task, root=tmp_path)
        assert seen == ["a", "b", "c"]

    def test_empty_message_uses_class_name(self, tmp_path: Path):
        _mkdirs(tmp_path, "a")

        def task(directory: Path) -> None:
            raise KeyError()

        results = run_bulk(["a"], task, root=tmp_path)
        assert results[0].result_text == "KeyError"

    def test_sequential_by_default(self, tmp_path: Path):
        _mkdirs(tmp_path, "a", "b", "c")
        active = 0
        peak = 0
        lock = threading.Lock()

        def task(directory: Path) -> None:
            nonlocal active, peak
            with lock:
                active += 1
                peak = max(peak, active)
            time.sleep(0.01)
            with lock:
                active -= 1

        run_bulk(["a", "b", "c"], task, root=tmp_path)
        assert peak == 1

    def test_concurrent_keeps_input_order(self, tmp_path: Path):
        names = ["d", "c", "b", "a"]
        _mkdirs(tmp_path, *names)
        delays = {"d": 0.04, "c": 0.03, "b": 0.02, "a": 0.0}

        def task(directory: Path) -> None:
            time.sleep(delays[directory.name])
            if directory.name in ("c", "a"):
                raise RuntimeError(f"failed {directory.name}")

        results = run_bulk(names, task, root=tmp_path, concurrency=4)
        assert [r.relative_dir for r in results] == names
        assert [r.result_text for r in results] == ["", "failed c", "", "failed a"]
