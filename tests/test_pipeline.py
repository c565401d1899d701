"""Tests for CopyPipeline and task files."""

import json

import pytest

from mirrorcopy import CopyConfig, CopyPipeline, TaskFileError, load_tasks
from mirrorcopy.pipeline import TaskSpec


class TestLoadTasks:
    def test_pairs_and_objects(self, tmp_path):
        p = tmp_path / "tasks.json"
        p.write_text(json.dumps([
            ["src/**", "dist/"],
            {"source": "a.txt", "destination": "b.txt", "exclude": "*.map"},
            {"source": "x/*", "destination": "y/", "exclude": ["*.a", "*.b"]},
        ]))
        assert load_tasks(p) == [
            TaskSpec("src/**", "dist/"),
            TaskSpec("a.txt", "b.txt", ("*.map",)),
            TaskSpec("x/*", "y/", ("*.a", "*.b")),
        ]

    @pytest.mark.parametrize("content", [
        "not json",
        json.dumps({"source": "a", "destination": "b"}),
        json.dumps([["only-one"]]),
        json.dumps([{"source": "a"}]),
        json.dumps([{"source": "a", "destination": "b", "exclude": 3}]),
        json.dumps([42]),
    ])
    def test_invalid(self, tmp_path, content):
        p = tmp_path / "tasks.json"
        p.write_text(content)
        with pytest.raises(TaskFileError):
            load_tasks(p)


class TestPipeline:
    def test_runs_tasks_in_order(self, src_tree, tmp_path):
        build = tmp_path / "build"
        final = tmp_path / "final"
        pipeline = CopyPipeline([
            TaskSpec(f"{src_tree}/**", f"{build}/"),
            TaskSpec(f"{build}/vendor/*", f"{final}/"),
        ])
        result = pipeline.run()
        assert result.ok
        assert len(result.reports) == 2
        assert (final / "lib.js").read_text() == "lib"
        assert not (final / "deep").exists()

    def test_verification_failure_copies_nothing(self, src_tree, tmp_path):
        dist = tmp_path / "dist"
        pipeline = CopyPipeline([
            TaskSpec(f"{src_tree}/**", f"{dist}/"),
            TaskSpec(str(tmp_path / "missing.js"), f"{dist}/"),
        ])
        result = pipeline.run()
        assert not result.verified
        assert not result.ok
        assert result.reports == []
        assert not dist.exists()

    def test_collision_warning(self, src_tree, tmp_path, capsys):
        pipeline = CopyPipeline([
            TaskSpec(str(src_tree / "app.js"), f"{tmp_path}/dist/"),
            TaskSpec(f"{src_tree}/*.js", f"{tmp_path}/dist/"),
        ])
        assert pipeline.verify_all()
        assert "is written by more than one task" in capsys.readouterr().err

    def test_task_exclude(self, src_tree, tmp_path):
        dist = tmp_path / "dist"
        pipeline = CopyPipeline([TaskSpec(f"{src_tree}/**", f"{dist}/", ("*.txt",))])
        result = pipeline.run()
        assert result.ok
        assert (dist / "app.js").exists()
        assert not (dist / "readme.txt").exists()
        assert (dist / "vendor" / "lib.js").exists()

    def test_per_file_errors_aggregate(self, src_tree, tmp_path):
        dist = tmp_path / "dist"
        dist.mkdir()
        (dist / "vendor").write_text("blocker")
        result = CopyPipeline([TaskSpec(f"{src_tree}/**", f"{dist}/")]).run()
        assert result.verified
        assert not result.ok
        assert len(result.errors) == 2

    def test_dry_run(self, src_tree, tmp_path):
        dist = tmp_path / "dist"
        config = CopyConfig(dry_run=True)
        result = CopyPipeline([TaskSpec(f"{src_tree}/**", f"{dist}/")], config).run()
        assert result.ok
        assert result.reports[0].total == 4
        assert not dist.exists()

    def test_verify_resets_registry(self, src_tree, tmp_path):
        pipeline = CopyPipeline([TaskSpec(str(src_tree / "app.js"), f"{tmp_path}/dist/")])
        pipeline.verify_all()
        pipeline.verify_all()
        assert pipeline.registry.collisions() == []
