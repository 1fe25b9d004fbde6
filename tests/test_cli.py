"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pagination_sequence import cli
from pagination_sequence.cli import app
from pagination_sequence.seq_config import resolve_context


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    return project_dir


def lines(output: str) -> list[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


def flat(output: str) -> str:
    return " ".join(output.split())


class TestShow:
    def test_text(self, runner: CliRunner, project: Path):
        result = runner.invoke(app, ["show", "12", "25", "--path", str(project)])
        assert result.exit_code == 0, result.output
        assert lines(result.output) == [
            "01 - 02 - .. - 10 - 11 -[12]- 13 - 14 - .. - 24 - 25",
        ]

    def test_json(self, runner: CliRunner, project: Path):
        result = runner.invoke(
            app,
            ["show", "1", "11", "-e", "0", "-n", "0", "-f", "json", "--path", str(project)],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["edges"] == 0
        assert data["items"] == [
            {"type": "page", "page": 1},
            {"type": "page", "page": 2},
            {"type": "ellipsis", "position": "end"},
        ]

    def test_uses_directory_config(self, runner: CliRunner, project: Path):
        (project / ".pagination").mkdir()
        (project / ".pagination" / "config.json").write_text(json.dumps({"edges": 1}))
        result = runner.invoke(app, ["show", "6", "11", "-f", "json", "--path", str(project)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["edges"] == 1
        assert data["neighbors"] == 2

    def test_invalid_pages(self, runner: CliRunner, project: Path):
        result = runner.invoke(app, ["show", "1", "0", "--path", str(project)])
        assert result.exit_code == 1
        assert "invalid pages" in flat(result.output)

    def test_negative_edges(self, runner: CliRunner, project: Path):
        result = runner.invoke(app, ["show", "1", "10", "--edges", "-1", "--path", str(project)])
        assert result.exit_code == 1
        assert "invalid edges" in flat(result.output)

    def test_unknown_format(self, runner: CliRunner, project: Path):
        result = runner.invoke(app, ["show", "1", "10", "-f", "xml", "--path", str(project)])
        assert result.exit_code == 1
        assert "Unknown output format" in flat(result.output)

    def test_bad_config(self, runner: CliRunner, project: Path):
        (project / ".pagination").mkdir()
        (project / ".pagination" / "config.json").write_text("{oops")
        result = runner.invoke(app, ["show", "1", "10", "--path", str(project)])
        assert result.exit_code == 1
        assert result.output.startswith("Error:")
        assert "invalid JSON" in flat(result.output)

    def test_config_not_utf8(self, runner: CliRunner, project: Path):
        (project / ".pagination").mkdir()
        (project / ".pagination" / "config.json").write_bytes(b"\xff\xfe{}")
        result = runner.invoke(app, ["show", "1", "20", "--path", str(project)])
        assert result.exit_code == 1
        assert result.output.startswith("Error:")
        assert "not valid UTF-8" in flat(result.output)

    def test_config_path_is_directory(self, runner: CliRunner, project: Path):
        (project / ".pagination" / "config.json").mkdir(parents=True)
        result = runner.invoke(app, ["show", "1", "20", "-f", "json", "--path", str(project)])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["edges"] == 2


class TestTable:
    def test_resolves_config_once(
        self, runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch
    ):
        calls = []

        def counting_resolve(path=None):
            calls.append(path)
            return resolve_context(path)

        monkeypatch.setattr(cli, "resolve_context", counting_resolve)
        result = runner.invoke(app, ["table", "50", "--path", str(project)])
        assert result.exit_code == 0, result.output
        assert len(lines(result.output)) == 50
        assert len(calls) == 1

    def test_bad_config(self, runner: CliRunner, project: Path):
        (project / ".pagination").mkdir()
        (project / ".pagination" / "config.json").write_text("[]")
        result = runner.invoke(app, ["table", "5", "--path", str(project)])
        assert result.exit_code == 1
        assert result.output.startswith("Error:")

    def test_no_edges_and_no_neighbors(self, runner: CliRunner, project: Path):
        result = runner.invoke(app, ["table", "11", "-e", "0", "-n", "0", "--path", str(project)])
        assert result.exit_code == 0, result.output
        assert lines(result.output) == [
            "[01]- 02 - ..",
            "01 -[02]- ..",
            ".. -[03]- ..",
            ".. -[04]- ..",
            ".. -[05]- ..",
            ".. -[06]- ..",
            ".. -[07]- ..",
            ".. -[08]- ..",
            ".. -[09]- ..",
            ".. -[10]- 11",
            ".. - 10 -[11]",
        ]

    def test_invalid_pages(self, runner: CliRunner, project: Path):
        result = runner.invoke(app, ["table", "0", "--path", str(project)])
        assert result.exit_code == 1
        assert "invalid pages" in flat(result.output)


class TestContext:
    def test_defaults(self, runner: CliRunner, project: Path):
        result = runner.invoke(app, ["context", "--path", str(project), "-f", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["config_source"] == "none"
        assert data["edges"] == 2

    def test_text(self, runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PAGINATION_EDGES", "0")
        result = runner.invoke(app, ["context", "--path", str(project)])
        assert result.exit_code == 0, result.output
        assert "Edges: 0" in flat(result.output)
        assert "Overridden by: PAGINATION_EDGES" in flat(result.output)


class TestInit:
    def test_creates_config(self, runner: CliRunner, project: Path):
        result = runner.invoke(app, ["init", "--path", str(project), "-e", "1", "-n", "3"])
        assert result.exit_code == 0, result.output
        config_path = project / ".pagination" / "config.json"
        assert json.loads(config_path.read_text()) == {"edges": 1, "neighbors": 3}

    def test_declined_overwrite(self, runner: CliRunner, project: Path):
        runner.invoke(app, ["init", "--path", str(project), "-e", "1"])
        result = runner.invoke(app, ["init", "--path", str(project), "-e", "0"], input="n\n")
        assert result.exit_code == 0
        config_path = project / ".pagination" / "config.json"
        assert json.loads(config_path.read_text()) == {"edges": 1}

    def test_force_overwrite(self, runner: CliRunner, project: Path):
        runner.invoke(app, ["init", "--path", str(project), "-e", "1"])
        result = runner.invoke(app, ["init", "--path", str(project), "-e", "0", "--force"])
        assert result.exit_code == 0
        config_path = project / ".pagination" / "config.json"
        assert json.loads(config_path.read_text()) == {"edges": 0}

    def test_missing_directory(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(app, ["init", "--path", str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "Directory not found" in flat(result.output)

    def test_negative_value(self, runner: CliRunner, project: Path):
        result = runner.invoke(app, ["init", "--path", str(project), "-e", "-2"])
        assert result.exit_code == 1


class TestVerbose:
    def test_verbose_flag_accepted(self, runner: CliRunner, project: Path):
        result = runner.invoke(app, ["-v", "show", "1", "5", "--path", str(project)])
        assert result.exit_code == 0
