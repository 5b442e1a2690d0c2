"""Tests for the qualytics command line."""

import json
import logging

from typer.testing import CliRunner

from qualytics import __version__
from qualytics.cli import app

runner = CliRunner()


class TestAnalyzeCommand:
    def test_json_single_file(self, write_tree, sample_program):
        path = write_tree(sample_program)
        result = runner.invoke(app, ["analyze", str(path), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["fileMetrics"]["methodCount"] == 2
        assert [f["name"] for f in data["functions"]] == ["check", "area"]

    def test_json_several_files(self, write_tree, sample_program):
        first = write_tree(sample_program, "a.json")
        second = write_tree(sample_program, "b.json")
        result = runner.invoke(app, ["analyze", str(first), str(second), "-f", "json"])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["files"]) == 2

    def test_no_functions(self, write_tree, sample_program):
        path = write_tree(sample_program)
        result = runner.invoke(app, ["analyze", str(path), "-f", "json", "--no-functions"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["functions"] == []

    def test_table_output(self, write_tree, sample_program):
        path = write_tree(sample_program)
        result = runner.invoke(app, ["analyze", str(path), "--workers", "2"])
        assert result.exit_code == 0
        assert "Code Quality Metrics" in result.stdout

    def test_malformed_file_exits_1(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        result = runner.invoke(app, ["analyze", str(path), "-f", "json"])
        assert result.exit_code == 1

    def test_unknown_format_exits_2(self, write_tree, sample_program):
        path = write_tree(sample_program)
        result = runner.invoke(app, ["analyze", str(path), "-f", "xml"])
        assert result.exit_code == 2

    def test_missing_file_rejected(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "missing.json")])
        assert result.exit_code != 0

    def test_config_file(self, write_tree, sample_program, tmp_path):
        config = tmp_path / "q.toml"
        config.write_text("include_functions = false\n", encoding="utf-8")
        path = write_tree(sample_program)
        result = runner.invoke(app, ["analyze", str(path), "-f", "json", "-c", str(config)])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["functions"] == []


class TestVersionCommand:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestLoggingOptions:
    """Verbosity and log file come from the merged configuration."""

    def test_verbosity_from_environment(self, write_tree, sample_program, monkeypatch):
        monkeypatch.setenv("QUALYTICS_VERBOSITY", "verbose")
        path = write_tree(sample_program)
        result = runner.invoke(app, ["analyze", str(path), "--format", "json"])
        assert result.exit_code == 0
        assert logging.getLogger("qualytics").level == logging.DEBUG

    def test_verbosity_from_project_file(self, write_tree, sample_program, isolated_environment):
        (isolated_environment / "qualytics.toml").write_text('verbosity = "quiet"\n', encoding="utf-8")
        path = write_tree(sample_program)
        result = runner.invoke(app, ["analyze", str(path), "--format", "json"])
        assert result.exit_code == 0
        assert logging.getLogger("qualytics").level == logging.ERROR

    def test_verbose_flag_overrides_file(self, write_tree, sample_program, isolated_environment):
        (isolated_environment / "qualytics.toml").write_text('verbosity = "quiet"\n', encoding="utf-8")
        path = write_tree(sample_program)
        result = runner.invoke(app, ["analyze", str(path), "-f", "json", "-v"])
        assert result.exit_code == 0
        assert logging.getLogger("qualytics").level == logging.DEBUG

    def test_log_file_option(self, write_tree, sample_program, tmp_path):
        log_path = tmp_path / "run.log"
        path = write_tree(sample_program)
        result = runner.invoke(
            app, ["analyze", str(path), "-f", "json", "-v", "--log-file", str(log_path)]
        )
        assert result.exit_code == 0
        assert "Resolved 1 type depths" in log_path.read_text(encoding="utf-8")
