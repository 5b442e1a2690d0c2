"""Tests for the public analysis entry points."""

import logging

import pytest

from qualytics import analyze_document, analyze_path
from qualytics.config import AnalysisConfig
from qualytics.exceptions import FileAccessError, InheritanceCycleError, TreeFormatError

from builders import cls, program


class TestAnalyzeDocument:
    def test_sample_program(self, sample_program):
        analysis = analyze_document(sample_program)
        metrics = analysis.file_metrics
        assert metrics.cyclomatic_complexity == 3
        assert metrics.class_count == 1
        assert metrics.method_count == 2
        assert metrics.depth_of_inheritance == 1
        assert metrics.average_method_complexity == pytest.approx(1.5)
        assert 0 <= metrics.maintainability_index <= 100
        assert [fn.name for fn in analysis.functions] == ["check", "area"]

    def test_function_complexity(self, sample_program):
        check = analyze_document(sample_program).functions[0]
        assert check.metrics.cyclomatic_complexity == 3
        assert check.metrics.method_count == 1
        assert (check.start_line, check.end_line) == (1, 5)

    def test_malformed_document(self):
        with pytest.raises(TreeFormatError):
            analyze_document({"body": []})

    def test_cycle_policy_from_config(self):
        doc = program(cls("A", superclass="B"), cls("B", superclass="A"))
        assert analyze_document(doc).file_metrics.depth_of_inheritance == 0
        with pytest.raises(InheritanceCycleError):
            analyze_document(doc, AnalysisConfig(inheritance_cycle_policy="raise"))


class TestAnalyzePath:
    def test_reads_file(self, write_tree, sample_program):
        analysis = analyze_path(write_tree(sample_program))
        assert analysis.file_metrics.method_count == 2

    def test_accepts_string_path(self, write_tree, sample_program):
        assert analyze_path(str(write_tree(sample_program))).file_metrics.class_count == 1

    def test_unreadable_file_gives_empty_result(self, tmp_path, caplog):
        caplog.set_level(logging.ERROR, logger="qualytics")
        analysis = analyze_path(tmp_path / "missing.json")
        assert analysis.file_metrics.logical_lines_of_code == 0
        assert analysis.functions == ()
        assert "Failed to load" in caplog.text

    def test_malformed_file_gives_empty_result(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[1, 2", encoding="utf-8")
        assert analyze_path(path).file_metrics.method_count == 0

    def test_strict_propagates(self, tmp_path):
        with pytest.raises(FileAccessError):
            analyze_path(tmp_path / "missing.json", strict=True)
