"""Rich table formatter for Qualytics."""

import io
from typing import List, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..metrics import FunctionUnit, MetricsRecord
from .base import AnalyzedFile, BaseFormatter

COLUMNS = [
    "Scope",
    "Name",
    "Type",
    "Lines",
    "LOC",
    "Complexity",
    "Maintainability",
    "Classes",
    "Methods",
    "Avg Complexity",
    "Inheritance Depth",
]


def _mi_style(score: float) -> str:
    if score >= 60:
        return "green"
    elif score >= 40:
        return "yellow"
    else:
        return "red"


class TableFormatter(BaseFormatter):
    """One row per file followed by one row per function."""

    def render(self, results: Sequence[AnalyzedFile]) -> None:
        Console().print(self.build_table(results))

    def format(self, results: Sequence[AnalyzedFile]) -> str:
        buffer = io.StringIO()
        console = Console(file=buffer, width=200, color_system=None)
        console.print(self.build_table(results))
        return buffer.getvalue()

    def build_table(self, results: Sequence[AnalyzedFile]) -> Table:
        multi = len(results) > 1
        table = Table(title="Code Quality Metrics", show_lines=False)
        if multi:
            table.add_column("File", style="cyan")
        for column in COLUMNS:
            table.add_column(column, justify="left" if column in ("Scope", "Name", "Type") else "right")

        for item in results:
            prefix = [escape(item.path)] if multi else []
            table.add_row(*prefix, *self._file_row(item))
            if self.config.include_functions:
                for fn in item.analysis.functions:
                    table.add_row(*prefix, *self._function_row(fn))
        return table

    def _number(self, value: float) -> str:
        return f"{value:.{self.config.decimals}f}"

    def _maintainability(self, metrics: MetricsRecord) -> str:
        score = metrics.maintainability_index
        return f"[{_mi_style(score)}]{self._number(score)}[/{_mi_style(score)}]"

    def _file_row(self, item: AnalyzedFile) -> List[str]:
        m = item.analysis.file_metrics
        return [
            "file",
            escape(item.path),
            "-",
            "-",
            str(m.logical_lines_of_code),
            str(m.cyclomatic_complexity),
            self._maintainability(m),
            str(m.class_count),
            str(m.method_count),
            self._number(m.average_method_complexity),
            str(m.depth_of_inheritance),
        ]

    def _function_row(self, fn: FunctionUnit) -> List[str]:
        m = fn.metrics
        return [
            "function",
            escape(fn.name),
            fn.kind.value,
            f"{fn.start_line}-{fn.end_line}",
            str(m.logical_lines_of_code),
            str(m.cyclomatic_complexity),
            self._maintainability(m),
            "-",
            str(m.method_count),
            self._number(m.average_method_complexity),
            "-",
        ]
