"""Result models for the metrics engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


def finite_or_zero(value: float) -> float:
    """Coerce NaN and +/-inf to 0 so they never reach a result."""
    if value is None or not math.isfinite(value):
        return 0
    return value


class FunctionKind(str, Enum):
    """How a function-like unit was declared."""

    FUNCTION = "function"
    METHOD = "method"
    ARROW = "arrow"


@dataclass(frozen=True)
class MetricsRecord:
    """Metrics for one analyzed unit (a whole file or one function).

    Attributes:
        logical_lines_of_code: Countable statements/declarations
        cyclomatic_complexity: McCabe complexity incl. logical operators
        maintainability_index: Composite score in [0, 100]
        depth_of_inheritance: Longest extends/implements chain (0 for functions)
        class_count: Declared classes
        method_count: Function-like units (1 for a function record)
        average_method_complexity: complexity / method_count, 0 without methods
    """

    logical_lines_of_code: int = 0
    cyclomatic_complexity: int = 0
    maintainability_index: float = 0.0
    depth_of_inheritance: int = 0
    class_count: int = 0
    method_count: int = 0
    average_method_complexity: float = 0.0

    @classmethod
    def build(
        cls,
        *,
        loc: float,
        complexity: float,
        maintainability: float,
        depth: float = 0,
        classes: float = 0,
        methods: float = 0,
    ) -> "MetricsRecord":
        """Assemble a record, normalizing every value to a finite number."""
        average = complexity / methods if methods > 0 else 0.0
        return cls(
            logical_lines_of_code=int(finite_or_zero(loc)),
            cyclomatic_complexity=int(finite_or_zero(complexity)),
            maintainability_index=float(finite_or_zero(maintainability)),
            depth_of_inheritance=int(finite_or_zero(depth)),
            class_count=int(finite_or_zero(classes)),
            method_count=int(finite_or_zero(methods)),
            average_method_complexity=float(finite_or_zero(average)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "linesOfCode": self.logical_lines_of_code,
            "cyclomaticComplexity": self.cyclomatic_complexity,
            "maintainabilityIndex": self.maintainability_index,
            "depthOfInheritance": self.depth_of_inheritance,
            "classCount": self.class_count,
            "methodCount": self.method_count,
            "averageMethodComplexity": self.average_method_complexity,
        }


@dataclass(frozen=True)
class FunctionUnit:
    """A discovered function, method or arrow function with its metrics."""

    name: str
    kind: FunctionKind
    start_line: int
    end_line: int
    metrics: MetricsRecord

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.kind.value,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "metrics": self.metrics.to_dict(),
        }


@dataclass(frozen=True)
class FileAnalysis:
    """File-level metrics plus per-function metrics sorted by start line."""

    file_metrics: MetricsRecord
    functions: Tuple[FunctionUnit, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.functions, tuple):
            object.__setattr__(self, "functions", tuple(self.functions))
        if self.file_metrics.method_count != len(self.functions):
            raise ValueError(
                f"method_count ({self.file_metrics.method_count}) does not match "
                f"number of functions ({len(self.functions)})"
            )
        starts = [fn.start_line for fn in self.functions]
        if starts != sorted(starts):
            raise ValueError("functions must be ordered by start_line")

    @classmethod
    def empty(cls) -> "FileAnalysis":
        """Zero result used when no syntax tree could be obtained."""
        return cls(file_metrics=MetricsRecord(), functions=())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fileMetrics": self.file_metrics.to_dict(),
            "functions": [fn.to_dict() for fn in self.functions],
        }
