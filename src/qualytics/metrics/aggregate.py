"""File-level aggregation of the individual calculators."""

from __future__ import annotations

from typing import Optional

from ..config import DEFAULT_CONFIG, AnalysisConfig
from ..exceptions import InheritanceCycleError
from ..logging_config import get_logger
from ..nodes import ParentIndex, SyntaxNode
from .complexity import cyclomatic_complexity
from .functions import analyze_functions
from .halstead import halstead_volume
from .loc import count_logical_lines
from .maintainability import maintainability_index
from .models import FileAnalysis, MetricsRecord
from .structure import StructureSummary, analyze_structure, count_classes

logger = get_logger(__name__)


def _structure(root: SyntaxNode, config: AnalysisConfig) -> StructureSummary:
    try:
        return analyze_structure(root)
    except InheritanceCycleError as e:
        if config.inheritance_cycle_policy == "raise":
            raise
        logger.warning(f"{e}; reporting inheritance depth 0")
        return StructureSummary(class_count=count_classes(root), max_inheritance_depth=0)


def analyze_tree(
    root: SyntaxNode,
    config: Optional[AnalysisConfig] = None,
    parents: Optional[ParentIndex] = None,
) -> FileAnalysis:
    """Analyze a whole file tree.

    File-level complexity, volume and LOC are measured over the entire tree,
    nested functions included. The per-function list comes from
    analyze_functions().
    """
    config = config or DEFAULT_CONFIG

    functions = analyze_functions(root, parents=parents, workers=config.workers)

    complexity = cyclomatic_complexity(root)
    volume = halstead_volume(root)
    loc = count_logical_lines(root)
    structure = _structure(root, config)

    file_metrics = MetricsRecord.build(
        loc=loc,
        complexity=complexity,
        maintainability=maintainability_index(volume, complexity, loc),
        depth=structure.max_inheritance_depth,
        classes=structure.class_count,
        methods=len(functions),
    )
    return FileAnalysis(file_metrics=file_metrics, functions=tuple(functions))


def calculate_metrics(root: SyntaxNode, config: Optional[AnalysisConfig] = None) -> MetricsRecord:
    """File-level record only."""
    return analyze_tree(root, config).file_metrics
