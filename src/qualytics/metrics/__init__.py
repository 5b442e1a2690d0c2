"""Metrics engine: calculators over SyntaxNode trees and their aggregation."""

from .aggregate import analyze_tree, calculate_metrics
from .complexity import cyclomatic_complexity
from .functions import analyze_functions, function_metrics
from .halstead import HalsteadCounts, gather_halstead, halstead_volume
from .loc import count_logical_lines
from .maintainability import maintainability_index
from .models import FileAnalysis, FunctionKind, FunctionUnit, MetricsRecord
from .structure import StructureSummary, analyze_structure, count_classes, inheritance_depths

__all__ = [
    "analyze_tree",
    "calculate_metrics",
    "cyclomatic_complexity",
    "analyze_functions",
    "function_metrics",
    "HalsteadCounts",
    "gather_halstead",
    "halstead_volume",
    "count_logical_lines",
    "maintainability_index",
    "FileAnalysis",
    "FunctionKind",
    "FunctionUnit",
    "MetricsRecord",
    "StructureSummary",
    "analyze_structure",
    "count_classes",
    "inheritance_depths",
]
