"""
Qualytics - static code quality metrics for parsed syntax trees.

Computes logical lines of code, cyclomatic complexity, Halstead volume,
maintainability index and inheritance depth for a file and for every
function, method and arrow function it contains.
"""

__version__ = "0.2.0"

from .api import analyze_document, analyze_path
from .metrics import FileAnalysis, FunctionUnit, MetricsRecord, analyze_tree, calculate_metrics
from .nodes import NodeKind, ParentIndex, Span, SyntaxNode, SyntaxTree

__all__ = [
    "analyze_document",
    "analyze_path",
    "analyze_tree",
    "calculate_metrics",
    "FileAnalysis",
    "FunctionUnit",
    "MetricsRecord",
    "NodeKind",
    "ParentIndex",
    "Span",
    "SyntaxNode",
    "SyntaxTree",
]
