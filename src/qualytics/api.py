"""Public API for Qualytics.

Example:
    >>> from qualytics import analyze_path
    >>> analysis = analyze_path("build/ast/service.json")
    >>> analysis.file_metrics.cyclomatic_complexity
    14
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .config import AnalysisConfig
from .estree import load_tree, load_tree_file
from .exceptions import AnalysisError
from .logging_config import get_logger
from .metrics import FileAnalysis, analyze_tree

logger = get_logger(__name__)


def analyze_document(
    document: Dict[str, Any], config: Optional[AnalysisConfig] = None
) -> FileAnalysis:
    """Analyze an already-decoded ESTree document.

    Raises:
        TreeFormatError: If the document is not a tree of typed nodes
    """
    tree = load_tree(document)
    return analyze_tree(tree.root, config=config, parents=tree.parents)


def analyze_path(
    path: Union[str, Path],
    config: Optional[AnalysisConfig] = None,
    strict: bool = False,
) -> FileAnalysis:
    """Analyze an ESTree JSON file.

    A file that cannot be read or converted yields FileAnalysis.empty() and
    an error log entry, unless `strict` is set, in which case the error
    propagates.
    """
    try:
        tree = load_tree_file(path)
    except AnalysisError as e:
        if strict:
            raise
        logger.error(f"Failed to load {path}: {e}")
        return FileAnalysis.empty()
    return analyze_tree(tree.root, config=config, parents=tree.parents)
