"""Analysis-related exceptions: tree loading, file access, type graphs."""

from pathlib import Path
from typing import Iterable, Optional

from .base import QualyticsError


class AnalysisError(QualyticsError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class TreeFormatError(AnalysisError):
    """Raised when a serialized syntax tree does not have the expected shape."""

    def __init__(self, reason: str, location: Optional[str] = None):
        details = {"reason": reason}
        if location:
            details["location"] = location
        super().__init__("Malformed syntax tree", details=details)
        self.reason = reason
        self.location = location


class InheritanceCycleError(AnalysisError):
    """Raised when inheritance depths do not converge (cyclic type graph)."""

    def __init__(self, type_names: Iterable[str], passes: int):
        names = sorted(set(type_names))
        super().__init__(
            "Inheritance graph did not converge",
            details={"types": ", ".join(names), "passes": str(passes)},
        )
        self.type_names = names
        self.passes = passes
