"""Base formatter interface for Qualytics output rendering."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import DEFAULT_CONFIG, AnalysisConfig
from ..metrics import FileAnalysis


@dataclass(frozen=True)
class AnalyzedFile:
    """One analyzed input, labelled for display."""

    path: str
    analysis: FileAnalysis


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or DEFAULT_CONFIG

    @abstractmethod
    def render(self, results: Sequence[AnalyzedFile]) -> None:
        """Write formatted results to stdout."""

    @abstractmethod
    def format(self, results: Sequence[AnalyzedFile]) -> str:
        """Return formatted string representation of results."""
