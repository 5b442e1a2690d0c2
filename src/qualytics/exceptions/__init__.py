"""Exception hierarchy for Qualytics."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    InheritanceCycleError,
    TreeFormatError,
)
from .base import QualyticsError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "QualyticsError",
    "AnalysisError",
    "FileAccessError",
    "TreeFormatError",
    "InheritanceCycleError",
    "ConfigurationError",
    "InvalidConfigError",
]
