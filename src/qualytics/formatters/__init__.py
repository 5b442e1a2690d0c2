"""Output formatters for analysis results."""

from .base import AnalyzedFile, BaseFormatter
from .json_formatter import JsonFormatter
from .table_formatter import TableFormatter

FORMATTERS = {
    "json": JsonFormatter,
    "table": TableFormatter,
}


def get_formatter(name: str, config=None) -> BaseFormatter:
    """Instantiate the formatter registered under `name`."""
    try:
        return FORMATTERS[name](config)
    except KeyError:
        raise ValueError(f"Unknown format '{name}' (expected one of: {', '.join(FORMATTERS)})")


__all__ = [
    "AnalyzedFile",
    "BaseFormatter",
    "JsonFormatter",
    "TableFormatter",
    "FORMATTERS",
    "get_formatter",
]
