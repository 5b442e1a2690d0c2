"""JSON formatter for Qualytics."""

import json
from typing import Any, Dict, Sequence

from .base import AnalyzedFile, BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render analyses as JSON.

    A single input renders as ``{"fileMetrics": ..., "functions": [...]}``;
    several inputs render as ``{"files": [{"path": ..., "analysis": ...}]}``.
    """

    def render(self, results: Sequence[AnalyzedFile]) -> None:
        print(self.format(results))

    def format(self, results: Sequence[AnalyzedFile]) -> str:
        if len(results) == 1:
            data: Dict[str, Any] = self._analysis_dict(results[0])
        else:
            data = {
                "files": [
                    {"path": item.path, "analysis": self._analysis_dict(item)}
                    for item in results
                ]
            }
        return json.dumps(data, indent=2)

    def _analysis_dict(self, item: AnalyzedFile) -> Dict[str, Any]:
        data = item.analysis.to_dict()
        if not self.config.include_functions:
            data["functions"] = []
        return data
