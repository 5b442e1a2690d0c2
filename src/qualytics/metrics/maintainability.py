"""Maintainability index.

    MI = max(0, (171 - 5.2 ln V - 0.23 CC - 16.2 ln LOC) * 100 / 171)

Logarithms of non-positive inputs are taken as 0.
"""

import math

from .models import finite_or_zero


def maintainability_index(volume: float, complexity: float, loc: float) -> float:
    """Score in [0, 100]; higher is easier to maintain."""
    volume_log = math.log(volume) if volume > 0 else 0.0
    loc_log = math.log(loc) if loc > 0 else 0.0

    raw = 171 - 5.2 * volume_log - 0.23 * complexity - 16.2 * loc_log
    return finite_or_zero(max(0.0, raw * 100 / 171))
