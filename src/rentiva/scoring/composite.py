"""
Shared scoring utilities.

Small, reusable helpers used by the compatibility scorer:
- `clamp_score`: keep the running score within 0..100
- `DIMENSION_ORDER`: the fixed evaluation (and conflict-listing) order
"""

from __future__ import annotations

from rentiva.domain.models import DimensionKey

MAX_SCORE = 100

DIMENSION_ORDER: tuple[DimensionKey, ...] = ("smoking", "pets", "usage", "quietHours", "occupants")


def clamp_score(x: int) -> int:
    """Clamp an integer score into the [0, 100] range."""
    return max(0, min(MAX_SCORE, int(x)))
