"""
Compatibility scorer.

Combines one normalized `OwnerPrefs` and one normalized `TenantAnswers` into a
`CompatibilityResult`:

1) run every dimension evaluator in `DIMENSION_ORDER` (each is a pure function
   returning an immutable `DimensionResult`)
2) start from 100 and subtract each penalty, clamping at 0 after every step
3) list the penalized dimensions as conflicts, in evaluation order

Inputs must already be normalized (see `rentiva.preferences.normalize`); the scorer does
not re-validate them and raises nothing of its own.
"""

from __future__ import annotations

import logging
from typing import Callable

from rentiva.config.settings import CompatibilitySettings
from rentiva.domain.models import CompatibilityResult, DimensionKey, DimensionResult, OwnerPrefs, PrefsUsed, TenantAnswers
from rentiva.features.habits import score_pets, score_smoking
from rentiva.features.occupancy import score_occupants
from rentiva.features.quiet_hours import score_quiet_hours
from rentiva.features.usage import score_usage
from rentiva.scoring.composite import DIMENSION_ORDER, MAX_SCORE, clamp_score

logger = logging.getLogger(__name__)

DimensionScorer = Callable[..., DimensionResult]

DIMENSION_SCORERS: dict[DimensionKey, DimensionScorer] = {
    "smoking": score_smoking,
    "pets": score_pets,
    "usage": score_usage,
    "quietHours": score_quiet_hours,
    "occupants": score_occupants,
}


def compute_compatibility(
    owner: OwnerPrefs,
    tenant: TenantAnswers,
    *,
    policy: CompatibilitySettings | None = None,
) -> CompatibilityResult:
    """Score a tenant against an owner's preferences (pure, deterministic)."""
    if policy is None:
        policy = CompatibilitySettings()

    breakdown: dict[DimensionKey, DimensionResult] = {
        key: DIMENSION_SCORERS[key](owner, tenant, policy=policy) for key in DIMENSION_ORDER
    }

    # Penalties are non-negative, so clamping per step equals clamping once at the end.
    score = MAX_SCORE
    for result in breakdown.values():
        score = clamp_score(score - result.penalty)

    conflicts = [r for r in breakdown.values() if r.is_conflict]
    logger.debug("Compatibility score=%s conflicts=%s", score, [c.key for c in conflicts])

    return CompatibilityResult(
        score=score,
        conflicts=conflicts,
        breakdown=breakdown,
        prefs_used=PrefsUsed(owner=owner, tenant=tenant),
    )
