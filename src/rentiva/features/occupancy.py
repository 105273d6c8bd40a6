"""Occupants dimension: tenant household size against the owner's maximum."""

from __future__ import annotations

from rentiva.config.settings import CompatibilitySettings
from rentiva.domain.models import DimensionResult, OwnerPrefs, TenantAnswers
from rentiva.features.messages import message


def score_occupants(owner: OwnerPrefs, tenant: TenantAnswers, *, policy: CompatibilitySettings) -> DimensionResult:
    limit = owner.max_occupants
    count = tenant.occupants

    if limit is None or count is None:
        penalty, severity, outcome = 0, "neutral", "neutral"
    elif count > limit:
        penalty, severity, outcome = policy.penalties.occupants_exceeded, "high", "exceeded"
    else:
        # Reaching the maximum exactly is fine.
        penalty, severity, outcome = 0, "ok", "ok"

    return DimensionResult(
        key="occupants",
        penalty=penalty,
        severity=severity,
        message=message("occupants", outcome, policy.locale),
        owner_value=limit,
        tenant_value=count,
    )
