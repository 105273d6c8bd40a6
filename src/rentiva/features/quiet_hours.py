"""
Quiet-hours dimension.

The owner states "quiet after HH"; the tenant states how late they are usually active.
Clock hours cannot be compared directly across midnight: 01:00 is later into the night
than 23:00. Both hours are mapped onto a "night scale" first, where hours before noon
count as the next day (h + 24). A tenant hour strictly later than the owner's cutoff is
a conflict; `quiet_hours_strict` decides how severe it is.
"""

from __future__ import annotations

from rentiva.config.settings import CompatibilitySettings
from rentiva.domain.models import DimensionResult, OwnerPrefs, TenantAnswers
from rentiva.features.messages import message

NOON = 12


def night_scale(hour: int) -> int:
    """Map a clock hour so that early-morning hours sort after evening hours."""
    return hour + 24 if hour < NOON else hour


def score_quiet_hours(owner: OwnerPrefs, tenant: TenantAnswers, *, policy: CompatibilitySettings) -> DimensionResult:
    owner_hour = owner.quiet_hours_after
    tenant_hour = tenant.quiet_hours_after

    if owner_hour is None or tenant_hour is None:
        penalty, severity, outcome = 0, "neutral", "neutral"
    elif night_scale(tenant_hour) > night_scale(owner_hour):
        if owner.quiet_hours_strict:
            penalty, severity, outcome = policy.penalties.quiet_hours_strict, "high", "strict"
        else:
            penalty, severity, outcome = policy.penalties.quiet_hours_soft, "medium", "soft"
    else:
        penalty, severity, outcome = 0, "ok", "ok"

    return DimensionResult(
        key="quietHours",
        penalty=penalty,
        severity=severity,
        message=message("quietHours", outcome, policy.locale),
        owner_value=owner_hour,
        tenant_value=tenant_hour,
    )
