"""
Usage-profile dimension.

The owner lists the household types the property suits (family, students, ...); the tenant
lists the ones that describe them. Sharing at least one tag is enough. Only two non-empty
lists can conflict; if either side gave nothing the dimension stays neutral.
"""

from __future__ import annotations

from rentiva.config.settings import CompatibilitySettings
from rentiva.domain.models import DimensionResult, OwnerPrefs, TenantAnswers
from rentiva.features.messages import message


def score_usage(owner: OwnerPrefs, tenant: TenantAnswers, *, policy: CompatibilitySettings) -> DimensionResult:
    owner_tags = owner.usage
    tenant_tags = tenant.usage or ()

    if not owner_tags or not tenant_tags:
        penalty, severity, outcome = 0, "neutral", "neutral"
    elif set(owner_tags) & set(tenant_tags):
        penalty, severity, outcome = 0, "ok", "ok"
    else:
        penalty, severity, outcome = policy.penalties.usage_mismatch, "medium", "mismatch"

    return DimensionResult(
        key="usage",
        penalty=penalty,
        severity=severity,
        message=message("usage", outcome, policy.locale),
        owner_value=owner.usage,
        tenant_value=tenant.usage,
    )
