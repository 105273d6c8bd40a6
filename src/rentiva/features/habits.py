"""
Smoking and pets dimensions.

Both are yes/no habits checked against an owner preference of yes/no/either:
- owner "no", tenant "yes"  -> the owner does not accept it (larger penalty, high severity)
- owner "yes", tenant "no"  -> the owner would prefer it (smaller penalty)
- same answer               -> ok
- owner "either" or tenant silent -> neutral, no penalty
"""

from __future__ import annotations

from rentiva.config.settings import CompatibilitySettings
from rentiva.domain.models import DimensionKey, DimensionResult, OwnerPrefs, Severity, TenantAnswers
from rentiva.features.messages import message


def _score_habit(
    key: DimensionKey,
    owner_choice: str,
    tenant_choice: str | None,
    *,
    not_accepted: tuple[int, Severity],
    preferred: tuple[int, Severity],
    locale: str,
) -> DimensionResult:
    if owner_choice == "either" or tenant_choice is None:
        penalty, severity, outcome = 0, "neutral", "neutral"
    elif owner_choice == "no" and tenant_choice == "yes":
        (penalty, severity), outcome = not_accepted, "not_accepted"
    elif owner_choice == "yes" and tenant_choice == "no":
        (penalty, severity), outcome = preferred, "preferred"
    else:
        penalty, severity, outcome = 0, "ok", "ok"

    return DimensionResult(
        key=key,
        penalty=penalty,
        severity=severity,
        message=message(key, outcome, locale),
        owner_value=owner_choice,
        tenant_value=tenant_choice,
    )


def score_smoking(owner: OwnerPrefs, tenant: TenantAnswers, *, policy: CompatibilitySettings) -> DimensionResult:
    p = policy.penalties
    return _score_habit(
        "smoking",
        owner.smoking,
        tenant.smoking,
        not_accepted=(p.smoking_not_accepted, "high"),
        preferred=(p.smoking_preferred, "medium"),
        locale=policy.locale,
    )


def score_pets(owner: OwnerPrefs, tenant: TenantAnswers, *, policy: CompatibilitySettings) -> DimensionResult:
    p = policy.penalties
    return _score_habit(
        "pets",
        owner.pets,
        tenant.pets,
        not_accepted=(p.pets_not_accepted, "high"),
        preferred=(p.pets_preferred, "low"),
        locale=policy.locale,
    )
