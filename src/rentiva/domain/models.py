"""
Domain models (Pydantic).

These types represent the stable "contract" between layers:
- normalized inputs (`OwnerPrefs`, `TenantAnswers`)
- explainable scoring output (`DimensionResult`, `CompatibilityResult`)
- the timeline summary callers may log or store (`TimelineEvent`)
- the API request envelope (`CompatibilityRequest`)

All models are frozen and serialize with camelCase aliases (`quietHoursAfter`,
`ownerValue`, ...) so JSON output matches what web clients send and expect.
Python code uses the snake_case attribute names; both spellings validate.

Owner and tenant records are deliberately separate types:
- an owner who never answered a question is *indifferent* (`either`, empty usage, False)
- a tenant who never answered a question is *silent* (`None`)
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

OwnerChoice = Literal["yes", "no", "either"]
TenantChoice = Literal["yes", "no"]
DimensionKey = Literal["smoking", "pets", "usage", "quietHours", "occupants"]
Severity = Literal["ok", "neutral", "low", "medium", "high"]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class OwnerPrefs(_Record):
    """Landlord-configured tolerances for one property."""

    smoking: OwnerChoice = "either"
    pets: OwnerChoice = "either"
    usage: tuple[str, ...] = ()
    quiet_hours_after: int | None = Field(default=None, ge=0, le=23)
    quiet_hours_strict: bool = False
    max_occupants: int | None = Field(default=None, ge=1, le=20)


class TenantAnswers(_Record):
    """A prospective tenant's self-reported attributes for one check."""

    smoking: TenantChoice | None = None
    pets: TenantChoice | None = None
    usage: tuple[str, ...] | None = None
    quiet_hours_after: int | None = Field(default=None, ge=0, le=23)
    occupants: int | None = Field(default=None, ge=1, le=20)


class DimensionResult(_Record):
    """One evaluated dimension; appears in `breakdown` always and in `conflicts` when penalized."""

    key: DimensionKey
    penalty: int = Field(..., ge=0)
    severity: Severity
    message: str
    owner_value: Any = None
    tenant_value: Any = None

    @property
    def is_conflict(self) -> bool:
        return self.penalty > 0


class PrefsUsed(_Record):
    owner: OwnerPrefs
    tenant: TenantAnswers


class CompatibilityResult(_Record):
    """Score (0..100), ordered conflicts and the full per-dimension breakdown."""

    score: int = Field(..., ge=0, le=100)
    conflicts: list[DimensionResult] = Field(default_factory=list)
    breakdown: dict[DimensionKey, DimensionResult] = Field(default_factory=dict)
    prefs_used: PrefsUsed

    @model_validator(mode="after")
    def _validate_conflicts(self) -> "CompatibilityResult":
        expected = [d for d in self.breakdown.values() if d.is_conflict]
        if list(self.conflicts) != expected:
            raise ValueError("conflicts must be the penalized breakdown entries in evaluation order")
        return self


class TimelineEvent(_Record):
    """Summary of one compatibility check, shaped like a property timeline entry."""

    kind: Literal["compatibility"] = "compatibility"
    title: str
    message: str
    meta: dict[str, Any] = Field(default_factory=dict)


class CompatibilityRequest(BaseModel):
    """API payload: raw owner prefs + raw tenant answers (normalized server-side)."""

    # Raw records stay untyped here so shape errors surface as `InvalidInput`
    # from the normalizer instead of a generic 422.
    owner: Any = None
    tenant: Any = None
    scope: str | None = None
    settings_overrides: dict[str, Any] | None = None
