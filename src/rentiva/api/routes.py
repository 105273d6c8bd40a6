"""
API routes.

Endpoints:
- POST `/api/compatibility`: normalize owner prefs + tenant answers and score them.
- POST `/api/owner-prefs/normalize`: canonical owner prefs + whether any are configured.
- POST `/api/tenant-answers/normalize`: canonical tenant answers.
- GET  `/api/compatibility/vocabulary`: accepted enum values, usage tags and numeric ranges.
- GET  `/api/settings`: public scoring settings.
- GET  `/api/health`: liveness probe.

The API is stateless: owner prefs arrive in the request (callers read them from wherever
property records live), and the timeline summary is logged, not stored.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException

from rentiva.config.overrides import apply_settings_overrides
from rentiva.config.settings import Settings, get_settings
from rentiva.domain.errors import InvalidInput, OwnerPrefsNotSet
from rentiva.domain.models import CompatibilityRequest, CompatibilityResult
from rentiva.preferences.normalize import (
    HOUR_RANGE,
    OCCUPANTS_RANGE,
    OWNER_CHOICES,
    TENANT_CHOICES,
    normalize_owner_prefs,
    normalize_tenant_answers,
)
from rentiva.preferences.presence import ensure_owner_prefs_set, has_any_owner_prefs
from rentiva.scoring.compatibility import compute_compatibility
from rentiva.scoring.explain import build_timeline_event

logger = logging.getLogger(__name__)

router = APIRouter()


def _invalid_input(e: InvalidInput, *, source: str) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"code": "INVALID_INPUT", "source": source, "field": e.field, "message": str(e)},
    )


def _owner_prefs(raw: Any, settings: Settings):
    cfg = settings.compatibility
    try:
        return normalize_owner_prefs(raw, usage_tags=cfg.usage_tags, max_usage_tags=cfg.max_usage_tags)
    except InvalidInput as e:
        raise _invalid_input(e, source="owner") from e


def _tenant_answers(raw: Any, settings: Settings):
    cfg = settings.compatibility
    try:
        return normalize_tenant_answers(raw, usage_tags=cfg.usage_tags, max_usage_tags=cfg.max_usage_tags)
    except InvalidInput as e:
        raise _invalid_input(e, source="tenant") from e


@router.get("/api/health")
def get_health() -> dict:
    return {"status": "ok"}


@router.post("/api/compatibility", response_model=CompatibilityResult)
def post_compatibility(request: CompatibilityRequest) -> CompatibilityResult:
    """Run one compatibility check and log its timeline summary."""
    try:
        settings = apply_settings_overrides(get_settings(), request.settings_overrides)
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={"code": "VALIDATION_ERROR", "message": str(e)},
        ) from e

    owner = _owner_prefs(request.owner, settings)
    try:
        ensure_owner_prefs_set(owner)
    except OwnerPrefsNotSet as e:
        raise HTTPException(
            status_code=400,
            detail={"code": "OWNER_PREFS_NOT_SET", "message": str(e)},
        ) from e
    tenant = _tenant_answers(request.tenant, settings)

    result = compute_compatibility(owner, tenant, policy=settings.compatibility)

    event = build_timeline_event(
        result,
        scope=request.scope or settings.timeline.default_scope,
        max_message_chars=settings.timeline.message_max_chars,
    )
    logger.info("%s. %s", event.title, event.message)
    return result


@router.post("/api/owner-prefs/normalize")
def post_owner_prefs_normalize(raw: Any = Body(default=None)) -> dict:
    """Return canonical owner prefs; `configured` tells whether scoring is meaningful yet."""
    prefs = _owner_prefs(raw, get_settings())
    return {"prefs": prefs.model_dump(mode="json", by_alias=True), "configured": has_any_owner_prefs(prefs)}


@router.post("/api/tenant-answers/normalize")
def post_tenant_answers_normalize(raw: Any = Body(default=None)) -> dict:
    answers = _tenant_answers(raw, get_settings())
    return {"answers": answers.model_dump(mode="json", by_alias=True)}


@router.get("/api/compatibility/vocabulary")
def get_vocabulary() -> dict:
    """Describe accepted input values (used by forms to build their choices)."""
    cfg = get_settings().compatibility
    return {
        "owner": {
            "smoking": sorted(OWNER_CHOICES),
            "pets": sorted(OWNER_CHOICES),
            "quietHoursAfter": {"min": HOUR_RANGE[0], "max": HOUR_RANGE[1]},
            "maxOccupants": {"min": OCCUPANTS_RANGE[0], "max": OCCUPANTS_RANGE[1]},
        },
        "tenant": {
            "smoking": sorted(TENANT_CHOICES),
            "pets": sorted(TENANT_CHOICES),
            "quietHoursAfter": {"min": HOUR_RANGE[0], "max": HOUR_RANGE[1]},
            "occupants": {"min": OCCUPANTS_RANGE[0], "max": OCCUPANTS_RANGE[1]},
        },
        "usage": {"tags": list(cfg.usage_tags), "max": cfg.max_usage_tags},
    }


@router.get("/api/settings")
def get_public_settings() -> dict:
    """Return the scoring knobs currently in effect (nothing here is secret)."""
    settings = get_settings()
    return {
        "app": {"name": settings.app.name},
        "compatibility": settings.compatibility.model_dump(mode="json"),
        "timeline": settings.timeline.model_dump(mode="json"),
    }
