from __future__ import annotations

# We use pytest because the repository already standardizes on it for automated checks.
import pytest

# We import the existing Settings loader so tests run with the real default config structure.
from rentiva.config.settings import get_settings

# We test the override helper directly because it is pure (no I/O) and guards what clients may change.
from rentiva.config.overrides import apply_settings_overrides

# Scoring and domain models let the locale test check the messages a caller would actually see.
from rentiva.domain.models import OwnerPrefs, TenantAnswers
from rentiva.scoring.compatibility import compute_compatibility


def test_apply_settings_overrides_returns_same_object_when_none():
    # Load the baseline settings once (this is a cached Pydantic model).
    settings = get_settings()

    # When no overrides are provided, we expect a no-op and the same object back (fast path).
    out = apply_settings_overrides(settings, None)

    # Identity equality is intentional here: the function returns early without rebuilding the model.
    assert out is settings


def test_apply_settings_overrides_can_override_allowed_penalties():
    # Load the baseline settings (do not mutate it; it is shared via lru_cache).
    settings = get_settings()

    # Override an allowed knob: the penalty for a smoker when the owner does not accept smokers.
    overrides = {"compatibility": {"penalties": {"smoking_not_accepted": 50}}}

    # Apply the override; this returns a NEW Settings model validated by Pydantic.
    out = apply_settings_overrides(settings, overrides)

    # The override should take effect on the returned model, and siblings keep their defaults.
    assert out.compatibility.penalties.smoking_not_accepted == 50
    assert out.compatibility.penalties.pets_not_accepted == 25

    # The original shared settings should remain unchanged (important to avoid cross-request leakage).
    assert settings.compatibility.penalties.smoking_not_accepted == 35


def test_apply_settings_overrides_rejects_disallowed_keys_with_clear_path():
    settings = get_settings()

    # The usage vocabulary decides which inputs are valid at all, so a request may not widen it.
    overrides = {"compatibility": {"usage_tags": ["family", "pets_only"]}}

    # Note: in regex, a literal dot must be escaped as `\.` (a raw string avoids double escaping).
    with pytest.raises(ValueError, match=r"compatibility\.usage_tags"):
        apply_settings_overrides(settings, overrides)


def test_apply_settings_overrides_rejects_wrong_value_shapes_for_restricted_subtrees():
    settings = get_settings()

    # `compatibility` is a restricted subtree, so its override must be an object/mapping.
    overrides = {"compatibility": 1}

    with pytest.raises(ValueError, match=r"settings_overrides key 'compatibility' must be a mapping"):
        apply_settings_overrides(settings, overrides)


def test_apply_settings_overrides_revalidates_values():
    settings = get_settings()

    # Negative penalties would break score clamping; Pydantic rejects them (ValidationError is a ValueError).
    with pytest.raises(ValueError):
        apply_settings_overrides(settings, {"compatibility": {"penalties": {"usage_mismatch": -1}}})


def test_apply_settings_overrides_rejects_misspelled_penalty_with_clear_path():
    settings = get_settings()

    # `smoking` is not a penalty name (the real ones are `smoking_not_accepted` / `smoking_preferred`).
    # Accepting it silently would leave the intended penalty at its default.
    with pytest.raises(ValueError, match=r"compatibility\.penalties\.smoking'"):
        apply_settings_overrides(settings, {"compatibility": {"penalties": {"smoking": 50}}})


def test_apply_settings_overrides_accepts_locales_without_a_catalog():
    settings = get_settings()

    # Locale is normalized but not restricted; message lookup falls back to English.
    out = apply_settings_overrides(settings, {"compatibility": {"locale": " FR "}})
    assert out.compatibility.locale == "fr"

    result = compute_compatibility(
        OwnerPrefs(smoking="no"), TenantAnswers(smoking="yes"), policy=out.compatibility
    )
    assert result.conflicts[0].message == "Owner does not accept smokers."
