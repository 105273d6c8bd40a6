from __future__ import annotations


# Overrides come from JSON payloads (dict-like objects), so typing stays flexible here
# and shape problems are reported as ValueError with a dotted key path.
from typing import Any, Mapping

from rentiva.config.settings import CompatibilityPenalties, Settings

"""
Per-request settings overrides (safe subset).

The API can send `settings_overrides` to tune certain knobs for a single
compatibility check. This module:
- validates the override payload against a whitelist,
- deep-merges the safe subset onto current settings,
- re-validates with Pydantic to ensure types/ranges remain correct.

The usage vocabulary and its cap are deliberately not overridable: they define which
inputs are valid at all, and a request must not be able to widen them.
"""

# Which parts of the global Settings object can be overridden per request.
#
# How to read this structure:
# - A value of True means "allow any keys under this subtree".
# - A nested dict means "only allow the listed keys, recursively".
ALLOWED_SETTINGS_OVERRIDES_TREE: dict[str, Any] = {
    "compatibility": {
        # Message language only changes presentation.
        "locale": True,
        # Penalties are numeric knobs; Pydantic re-validation keeps them non-negative.
        # Listing each name makes a misspelled penalty fail with its dotted path.
        "penalties": {name: True for name in CompatibilityPenalties.model_fields},
    },
}


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    # A new dict keeps the caller's `base` (usually the cached settings dump) untouched.
    merged: dict[str, Any] = dict(base)
    for key, override_value in override.items():
        # Both sides are mappings: merge recursively so nested keys override cleanly.
        if isinstance(override_value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = _deep_merge(dict(merged[key]), override_value)
            continue
        # Otherwise the override replaces the base value.
        merged[key] = override_value
    return merged


def _filter_overrides(
    overrides: Mapping[str, Any],
    *,
    allowed_tree: Mapping[str, Any],
    path: tuple[str, ...] = (),
) -> dict[str, Any]:
    # Only whitelisted keys survive; any unknown key raises with its full path.
    filtered: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in allowed_tree:
            dotted_path = ".".join((*path, key))
            raise ValueError(
                f"settings_overrides contains a disallowed key: '{dotted_path}'"
            )

        allowed = allowed_tree[key]
        if allowed is True:
            filtered[key] = value
            continue

        # A restricted subtree must be a mapping we can recurse into.
        if not isinstance(value, Mapping):
            dotted_path = ".".join((*path, key))
            raise ValueError(
                f"settings_overrides key '{dotted_path}' must be a mapping"
            )

        filtered[key] = _filter_overrides(
            value, allowed_tree=allowed, path=(*path, key)
        )
    return filtered


def apply_settings_overrides(
    settings: Settings, overrides: Mapping[str, Any] | None
) -> Settings:
    # No overrides: return the original Settings unchanged (fast path).
    if not overrides:
        return settings

    safe_overrides = _filter_overrides(
        overrides, allowed_tree=ALLOWED_SETTINGS_OVERRIDES_TREE
    )

    merged_payload = _deep_merge(settings.model_dump(mode="python"), safe_overrides)

    # Re-validate so we never run with an invalid Settings object
    # (Pydantic's ValidationError is a ValueError subclass).
    return Settings.model_validate(merged_payload)
