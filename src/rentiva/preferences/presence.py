"""Presence check: has the owner configured anything worth scoring against?"""

from __future__ import annotations

from rentiva.domain.errors import OwnerPrefsNotSet
from rentiva.domain.models import OwnerPrefs


def has_any_owner_prefs(owner: OwnerPrefs | None) -> bool:
    """True iff at least one owner field differs from its neutral default."""
    if owner is None:
        return False
    return (
        owner.smoking != "either"
        or owner.pets != "either"
        or bool(owner.usage)
        or owner.quiet_hours_after is not None
        or owner.max_occupants is not None
    )


def ensure_owner_prefs_set(owner: OwnerPrefs | None) -> OwnerPrefs:
    """Return `owner` unchanged, or raise `OwnerPrefsNotSet` if it is all defaults.

    Note: `quiet_hours_strict` alone does not count; it only qualifies an hour.
    """
    if owner is None or not has_any_owner_prefs(owner):
        raise OwnerPrefsNotSet()
    return owner
