import pytest

from rentiva.domain.errors import OwnerPrefsNotSet
from rentiva.domain.models import OwnerPrefs
from rentiva.preferences.presence import ensure_owner_prefs_set, has_any_owner_prefs


def test_all_default_owner_has_no_prefs():
    owner = OwnerPrefs(smoking="either", pets="either", usage=(), quiet_hours_after=None, max_occupants=None)
    assert has_any_owner_prefs(owner) is False
    assert has_any_owner_prefs(None) is False


@pytest.mark.parametrize(
    "owner",
    [
        OwnerPrefs(smoking="no"),
        OwnerPrefs(pets="yes"),
        OwnerPrefs(usage=("family",)),
        OwnerPrefs(quiet_hours_after=0),
        OwnerPrefs(max_occupants=1),
    ],
)
def test_any_single_configured_field_counts(owner):
    assert has_any_owner_prefs(owner) is True


def test_strict_flag_alone_does_not_count():
    assert has_any_owner_prefs(OwnerPrefs(quiet_hours_strict=True)) is False


def test_ensure_owner_prefs_set():
    owner = OwnerPrefs(max_occupants=2)
    assert ensure_owner_prefs_set(owner) is owner
    with pytest.raises(OwnerPrefsNotSet, match="tenant preferences not set"):
        ensure_owner_prefs_set(OwnerPrefs())
