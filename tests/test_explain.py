from rentiva.domain.models import OwnerPrefs, TenantAnswers
from rentiva.scoring.compatibility import compute_compatibility
from rentiva.scoring.explain import build_timeline_event, one_line_summary


def test_timeline_event_for_partial_match():
    result = compute_compatibility(OwnerPrefs(smoking="no"), TenantAnswers(smoking="yes"))
    event = build_timeline_event(result)

    assert event.kind == "compatibility"
    assert event.title == "Compatibility (public): score 65"
    assert event.message == "Conflicts: smoking: Owner does not accept smokers."
    assert event.meta == {"score": 65, "conflictKeys": ["smoking"]}


def test_timeline_event_title_says_conflict_at_zero():
    owner = OwnerPrefs(smoking="no", pets="no", max_occupants=1, usage=("family",))
    tenant = TenantAnswers(smoking="yes", pets="yes", occupants=5, usage=("shared",))
    result = compute_compatibility(owner, tenant)

    event = build_timeline_event(result, scope="owner")
    assert result.score == 0
    assert event.title == "Compatibility (owner): conflict"
    assert event.message.count(" | ") == 3


def test_timeline_event_without_conflicts_and_truncation():
    clean = compute_compatibility(OwnerPrefs(pets="yes"), TenantAnswers(pets="yes"))
    assert build_timeline_event(clean).message == "No conflicts."

    noisy = compute_compatibility(OwnerPrefs(smoking="no", pets="no"), TenantAnswers(smoking="yes", pets="yes"))
    assert len(build_timeline_event(noisy, max_message_chars=20).message) == 20


def test_one_line_summary():
    result = compute_compatibility(OwnerPrefs(max_occupants=2), TenantAnswers(occupants=3))
    assert one_line_summary(result) == "score=70 | occupants=-30 (high)"

    clean = compute_compatibility(OwnerPrefs(max_occupants=2), TenantAnswers(occupants=2))
    assert one_line_summary(clean) == "score=100 | no conflicts"
