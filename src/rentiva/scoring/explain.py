"""
Small explainability formatting helpers.

Used by the CLI to print compact summaries, and by callers that record each
compatibility check on a property's timeline.
"""

from __future__ import annotations

from rentiva.domain.models import CompatibilityResult, TimelineEvent


def one_line_summary(result: CompatibilityResult) -> str:
    """Render a compact single-line summary for a compatibility result."""
    parts = [f"score={result.score}"]
    if not result.conflicts:
        parts.append("no conflicts")
    for c in result.conflicts:
        parts.append(f"{c.key}=-{c.penalty} ({c.severity})")
    return " | ".join(parts)


def build_timeline_event(
    result: CompatibilityResult, *, scope: str = "public", max_message_chars: int = 1900
) -> TimelineEvent:
    """Summarize a result as a timeline entry (title, truncated message, meta)."""
    if result.score == 0:
        title = f"Compatibility ({scope}): conflict"
    else:
        title = f"Compatibility ({scope}): score {result.score}"

    conflicts_text = " | ".join(f"{c.key}: {c.message}" for c in result.conflicts)
    if conflicts_text:
        message = ("Conflicts: " + conflicts_text)[:max_message_chars]
    else:
        message = "No conflicts."

    return TimelineEvent(
        title=title,
        message=message,
        meta={
            "score": result.score,
            "conflictKeys": [c.key for c in result.conflicts],
        },
    )
