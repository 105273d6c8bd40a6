"""
Rentiva CLI entrypoint.

This CLI is intended for quick local checks and debugging without the API.
It delegates all logic to `rentiva.preferences` and `rentiva.scoring`.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from rentiva.config.overrides import apply_settings_overrides
from rentiva.config.settings import get_settings
from rentiva.core.logging import configure_logging
from rentiva.preferences.normalize import normalize_owner_prefs, normalize_tenant_answers
from rentiva.preferences.presence import ensure_owner_prefs_set, has_any_owner_prefs
from rentiva.scoring.compatibility import compute_compatibility
from rentiva.scoring.explain import build_timeline_event, one_line_summary


def _read_json(path: str) -> Any:
    """Read a JSON document from a file path (`-` reads stdin)."""
    if path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _cmd_score(args: argparse.Namespace) -> int:
    """Handle the `score` subcommand."""
    settings = get_settings()
    if args.locale:
        settings = apply_settings_overrides(settings, {"compatibility": {"locale": args.locale}})
    cfg = settings.compatibility

    owner = normalize_owner_prefs(
        _read_json(args.owner), usage_tags=cfg.usage_tags, max_usage_tags=cfg.max_usage_tags
    )
    ensure_owner_prefs_set(owner)
    tenant = normalize_tenant_answers(
        _read_json(args.tenant), usage_tags=cfg.usage_tags, max_usage_tags=cfg.max_usage_tags
    )

    result = compute_compatibility(owner, tenant, policy=cfg)

    if args.json:
        print(json.dumps(result.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2))
        return 0

    event = build_timeline_event(
        result,
        scope=args.scope or settings.timeline.default_scope,
        max_message_chars=settings.timeline.message_max_chars,
    )
    print(event.title)
    print(one_line_summary(result))
    for dim in result.breakdown.values():
        print(f"  - {dim.key}: penalty={dim.penalty} severity={dim.severity}  {dim.message}")
    return 0


def _cmd_normalize(args: argparse.Namespace) -> int:
    cfg = get_settings().compatibility
    raw = _read_json(args.path)
    payload: dict[str, Any]
    if args.kind == "owner":
        prefs = normalize_owner_prefs(raw, usage_tags=cfg.usage_tags, max_usage_tags=cfg.max_usage_tags)
        payload = {"prefs": prefs.model_dump(mode="json", by_alias=True), "configured": has_any_owner_prefs(prefs)}
    else:
        answers = normalize_tenant_answers(raw, usage_tags=cfg.usage_tags, max_usage_tags=cfg.max_usage_tags)
        payload = {"answers": answers.model_dump(mode="json", by_alias=True)}
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


def _cmd_vocabulary(_: argparse.Namespace) -> int:
    cfg = get_settings().compatibility
    print(json.dumps({"usage": list(cfg.usage_tags), "max_usage_tags": cfg.max_usage_tags}, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the Rentiva CLI."""
    parser = argparse.ArgumentParser(prog="rentiva")
    sub = parser.add_subparsers(dest="command", required=True)

    sc = sub.add_parser("score", help="Score tenant answers against owner preferences (JSON files).")
    sc.add_argument("--owner", required=True, help="Owner preferences JSON file ('-' for stdin)")
    sc.add_argument("--tenant", required=True, help="Tenant answers JSON file ('-' for stdin)")
    sc.add_argument("--locale", choices=["en", "el"], default=None, help="Message language")
    sc.add_argument("--scope", type=str, default=None, help="Label used in the summary title")
    sc.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    sc.set_defaults(func=_cmd_score)

    norm = sub.add_parser("normalize", help="Print the canonical form of an owner/tenant record.")
    norm.add_argument("kind", choices=["owner", "tenant"])
    norm.add_argument("path", help="JSON file ('-' for stdin)")
    norm.set_defaults(func=_cmd_normalize)

    voc = sub.add_parser("vocabulary", help="List accepted usage tags.")
    voc.set_defaults(func=_cmd_vocabulary)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m rentiva.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except (ValueError, OSError) as e:
        # Bad payloads and unreadable files are user errors.
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
