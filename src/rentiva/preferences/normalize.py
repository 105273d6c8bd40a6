"""
Input normalization for compatibility checks.

Raw owner preferences come from a stored property record; raw tenant answers come from a
request body. Both can be partial, carry extra keys, or use loose types (string numbers,
"yes"/"1" booleans, comma-separated tag lists). This module coerces them into the canonical
`OwnerPrefs` / `TenantAnswers` models or raises `InvalidInput` naming the first bad field.

Rules shared by both entry points:
- enum strings are trimmed and matched case-insensitively; blank means "not given"
- numbers may be int/float/numeric strings; they must be finite, are truncated toward zero
  and range-checked; booleans are not accepted as numbers
- usage tags are trimmed, lower-cased, de-duplicated (first seen wins) and capped

Defaulting differs on purpose: a missing owner field becomes the owner's neutral value,
a missing tenant field stays `None`.

Every field is parsed before a model is built, so a failure never leaks a half-built record.
"""

from __future__ import annotations

import math
import re
from typing import Any, Iterable, Mapping

from rentiva.domain.errors import InvalidInput
from rentiva.domain.models import OwnerPrefs, TenantAnswers

USAGE_TAGS: tuple[str, ...] = ("family", "remote_work", "students", "single", "couple", "shared")
MAX_USAGE_TAGS = 10

OWNER_CHOICES = frozenset({"yes", "no", "either"})
TENANT_CHOICES = frozenset({"yes", "no"})

HOUR_RANGE = (0, 23)
OCCUPANTS_RANGE = (1, 20)

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})

# ASCII decimal only; float() alone would also accept "1_0" or Arabic-Indic digits.
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _as_mapping(raw: Any) -> Mapping[str, Any]:
    if raw is None:
        return {}
    if isinstance(raw, (OwnerPrefs, TenantAnswers)):
        # Already normalized: re-run the rules over its wire form (idempotent).
        return raw.model_dump(by_alias=True)
    if not isinstance(raw, Mapping):
        raise InvalidInput("payload")
    return raw


def _pick(raw: Mapping[str, Any], wire_key: str, attr_key: str) -> Any:
    if wire_key in raw:
        return raw[wire_key]
    return raw.get(attr_key)


def _clean_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _choice(value: Any, field: str, allowed: frozenset[str]) -> str | None:
    s = _clean_str(value).lower()
    if not s:
        return None
    if s not in allowed:
        raise InvalidInput(field)
    return s


def _bounded_int(value: Any, field: str, lo: int, hi: int) -> int | None:
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if not _DECIMAL.fullmatch(text):
            raise InvalidInput(field)
        number = float(text)
    elif isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(field)
    else:
        number = value

    if isinstance(number, float):
        if not math.isfinite(number):
            raise InvalidInput(field)
        number = math.trunc(number)

    if number < lo or number > hi:
        raise InvalidInput(field)
    return int(number)


def _flag(value: Any, field: str) -> bool | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        if value == 1:
            return True
        if value == 0:
            return False
        raise InvalidInput(field)
    s = _clean_str(value).lower()
    if not s:
        return None
    if s in _TRUE_STRINGS:
        return True
    if s in _FALSE_STRINGS:
        return False
    raise InvalidInput(field)


def _usage(value: Any, vocabulary: frozenset[str], cap: int) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        items: Iterable[Any] = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = value
    else:
        items = [value]

    out: list[str] = []
    for item in items:
        tag = _clean_str(item).lower()
        if not tag:
            continue
        if tag not in vocabulary:
            raise InvalidInput("usage")
        if tag not in out:
            out.append(tag)
        if len(out) >= cap:
            # Entries past the cap are dropped unchecked.
            break
    return tuple(out)


def normalize_owner_prefs(
    raw: Any,
    *,
    usage_tags: Iterable[str] = USAGE_TAGS,
    max_usage_tags: int = MAX_USAGE_TAGS,
) -> OwnerPrefs:
    """Coerce a raw owner-preference record into `OwnerPrefs` (missing fields -> neutral)."""
    data = _as_mapping(raw)
    smoking = _choice(_pick(data, "smoking", "smoking"), "smoking", OWNER_CHOICES)
    pets = _choice(_pick(data, "pets", "pets"), "pets", OWNER_CHOICES)
    usage = _usage(_pick(data, "usage", "usage"), frozenset(usage_tags), max_usage_tags)
    quiet_hours_after = _bounded_int(
        _pick(data, "quietHoursAfter", "quiet_hours_after"), "quietHoursAfter", *HOUR_RANGE
    )
    quiet_hours_strict = _flag(_pick(data, "quietHoursStrict", "quiet_hours_strict"), "quietHoursStrict")
    max_occupants = _bounded_int(
        _pick(data, "maxOccupants", "max_occupants"), "maxOccupants", *OCCUPANTS_RANGE
    )

    return OwnerPrefs(
        smoking=smoking or "either",
        pets=pets or "either",
        usage=usage,
        quiet_hours_after=quiet_hours_after,
        quiet_hours_strict=bool(quiet_hours_strict),
        max_occupants=max_occupants,
    )


def normalize_tenant_answers(
    raw: Any,
    *,
    usage_tags: Iterable[str] = USAGE_TAGS,
    max_usage_tags: int = MAX_USAGE_TAGS,
) -> TenantAnswers:
    """Coerce a raw tenant-answer record into `TenantAnswers` (missing fields stay `None`)."""
    data = _as_mapping(raw)
    smoking = _choice(_pick(data, "smoking", "smoking"), "smoking", TENANT_CHOICES)
    pets = _choice(_pick(data, "pets", "pets"), "pets", TENANT_CHOICES)
    usage = _usage(_pick(data, "usage", "usage"), frozenset(usage_tags), max_usage_tags)
    quiet_hours_after = _bounded_int(
        _pick(data, "quietHoursAfter", "quiet_hours_after"), "quietHoursAfter", *HOUR_RANGE
    )
    occupants = _bounded_int(_pick(data, "occupants", "occupants"), "occupants", *OCCUPANTS_RANGE)

    return TenantAnswers(
        smoking=smoking,
        pets=pets,
        usage=usage or None,
        quiet_hours_after=quiet_hours_after,
        occupants=occupants,
    )
