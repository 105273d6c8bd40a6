"""
Human-readable dimension messages.

Messages are looked up by `(dimension, outcome)`; the locale comes from
`settings.compatibility.locale`. `el` carries the Greek texts shown by the
Rentiva web client; unknown locales fall back to English.
"""

from __future__ import annotations

MessageKey = tuple[str, str]

_EN: dict[MessageKey, str] = {
    ("smoking", "not_accepted"): "Owner does not accept smokers.",
    ("smoking", "preferred"): "Owner prefers smokers.",
    ("smoking", "ok"): "Smoking: OK.",
    ("smoking", "neutral"): "No smoking information provided.",
    ("pets", "not_accepted"): "Owner does not accept pets.",
    ("pets", "preferred"): "Owner prefers tenants with pets.",
    ("pets", "ok"): "Pets: OK.",
    ("pets", "neutral"): "No pets information provided.",
    ("usage", "mismatch"): "Different usage/profile type.",
    ("usage", "ok"): "Common usage profile.",
    ("usage", "neutral"): "No usage information provided.",
    ("quietHours", "strict"): "Incompatible: strict quiet hours after the stated time.",
    ("quietHours", "soft"): "Possible conflict with quiet hours.",
    ("quietHours", "ok"): "Quiet hours: OK.",
    ("quietHours", "neutral"): "No quiet hours information provided.",
    ("occupants", "exceeded"): "Exceeds maximum occupant count.",
    ("occupants", "ok"): "Occupant count: OK.",
    ("occupants", "neutral"): "No occupant information provided.",
}

_EL: dict[MessageKey, str] = {
    ("smoking", "not_accepted"): "Ο ιδιοκτήτης δεν δέχεται καπνιστές.",
    ("smoking", "preferred"): "Ο ιδιοκτήτης προτιμά καπνιστές.",
    ("smoking", "ok"): "ΟΚ στο κάπνισμα.",
    ("smoking", "neutral"): "Δεν ορίστηκε/δόθηκε πληροφορία για κάπνισμα.",
    ("pets", "not_accepted"): "Ο ιδιοκτήτης δεν δέχεται κατοικίδια.",
    ("pets", "preferred"): "Ο ιδιοκτήτης προτιμά κατοικίδια.",
    ("pets", "ok"): "ΟΚ στα κατοικίδια.",
    ("pets", "neutral"): "Δεν ορίστηκε/δόθηκε πληροφορία για κατοικίδια.",
    ("usage", "mismatch"): "Διαφορετικός τύπος χρήσης/προφίλ.",
    ("usage", "ok"): "Υπάρχει κοινό προφίλ χρήσης.",
    ("usage", "neutral"): "Δεν ορίστηκε/δόθηκε πληροφορία για χρήση.",
    ("quietHours", "strict"): "Ασυμβατότητα: αυστηρή ησυχία μετά την ώρα.",
    ("quietHours", "soft"): "Πιθανή σύγκρουση στις ώρες ησυχίας.",
    ("quietHours", "ok"): "ΟΚ στις ώρες ησυχίας.",
    ("quietHours", "neutral"): "Δεν ορίστηκε/δόθηκε πληροφορία για ώρες ησυχίας.",
    ("occupants", "exceeded"): "Υπέρβαση μέγιστου αριθμού ατόμων.",
    ("occupants", "ok"): "ΟΚ στον αριθμό ατόμων.",
    ("occupants", "neutral"): "Δεν ορίστηκε/δόθηκε πληροφορία για άτομα.",
}

CATALOGS: dict[str, dict[MessageKey, str]] = {"en": _EN, "el": _EL}


def message(dimension: str, outcome: str, locale: str = "en") -> str:
    catalog = CATALOGS.get(locale, _EN)
    return catalog[(dimension, outcome)]
