"""
Errors raised by the compatibility engine.

Both subclass `ValueError`, so callers that only care about "the client sent something
unusable" can keep a single `except ValueError` (the API maps both to HTTP 400).
"""

from __future__ import annotations


class InvalidInput(ValueError):
    """A raw preference/answer field could not be coerced into its domain."""

    def __init__(self, field: str) -> None:
        super().__init__(f"invalid {field}")
        self.field = field


class OwnerPrefsNotSet(ValueError):
    """Scoring was requested against an owner record with no configured preference."""

    def __init__(self) -> None:
        super().__init__("tenant preferences not set")
