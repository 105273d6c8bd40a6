# src/rentiva/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/rentiva/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `RENTIVA_LOG_LEVEL`, `RENTIVA_LOCALE`)
- an external YAML file via `RENTIVA_CONFIG_PATH`

Design rule:
- Tuning knobs (penalties, vocabulary, limits) live in YAML, not hard-coded in business logic.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from rentiva.core.env import load_dotenv_if_present, resolve_project_path


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `rentiva.config`."""
    text = resources.files("rentiva.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "Rentiva"
    log_level: str = "INFO"


class CompatibilityPenalties(BaseModel):
    """Points subtracted from 100 per dimension conflict.

    Every penalty is non-negative: the scorer clamps at 0 after each step, which only
    matches "clamp once at the end" while no dimension can add points back.
    """

    # A misspelled penalty in YAML would otherwise silently keep its default.
    model_config = ConfigDict(extra="forbid")

    smoking_not_accepted: int = Field(35, ge=0, le=100)
    smoking_preferred: int = Field(15, ge=0, le=100)
    pets_not_accepted: int = Field(25, ge=0, le=100)
    pets_preferred: int = Field(10, ge=0, le=100)
    usage_mismatch: int = Field(20, ge=0, le=100)
    quiet_hours_strict: int = Field(20, ge=0, le=100)
    quiet_hours_soft: int = Field(10, ge=0, le=100)
    occupants_exceeded: int = Field(30, ge=0, le=100)


class CompatibilitySettings(BaseModel):
    # Message language; locales without a catalog fall back to English at lookup time.
    locale: str = "en"
    usage_tags: list[str] = Field(
        default_factory=lambda: ["family", "remote_work", "students", "single", "couple", "shared"]
    )
    max_usage_tags: int = Field(10, ge=1)
    penalties: CompatibilityPenalties = Field(default_factory=CompatibilityPenalties)

    @field_validator("locale")
    @classmethod
    def _normalize_locale(cls, value: str) -> str:
        return value.strip().lower() or "en"


class TimelineSettings(BaseModel):
    default_scope: str = "public"
    message_max_chars: int = Field(1900, ge=1)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    compatibility: CompatibilitySettings = Field(default_factory=CompatibilitySettings)
    timeline: TimelineSettings = Field(default_factory=TimelineSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Note: We intentionally keep this whitelist small.
    """
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("RENTIVA_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    locale = os.getenv("RENTIVA_LOCALE")
    if locale:
        data.setdefault("compatibility", {})["locale"] = locale.strip().lower()

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("RENTIVA_CONFIG_PATH")
    raw = _read_yaml_file(resolve_project_path(config_path)) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
