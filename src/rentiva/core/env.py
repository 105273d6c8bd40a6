"""
Environment + project-root helpers.

Settings read a few `RENTIVA_*` variables, and `RENTIVA_CONFIG_PATH` may be relative.
Both need a stable anchor no matter where the CLI, the API server or pytest was started:

- `get_project_root()`: `RENTIVA_PROJECT_ROOT`, else the directory of `RENTIVA_ENV_FILE`,
  else the nearest parent of the CWD holding `.env`, `.git` or `pyproject.toml`
- `load_dotenv_if_present()`: load `RENTIVA_ENV_FILE` or `<root>/.env` once, without
  overriding variables the process already has
- `resolve_project_path()`: anchor a relative path at the project root
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT_VAR = "RENTIVA_PROJECT_ROOT"
ENV_FILE_VAR = "RENTIVA_ENV_FILE"

_ROOT_MARKERS = (".env", ".git", "pyproject.toml")


@lru_cache
def get_project_root() -> Path:
    """Return the project root directory (cached)."""
    override = os.getenv(PROJECT_ROOT_VAR)
    if override:
        return Path(override).expanduser().resolve()

    env_file = os.getenv(ENV_FILE_VAR)
    if env_file:
        return Path(env_file).expanduser().resolve().parent

    cwd = Path.cwd().resolve()
    for candidate in (cwd, *cwd.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return cwd


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load the env file once; returns its path, or None when there is none."""
    explicit = os.getenv(ENV_FILE_VAR)
    env_path = Path(explicit).expanduser().resolve() if explicit else get_project_root() / ".env"
    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a possibly-relative path against the project root."""
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return (get_project_root() / p).resolve()
