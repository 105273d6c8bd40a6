import pytest

from rentiva.config.settings import get_settings
from rentiva.core.env import get_project_root, load_dotenv_if_present

_CACHED = (get_settings, get_project_root, load_dotenv_if_present)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    # Settings and env lookups are lru_cached; tests that tweak env vars must not leak into each other.
    for name in (
        "RENTIVA_CONFIG_PATH",
        "RENTIVA_LOG_LEVEL",
        "RENTIVA_LOCALE",
        "RENTIVA_ENV_FILE",
        "RENTIVA_PROJECT_ROOT",
    ):
        monkeypatch.delenv(name, raising=False)
    for fn in _CACHED:
        fn.cache_clear()
    yield
    for fn in _CACHED:
        fn.cache_clear()
