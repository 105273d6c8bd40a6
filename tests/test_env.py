import os

import pytest

from rentiva.config.settings import get_settings
from rentiva.core.env import get_project_root, load_dotenv_if_present, resolve_project_path


@pytest.fixture
def dotenv_names(monkeypatch):
    # load_dotenv writes straight into os.environ; registering the names lets monkeypatch remove them afterwards.
    names = ("RENTIVA_DOTENV_ONLY", "RENTIVA_DOTENV_SHADOWED")
    for name in names:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return names


def _clear_caches():
    for fn in (get_settings, get_project_root, load_dotenv_if_present):
        fn.cache_clear()


def test_env_file_never_overrides_process_variables(monkeypatch, tmp_path, dotenv_names):
    env_file = tmp_path / "local.env"
    env_file.write_text("RENTIVA_DOTENV_ONLY=from-file\nRENTIVA_DOTENV_SHADOWED=from-file\n", encoding="utf-8")
    monkeypatch.setenv("RENTIVA_DOTENV_SHADOWED", "from-process")
    monkeypatch.setenv("RENTIVA_ENV_FILE", str(env_file))
    _clear_caches()

    assert load_dotenv_if_present() == env_file.resolve()
    assert os.environ["RENTIVA_DOTENV_ONLY"] == "from-file"
    assert os.environ["RENTIVA_DOTENV_SHADOWED"] == "from-process"


def test_env_file_sets_project_root(monkeypatch, tmp_path):
    monkeypatch.setenv("RENTIVA_ENV_FILE", str(tmp_path / "deploy" / ".env"))
    _clear_caches()

    assert get_project_root() == (tmp_path / "deploy").resolve()
    # The named file does not exist, so nothing is loaded.
    assert load_dotenv_if_present() is None


def test_project_root_override_wins_over_env_file(monkeypatch, tmp_path):
    monkeypatch.setenv("RENTIVA_PROJECT_ROOT", str(tmp_path))
    monkeypatch.setenv("RENTIVA_ENV_FILE", str(tmp_path / "elsewhere" / ".env"))
    _clear_caches()

    assert get_project_root() == tmp_path.resolve()


def test_project_root_search_walks_up_to_marker(monkeypatch, tmp_path, dotenv_names):
    (tmp_path / ".git").mkdir()
    (tmp_path / ".env").write_text("RENTIVA_DOTENV_ONLY=root-env\n", encoding="utf-8")
    nested = tmp_path / "services" / "api"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    _clear_caches()

    assert get_project_root() == tmp_path.resolve()
    assert load_dotenv_if_present() == tmp_path.resolve() / ".env"
    assert os.environ["RENTIVA_DOTENV_ONLY"] == "root-env"


def test_relative_config_path_resolves_against_project_root(monkeypatch, tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "local.yaml").write_text(
        "compatibility:\n  penalties:\n    usage_mismatch: 7\n", encoding="utf-8"
    )
    monkeypatch.setenv("RENTIVA_PROJECT_ROOT", str(tmp_path))
    monkeypatch.setenv("RENTIVA_CONFIG_PATH", "config/local.yaml")
    _clear_caches()

    assert resolve_project_path("config/local.yaml") == (tmp_path / "config" / "local.yaml").resolve()
    assert get_settings().compatibility.penalties.usage_mismatch == 7


def test_absolute_paths_are_left_alone(tmp_path):
    target = tmp_path / "rentiva.yaml"
    assert resolve_project_path(target) == target
