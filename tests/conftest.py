import pytest

from tagscope.config import settings as settings_module
from tagscope.config.environment import Environment


@pytest.fixture(autouse=True)
def _reset_environment():
    """Drop cached settings so every test resolves configuration afresh."""
    Environment.reset()
    yield
    Environment.reset()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the settings file and .env lookup at a temporary directory."""
    config_dir = tmp_path / "config"

    def _system_file_path(filename: str):
        return config_dir / filename

    monkeypatch.setattr(settings_module, "get_system_file_path", _system_file_path)
    monkeypatch.chdir(tmp_path)
    for key in ("ENV", "LOG_LEVEL", "DEBUG", "TAGSCOPE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return config_dir
