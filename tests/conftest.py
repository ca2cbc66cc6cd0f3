import pytest

from booklib import config as config_module


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the user's real config file."""
    path = tmp_path / "config" / "booklib" / "config.json"
    monkeypatch.setattr(config_module, "get_config_path", lambda: path)
    return path
