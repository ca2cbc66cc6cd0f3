"""Tests for configuration loading and saving."""

import json

import pytest

from booklib import config as config_module
from booklib.config import (
    BookLibConfig, ensure_config_exists, get_config_path, load_config, save_config,
    update_config,
)


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "booklib" / "config.json"
    monkeypatch.setattr(config_module, "get_config_path", lambda: path)
    return path


def test_defaults_when_missing(config_path):
    cfg = load_config()
    assert cfg == BookLibConfig()
    assert cfg.server.port == 8501
    assert cfg.ui.layout == "centered"
    assert cfg.ui.page_title == "Book Library"


def test_roundtrip(config_path):
    cfg = BookLibConfig()
    cfg.ui.page_title = "Shelf"
    cfg.server.port = 9000

    assert save_config(cfg) == config_path
    assert load_config() == cfg


def test_malformed_file_falls_back_to_defaults(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("{not json")
    assert load_config() == BookLibConfig()


def test_unknown_keys_ignored(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text(json.dumps({
        "server": {"port": 7000, "workers": 4},
        "llm": {"model": "x"},
    }))
    cfg = load_config()
    assert cfg.server.port == 7000
    assert cfg.ui == BookLibConfig().ui


def test_ensure_config_exists(config_path):
    assert ensure_config_exists() == config_path
    data = json.loads(config_path.read_text())
    assert set(data) == {"ui", "server", "cli"}


def test_update_only_changes_given_values(config_path):
    update_config(server_port=9100)
    update_config(cli_verbose=True)

    cfg = load_config()
    assert cfg.server.port == 9100
    assert cfg.cli.verbose is True
    assert cfg.server.host == "localhost"


def test_update_rejects_unknown_layout(config_path):
    with pytest.raises(ValueError):
        update_config(ui_layout="sideways")
    assert not config_path.exists()


def test_get_config_path_prefers_xdg(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module.Path, "home", lambda: tmp_path)
    assert get_config_path() == tmp_path / ".booklib" / "config.json"

    (tmp_path / ".config").mkdir()
    assert get_config_path() == tmp_path / ".config" / "booklib" / "config.json"
