"""
Tests for the booklib command line interface.
"""

import subprocess
from unittest.mock import MagicMock

from typer.testing import CliRunner

from booklib import cli
from booklib.cli import app
from booklib.config import load_config
from booklib.repl.shell import LibraryShell


runner = CliRunner()


class TestAbout:
    def test_about(self):
        result = runner.invoke(app, ["about"])
        assert result.exit_code == 0
        assert "Book Library Manager" in result.stdout
        assert "booklib ui" in result.stdout

    def test_verbose_flag(self):
        result = runner.invoke(app, ["-v", "about"])
        assert result.exit_code == 0
        assert "Verbose mode enabled." in result.stdout


class TestUiCommand:
    def test_runs_streamlit_with_config_defaults(self, monkeypatch):
        run_mock = MagicMock()
        monkeypatch.setattr(cli.subprocess, "run", run_mock)

        result = runner.invoke(app, ["ui"])
        assert result.exit_code == 0
        assert "Starting booklib" in result.stdout

        command = run_mock.call_args[0][0]
        assert command[1:4] == ["-m", "streamlit", "run"]
        assert command[4] == str(cli.APP_SCRIPT)
        assert command[command.index("--server.port") + 1] == "8501"
        assert command[command.index("--server.address") + 1] == "localhost"
        assert command[command.index("--server.headless") + 1] == "false"
        assert run_mock.call_args[1] == {"check": True}

    def test_overrides_and_no_open(self, monkeypatch):
        run_mock = MagicMock()
        monkeypatch.setattr(cli.subprocess, "run", run_mock)

        result = runner.invoke(app, ["ui", "--host", "0.0.0.0", "--port", "9000", "--no-open"])
        assert result.exit_code == 0

        command = run_mock.call_args[0][0]
        assert command[command.index("--server.port") + 1] == "9000"
        assert command[command.index("--server.address") + 1] == "0.0.0.0"
        assert command[command.index("--server.headless") + 1] == "true"

    def test_streamlit_failure_exits_non_zero(self, monkeypatch):
        run_mock = MagicMock(side_effect=subprocess.CalledProcessError(3, ["streamlit"]))
        monkeypatch.setattr(cli.subprocess, "run", run_mock)

        result = runner.invoke(app, ["ui"])
        assert result.exit_code == 3
        assert "Command exited with code 3" in result.stdout

    def test_interrupt_stops_server(self, monkeypatch):
        monkeypatch.setattr(cli.subprocess, "run", MagicMock(side_effect=KeyboardInterrupt))

        result = runner.invoke(app, ["ui"])
        assert result.exit_code == 0
        assert "Server stopped" in result.stdout


class TestConfigCommand:
    def test_show_by_default(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "booklib Configuration" in result.stdout
        assert "8501" in result.stdout

    def test_init(self, isolated_config):
        result = runner.invoke(app, ["config", "--init"])
        assert result.exit_code == 0
        assert isolated_config.exists()

    def test_set_values(self):
        result = runner.invoke(app, ["config", "--server-port", "9100", "--no-server-auto-open", "--layout", "wide"])
        assert result.exit_code == 0
        assert "Configuration updated" in result.stdout

        cfg = load_config()
        assert cfg.server.port == 9100
        assert cfg.server.auto_open_browser is False
        assert cfg.ui.layout == "wide"

    def test_invalid_layout(self):
        result = runner.invoke(app, ["config", "--layout", "sideways"])
        assert result.exit_code == 1
        assert "Invalid input" in result.stdout


class TestShellCommand:
    def test_shell_starts_loop(self, monkeypatch):
        run_mock = MagicMock()
        monkeypatch.setattr(LibraryShell, "run", run_mock)

        result = runner.invoke(app, ["shell"])
        assert result.exit_code == 0
        run_mock.assert_called_once()
