"""
Tests for the memfs CLI commands.
"""

import pytest
from unittest.mock import patch
from typer.testing import CliRunner

from memfs import cli
from memfs.cli import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    """Keep CLI config writes inside a temporary folder."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setattr(cli.console, "no_color", cli.console.no_color)
    return tmp_path


class TestTreeCommand:
    """Tests for the tree command."""

    def test_tree_root(self):
        result = runner.invoke(app, ["tree"])

        assert result.exit_code == 0
        assert "documents" in result.output
        assert "downloads" in result.output

    def test_tree_path(self):
        result = runner.invoke(app, ["tree", "/documents/work"])

        assert result.exit_code == 0
        assert "report1.pdf" in result.output
        assert "projects" not in result.output

    def test_tree_not_found(self):
        result = runner.invoke(app, ["tree", "/missing"])

        assert result.exit_code == 1


class TestConfigCommand:
    """Tests for the config command."""

    def test_show(self):
        result = runner.invoke(app, ["config", "--show"])

        assert result.exit_code == 0
        assert "server.port" in result.output

    def test_update(self, config_home):
        result = runner.invoke(app, ["config", "--port", "9001"])

        assert result.exit_code == 0
        assert (config_home / "memfs" / "config.json").exists()

        from memfs.config import load_config
        assert load_config().server.port == 9001

    def test_no_color_applies_to_console(self):
        result = runner.invoke(app, ["config", "--no-color"])
        assert result.exit_code == 0

        from memfs.config import load_config
        assert load_config().cli.color is False

        with patch("memfs.repl.FileSystemShell.run"):
            runner.invoke(app, ["shell"])
        assert cli.console.no_color is True

    def test_color_by_default(self):
        runner.invoke(app, ["about"])

        assert cli.console.no_color is False

    def test_shell_gets_cli_console(self):
        with patch("memfs.repl.FileSystemShell") as mock_shell:
            runner.invoke(app, ["shell"])

        assert mock_shell.call_args.kwargs["console"] is cli.console


class TestServeCommand:
    """Tests for the serve command."""

    def test_serve_uses_config_defaults(self):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0
        kwargs = mock_run.call_args.kwargs
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8080

    def test_serve_overrides(self):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "9999"])

        assert result.exit_code == 0
        assert mock_run.call_args.kwargs["port"] == 9999


def test_about():
    result = runner.invoke(app, ["about"])

    assert result.exit_code == 0
    assert "memfs" in result.output


def test_shell_runs_until_exit():
    with patch("memfs.repl.FileSystemShell.run") as mock_run:
        result = runner.invoke(app, ["shell"])

    assert result.exit_code == 0
    mock_run.assert_called_once()
