"""
Smoke Tests for CLI Commands.

These tests verify that the CLI starts, shows help, and refuses to run
without a terminal.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
"""

import pytest
from typer.testing import CliRunner

from casedrill import cli
from casedrill.config import Settings, get_settings
from casedrill.terminal import TerminalError, TerminalScreen

pytestmark = pytest.mark.smoke

runner = CliRunner()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestCLIHelp:
    def test_main_help(self):
        result = runner.invoke(cli.app, ["--help"])

        assert result.exit_code == 0
        assert "naming" in result.output.lower() or "camelcase" in result.output.lower()


class TestCLIPlay:
    def test_requires_tty(self, monkeypatch):
        monkeypatch.setattr(TerminalScreen, "is_interactive", property(lambda self: False))
        result = runner.invoke(cli.app, [])

        assert result.exit_code == 1

    def test_terminal_error_exits_nonzero(self, monkeypatch):
        monkeypatch.setattr(TerminalScreen, "is_interactive", property(lambda self: True))

        def broken_open(self):
            raise TerminalError("no tty")

        monkeypatch.setattr(TerminalScreen, "open", broken_open)
        result = runner.invoke(cli.app, [])

        assert result.exit_code == 1


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("CASEDRILL_LOG_LEVEL", "CASEDRILL_LOG_FILE", "CASEDRILL_SEED"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.seed is None

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("CASEDRILL_SEED", "42")
        monkeypatch.setenv("CASEDRILL_LOG_LEVEL", "DEBUG")

        settings = get_settings()
        assert settings.seed == 42
        assert settings.log_level == "DEBUG"

    def test_log_file_sink(self, tmp_path):
        log_file = tmp_path / "casedrill.log"
        cli.configure_logging(Settings(_env_file=None, log_file=str(log_file), log_level="DEBUG"))
        cli.logger.info("hello from test")
        cli.logger.remove()

        assert "hello from test" in log_file.read_text()
