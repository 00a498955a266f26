"""
Test suite for configuration module

Tests environment-based settings.
"""

from checked_ledger.config import CheckedLedgerConfig, get_config, reload_config


class TestCheckedLedgerConfig:
    """Test settings loading"""

    def test_defaults(self, monkeypatch):
        """Test default logging settings"""
        for var in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE", "LOGGER_NAME"):
            monkeypatch.delenv(f"CHECKED_LEDGER_{var}", raising=False)

        settings = CheckedLedgerConfig(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.log_file is None
        assert settings.logger_name == "checked_ledger"

    def test_environment_override(self, monkeypatch):
        """Test values read from prefixed environment variables"""
        monkeypatch.setenv("CHECKED_LEDGER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("checked_ledger_log_file", "/tmp/ledger.log")

        settings = CheckedLedgerConfig(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.log_file == "/tmp/ledger.log"

    def test_reload_replaces_global(self, monkeypatch):
        """Test that reload_config picks up environment changes"""
        original = get_config()
        monkeypatch.setenv("CHECKED_LEDGER_LOG_FORMAT", "text")
        try:
            reloaded = reload_config()
            assert reloaded is get_config()
            assert reloaded is not original
            assert get_config().log_format == "text"
        finally:
            monkeypatch.undo()
            reload_config()
