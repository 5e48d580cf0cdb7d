"""
Tests for configuration management
"""

import pytest

from ledger_values import config as config_module
from ledger_values.config import LedgerValuesConfig, get_config, reload_config


class TestLedgerValuesConfig:
    """Test configuration defaults and environment overrides"""

    def test_defaults(self, monkeypatch):
        """Test default values"""
        for name in ("LOG_LEVEL", "LOG_FORMAT", "ACCOUNTS_FILE", "DEFAULT_ALPHABET"):
            monkeypatch.delenv(f"LEDGER_VALUES_{name}", raising=False)

        cfg = LedgerValuesConfig()
        assert cfg.log_level == "INFO"
        assert cfg.log_format == "json"
        assert cfg.accounts_file is None
        assert cfg.default_alphabet == "ripple"

    def test_environment_override(self, monkeypatch):
        """Test LEDGER_VALUES_ prefixed variables"""
        monkeypatch.setenv("LEDGER_VALUES_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LEDGER_VALUES_DEFAULT_ALPHABET", "bitcoin")

        cfg = LedgerValuesConfig()
        assert cfg.log_level == "DEBUG"
        assert cfg.default_alphabet == "bitcoin"

    def test_invalid_values(self):
        """Test validation of enumerated settings"""
        with pytest.raises(ValueError):
            LedgerValuesConfig(log_format="xml")
        with pytest.raises(ValueError):
            LedgerValuesConfig(default_alphabet="base64")

    def test_frozen(self):
        """Test that configuration cannot be changed after construction"""
        cfg = LedgerValuesConfig()
        with pytest.raises(Exception):
            cfg.log_level = "DEBUG"

    def test_reload(self, monkeypatch):
        """Test reloading the global instance"""
        monkeypatch.setenv("LEDGER_VALUES_LOG_FORMAT", "text")
        try:
            reloaded = reload_config()
            assert reloaded.log_format == "text"
            assert get_config() is reloaded
            assert config_module.config is reloaded
        finally:
            monkeypatch.delenv("LEDGER_VALUES_LOG_FORMAT")
            reload_config()
