"""Tests for configuration."""

import logging

import pytest

from hogar.audit import configure_logging
from hogar.config import (
    AppSettings,
    HouseholdSettings,
    PlannerSettings,
    get_settings,
    validate_all_settings,
)


class TestSettings:
    """Tests for the pydantic-settings classes."""

    def test_household_defaults(self, monkeypatch):
        """Test the default seed amounts."""
        for name in ("HOGAR_FUND_GOAL", "HOGAR_RENT_AMOUNT", "HOGAR_GARAGE_AMOUNT"):
            monkeypatch.delenv(name, raising=False)
        settings = HouseholdSettings()
        assert settings.fund_goal == 350000
        assert settings.rent_amount == 900000
        assert settings.garage_amount == 180000

    def test_household_from_env(self, monkeypatch):
        """Test values are read from prefixed environment variables."""
        monkeypatch.setenv("HOGAR_FUND_GOAL", "400000")
        assert HouseholdSettings().fund_goal == 400000

    def test_negative_budget_rejected(self, monkeypatch):
        """Test the default budget cannot be negative."""
        monkeypatch.setenv("PLANNER_DEFAULT_MONTHLY_BUDGET", "-1")
        with pytest.raises(ValueError):
            PlannerSettings()

    def test_log_level_normalized(self):
        """Test log levels are upper-cased."""
        assert AppSettings(log_level="debug").log_level == "DEBUG"

    def test_log_level_rejected(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValueError, match="Unsupported log level"):
            AppSettings(log_level="chatty")

    def test_validate_all_settings(self, monkeypatch):
        """Test startup validation reports every section."""
        monkeypatch.setenv("HOGAR_FUND_GOAL", "not-a-number")
        get_settings.cache_clear()
        results = validate_all_settings()
        assert results["household"] is False
        assert "household_error" in results
        assert results["planner"] is True
        assert results["app"] is True
        get_settings.cache_clear()


class TestConfigureLogging:
    """Tests for applying the configured log level."""

    @pytest.fixture(autouse=True)
    def reset_level(self):
        yield
        logging.getLogger("hogar").setLevel(logging.NOTSET)

    def test_log_level_applied(self):
        """Test the configured level reaches the package loggers."""
        applied = configure_logging(AppSettings(log_level="debug"))
        assert applied == "DEBUG"
        assert logging.getLogger("hogar.planning.planner").isEnabledFor(logging.DEBUG)

    def test_debug_mode_overrides_level(self):
        """Test debug mode forces DEBUG."""
        applied = configure_logging(AppSettings(log_level="ERROR", debug_mode=True))
        assert applied == "DEBUG"
        assert logging.getLogger("hogar").level == logging.DEBUG

    def test_higher_level_silences_info(self):
        """Test an ERROR level drops info audit events."""
        configure_logging(AppSettings(log_level="ERROR", debug_mode=False))
        assert not logging.getLogger("hogar.audit").isEnabledFor(logging.INFO)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
