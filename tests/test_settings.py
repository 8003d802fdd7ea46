"""Tests for environment-driven settings."""

from indicator_metrics.config.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("INDICATOR_METRICS_SUPPORT_TICKET_COST", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.currency_symbol == "R$"
        assert settings.support_ticket_cost == 50.0
        assert settings.cors_origins == ["http://localhost:3000"]

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("INDICATOR_METRICS_SUPPORT_TICKET_COST", "35")
        monkeypatch.setenv("INDICATOR_METRICS_LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.support_ticket_cost == 35.0
        assert settings.log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
