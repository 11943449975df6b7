import pytest

from app.core.config import Settings
from app.schemas.common import AgentLevel


class TestSettings:
    """Verify environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        for name in ("DEBUG", "LOG_LEVEL", "CORS_ORIGINS", "DEFAULT_AGENT_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.DEBUG is False
        assert settings.effective_log_level == "INFO"
        assert settings.DEFAULT_AGENT_LEVEL is AgentLevel.INITIAL
        assert settings.PROJECTION_RATE_LIMIT == "30/minute"

    def test_log_level_is_used_when_not_debugging(self):
        settings = Settings(_env_file=None, DEBUG=False, LOG_LEVEL="WARNING")
        assert settings.effective_log_level == "WARNING"

    def test_debug_overrides_log_level(self):
        settings = Settings(_env_file=None, DEBUG=True, LOG_LEVEL="WARNING")
        assert settings.effective_log_level == "DEBUG"

    def test_values_come_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("DEFAULT_AGENT_LEVEL", "experto")

        settings = Settings(_env_file=None)

        assert settings.effective_log_level == "DEBUG"
        assert settings.DEFAULT_AGENT_LEVEL is AgentLevel.EXPERT
