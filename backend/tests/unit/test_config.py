"""Unit tests for settings loading"""

from faxintent.config import Settings, get_settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("AUDIT_BACKEND", raising=False)
        monkeypatch.delenv("MAX_ALTERNATIVES", raising=False)

        settings = Settings(_env_file=None)

        assert settings.AUDIT_ENABLED is True
        assert settings.AUDIT_BACKEND == "log"
        assert settings.ALTERNATIVE_MIN_CONFIDENCE == 0.3
        assert settings.MAX_ALTERNATIVES == 2
        assert settings.CONTEXT_CONFIDENCE_WITH_ANNOTATIONS == 0.8
        assert settings.CONTEXT_CONFIDENCE_WITHOUT_ANNOTATIONS == 0.5
        assert settings.CLARIFICATION_THRESHOLD == 0.6

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("AUDIT_BACKEND", "database")
        monkeypatch.setenv("MAX_ALTERNATIVES", "1")
        monkeypatch.setenv("AUDIT_ENABLED", "false")

        settings = Settings(_env_file=None)

        assert settings.AUDIT_BACKEND == "database"
        assert settings.MAX_ALTERNATIVES == 1
        assert settings.AUDIT_ENABLED is False

    def test_get_settings_is_cached(self, monkeypatch):
        get_settings.cache_clear()
        try:
            first = get_settings()
            monkeypatch.setenv("MAX_ALTERNATIVES", "5")

            assert get_settings() is first

            get_settings.cache_clear()
            assert get_settings().MAX_ALTERNATIVES == 5
        finally:
            get_settings.cache_clear()
