"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Intent engine settings loaded from environment variables.

    All settings have sensible defaults for development.

    Environment Variables:
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
        AUDIT_ENABLED: Write an audit record per extraction (default True)
        AUDIT_BACKEND: "log" or "database" (default log)
        AUDIT_DATABASE_URL: SQLAlchemy URL for the database audit backend
        ALTERNATIVE_MIN_CONFIDENCE: Alternatives must score above this (default 0.3)
        MAX_ALTERNATIVES: Maximum alternatives surfaced (default 2)
        CONTEXT_CONFIDENCE_WITH_ANNOTATIONS: Context component with marks (default 0.8)
        CONTEXT_CONFIDENCE_WITHOUT_ANNOTATIONS: Context component without marks (default 0.5)
        CLARIFICATION_THRESHOLD: Below this, callers should ask the sender (default 0.6)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # Audit
    AUDIT_ENABLED: bool = True
    AUDIT_BACKEND: str = "log"
    AUDIT_DATABASE_URL: str = "sqlite:///./faxintent_audit.db"

    # Aggregation
    ALTERNATIVE_MIN_CONFIDENCE: float = 0.3
    MAX_ALTERNATIVES: int = 2
    CONTEXT_CONFIDENCE_WITH_ANNOTATIONS: float = 0.8
    CONTEXT_CONFIDENCE_WITHOUT_ANNOTATIONS: float = 0.5

    # Routing
    CLARIFICATION_THRESHOLD: float = 0.6


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
