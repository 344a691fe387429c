"""Application settings and configuration.

This module defines all configuration options for the Sounds Like Home service.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Sounds Like Home", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")

    # Admin authentication
    secret_key: str = Field(
        default="sounds-like-home-secret-key-change-in-production",
        alias="SECRET_KEY",
    )
    admin_password: str = Field(default="welcomeadmin", alias="ADMIN_PASSWORD")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    admin_token_expire_minutes: int = Field(
        default=60 * 24,
        alias="ADMIN_TOKEN_EXPIRE_MINUTES",
    )

    # Database configuration
    database_url: str = Field(
        default="sqlite:///./sounds_like_home.db",
        alias="DATABASE_URL",
    )
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Audio storage
    audio_storage_dir: str = Field(default="./data/recordings", alias="AUDIO_STORAGE_DIR")
    max_audio_bytes: int = Field(default=10 * 1024 * 1024, alias="MAX_AUDIO_BYTES")
    auto_approve_recordings: bool = Field(default=True, alias="AUTO_APPROVE_RECORDINGS")

    # Prompt rotation
    default_prompt_text: str = Field(
        default="Tell us about a sound that reminds you of home.",
        alias="DEFAULT_PROMPT_TEXT",
    )
    cursor_write_max_retries: int = Field(default=5, ge=0, alias="CURSOR_WRITE_MAX_RETRIES")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="simple", alias="LOG_FORMAT")

    # CORS configuration for the recorder and admin frontends
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling such as Alembic."""
        url = self.effective_database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides.

        Returns:
            The active database URL (test database if in testing mode, otherwise production)
        """
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url


settings = Settings()
