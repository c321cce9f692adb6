"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
(and a local `.env` file when present).

Architecture:
- Flat Settings structure (no nesting)
- Token policy (domain, validity window, attempt bound) is configuration,
  not code
- Firebase credentials are read once here and consumed by the container

Usage:
    from src.core.config import settings

    settings.institutional_email_domain   # "@cs.udf.edu.br"
    settings.token_validity_minutes       # 30

    if settings.is_development:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import DEFAULT_TOKEN_COLLECTION
from src.core.enums import Environment

SUPPORTED_TOKEN_STORES = ("firestore", "redis", "memory")


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. `.env` file in the working directory
        3. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Carona Tokens",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # API configuration
    api_base_url: str = Field(
        default="http://localhost:3000",
        description="Public API base URL, used in problem-details type URIs",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API v1 route prefix",
    )
    cors_origins: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)",
    )

    # Token policy
    institutional_email_domain: str = Field(
        default="@cs.udf.edu.br",
        description="Email suffix required for token issuance and use",
    )
    token_validity_minutes: int = Field(
        default=30,
        description="Minutes a token stays valid after issuance",
    )
    token_max_attempts: int = Field(
        default=10,
        description="Candidate values tried before giving up on issuance",
    )
    min_password_length: int = Field(
        default=8,
        description="Minimum length of a new password on reset",
    )

    # Token storage
    token_store_backend: str = Field(
        default="firestore",
        description="Token store backend (firestore, redis, memory)",
    )
    token_collection: str = Field(
        default=DEFAULT_TOKEN_COLLECTION,
        description="Firestore collection for token documents",
    )
    store_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to every token store call",
    )
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL when TOKEN_STORE_BACKEND=redis",
    )

    # Firebase
    firebase_service_account: str | None = Field(
        default=None,
        description="Service account JSON (as a string) for the Firebase Admin SDK",
    )
    firebase_project_id: str | None = Field(
        default=None,
        description="Project ID used with Application Default Credentials",
    )

    # Expired token sweep
    token_sweep_enabled: bool = Field(
        default=False,
        description="Run the expired-token sweep inside the API process",
    )
    token_sweep_interval_minutes: int = Field(
        default=60,
        description="Minutes between sweep runs",
    )
    token_retention_minutes: int = Field(
        default=1440,
        description="Minutes an expired token is kept before the sweep deletes it",
    )

    # Notifications
    email_notifications_enabled: bool = Field(
        default=False,
        description="Hand issued tokens to the email notifier",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("institutional_email_domain")
    @classmethod
    def validate_email_domain(cls, v: str) -> str:
        """
        Require a domain suffix that starts with "@".

        Args:
            v: Configured suffix.

        Returns:
            str: Lowercased suffix.

        Raises:
            ValueError: If the suffix does not start with "@" or is bare.
        """
        v = v.strip().lower()
        if not v.startswith("@") or len(v) < 2:
            raise ValueError("institutional_email_domain must look like '@example.edu'")
        return v

    @field_validator(
        "token_validity_minutes",
        "token_max_attempts",
        "min_password_length",
        "token_sweep_interval_minutes",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """
        Reject zero or negative policy values.

        Args:
            v: Configured value.

        Returns:
            int: Validated value.

        Raises:
            ValueError: If the value is not positive.
        """
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("token_store_backend")
    @classmethod
    def validate_token_store_backend(cls, v: str) -> str:
        """
        Restrict the store backend to the supported adapters.

        Args:
            v: Backend name.

        Returns:
            str: Normalized backend name.

        Raises:
            ValueError: If the backend is unknown.
        """
        v = v.strip().lower()
        if v not in SUPPORTED_TOKEN_STORES:
            raise ValueError(
                f"token_store_backend must be one of {', '.join(SUPPORTED_TOKEN_STORES)}"
            )
        return v

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @property
    def cors_origin_list(self) -> list[str]:
        """Parsed list of allowed CORS origins."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def has_firebase_credentials(self) -> bool:
        """True when either a service account or a project ID is configured."""
        return bool(self.firebase_service_account or self.firebase_project_id)

    @property
    def is_development(self) -> bool:
        """True if running in the development environment."""
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Settings loaded once per process.
    """
    return Settings()


settings = get_settings()
