"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Token policy defaults (domain, validity window, attempts, password length)
- Validation (domain suffix, positive values, store backend, URLs)
- Environment detection and CORS parsing
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings
from src.core.enums import Environment


def _settings(**env: str) -> Settings:
    with patch.dict(os.environ, env, clear=True):
        return Settings(_env_file=None)


@pytest.mark.unit
class TestEnvironmentEnum:
    def test_environment_values(self):
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    def test_token_policy_defaults(self):
        settings = _settings()

        assert settings.institutional_email_domain == "@cs.udf.edu.br"
        assert settings.token_validity_minutes == 30
        assert settings.token_max_attempts == 10
        assert settings.min_password_length == 8

    def test_storage_defaults(self):
        settings = _settings()

        assert settings.token_store_backend == "firestore"
        assert settings.token_collection == "activationTokens"
        assert settings.store_timeout_seconds == 10.0
        assert settings.token_sweep_enabled is False
        assert settings.email_notifications_enabled is False
        assert settings.has_firebase_credentials is False

    def test_loads_from_environment(self):
        settings = _settings(
            INSTITUTIONAL_EMAIL_DOMAIN="@Aluno.UDF.edu.br",
            TOKEN_VALIDITY_MINUTES="15",
            TOKEN_STORE_BACKEND="Redis",
            FIREBASE_PROJECT_ID="carona-dev",
        )

        assert settings.institutional_email_domain == "@aluno.udf.edu.br"
        assert settings.token_validity_minutes == 15
        assert settings.token_store_backend == "redis"
        assert settings.has_firebase_credentials is True


@pytest.mark.unit
class TestSettingsValidation:
    @pytest.mark.parametrize("domain", ["cs.udf.edu.br", "@", "  "])
    def test_domain_must_start_with_at(self, domain):
        with pytest.raises(ValidationError):
            _settings(INSTITUTIONAL_EMAIL_DOMAIN=domain)

    @pytest.mark.parametrize(
        "name",
        ["TOKEN_VALIDITY_MINUTES", "TOKEN_MAX_ATTEMPTS", "MIN_PASSWORD_LENGTH"],
    )
    def test_policy_values_must_be_positive(self, name):
        with pytest.raises(ValidationError):
            _settings(**{name: "0"})

    def test_unknown_store_backend(self):
        with pytest.raises(ValidationError) as exc_info:
            _settings(TOKEN_STORE_BACKEND="postgres")

        assert "token_store_backend" in str(exc_info.value)

    def test_api_base_url_trailing_slash_removed(self):
        assert _settings(API_BASE_URL="https://api.example.com/").api_base_url == (
            "https://api.example.com"
        )

    def test_cors_origin_list(self):
        settings = _settings(CORS_ORIGINS="https://a.com, https://b.com,")

        assert settings.cors_origin_list == ["https://a.com", "https://b.com"]


@pytest.mark.unit
class TestEnvironmentDetection:
    def test_is_development_by_default(self):
        assert _settings().is_development is True

    @pytest.mark.parametrize("environment", ["testing", "ci", "production"])
    def test_other_environments_are_not_development(self, environment):
        assert _settings(ENVIRONMENT=environment).is_development is False


@pytest.mark.unit
def test_get_settings_is_cached():
    assert get_settings() is get_settings()
