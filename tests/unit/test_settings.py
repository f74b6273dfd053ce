"""Unit tests for provider settings loaded from the environment."""

import pytest
from pydantic import ValidationError

from keycloak_realm_provider.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("KEYCLOAK_URL", "KEYCLOAK_ADMIN_TOKEN", "METRICS_ENABLED"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.keycloak_url == "http://localhost:8080"
        assert settings.keycloak_admin_token == ""
        assert settings.keycloak_verify_ssl is True
        assert settings.metrics_enabled is True

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("KEYCLOAK_URL", "https://sso.example.test")
        monkeypatch.setenv("KEYCLOAK_VERIFY_SSL", "false")
        monkeypatch.setenv("KEYCLOAK_REQUEST_TIMEOUT", "12.5")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.keycloak_url == "https://sso.example.test"
        assert settings.keycloak_verify_ssl is False
        assert settings.keycloak_request_timeout == 12.5
        assert settings.log_level == "debug"

    def test_timeout_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("KEYCLOAK_REQUEST_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
