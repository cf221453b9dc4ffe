"""Testes para config.settings (base e validação)."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    ValidationSettings,
    get_base_settings,
    get_validation_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_base_settings.cache_clear()
    get_validation_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_validation_settings.cache_clear()


class TestBaseSettings:
    """Testes para BaseSettings."""

    def test_default_values(self) -> None:
        settings = BaseSettings()

        assert settings.environment == "development"
        assert settings.service_name == "email_validation"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.validate() == []

    def test_immutable(self) -> None:
        """Valida que dataclass é imutável (frozen=True)."""
        settings = BaseSettings()

        with pytest.raises(AttributeError):
            settings.debug = True  # type: ignore[misc]

    def test_validate_reports_problems(self) -> None:
        settings = BaseSettings(service_name="", log_level="LOUD")

        errors = settings.validate()

        assert "SERVICE_NAME não pode ser vazio" in errors
        assert "LOG_LEVEL inválido: LOUD" in errors

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("SERVICE_NAME", "signup")
        monkeypatch.setenv("DEBUG", "yes")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_base_settings()

        assert settings.environment == "production"
        assert settings.service_name == "signup"
        assert settings.debug is True
        assert settings.log_level == "DEBUG"

    def test_getter_is_cached(self) -> None:
        assert get_base_settings() is get_base_settings()


class TestValidationSettings:
    """Testes para ValidationSettings."""

    def test_default_values(self) -> None:
        settings = ValidationSettings()

        assert settings.strict is True
        assert settings.minimum_length == 3
        assert settings.maximum_length == 320
        assert settings.validate() == []

    def test_validate_reports_inverted_bounds(self) -> None:
        settings = ValidationSettings(minimum_length=10, maximum_length=5)

        assert settings.validate() == [
            "EMAIL_VALIDATION_MAX_LENGTH deve ser >= EMAIL_VALIDATION_MIN_LENGTH"
        ]

    def test_validate_reports_negative_minimum(self) -> None:
        settings = ValidationSettings(minimum_length=-1)

        assert "EMAIL_VALIDATION_MIN_LENGTH deve ser >= 0" in settings.validate()

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EMAIL_VALIDATION_STRICT", "false")
        monkeypatch.setenv("EMAIL_VALIDATION_MIN_LENGTH", "6")
        monkeypatch.setenv("EMAIL_VALIDATION_MAX_LENGTH", "254")

        settings = get_validation_settings()

        assert settings == ValidationSettings(
            strict=False, minimum_length=6, maximum_length=254
        )

    def test_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "EMAIL_VALIDATION_STRICT",
            "EMAIL_VALIDATION_MIN_LENGTH",
            "EMAIL_VALIDATION_MAX_LENGTH",
        ):
            monkeypatch.delenv(name, raising=False)

        assert get_validation_settings() == ValidationSettings()
