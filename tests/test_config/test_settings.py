"""Testes das settings (env -> dataclasses frozen)."""

from __future__ import annotations

import pytest

from config.settings import (
    ASAAS_SANDBOX_URL,
    AsaasSettings,
    BaseSettings,
    DedupeSettings,
    FirestoreSettings,
    SplitSettings,
    SubscriptionStoreSettings,
    load_split_settings,
)
from config.settings.asaas import _load_from_env as load_asaas_from_env
from config.settings.base.core import _load_base_from_env
from config.settings.split import SYSTEM_FIXED_FEE_ENV, SYSTEM_PERCENT_ENV

PRODUCTION = BaseSettings(environment="production", redis_url="")
DEVELOPMENT = BaseSettings()


class TestSplitSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(SYSTEM_PERCENT_ENV, raising=False)
        monkeypatch.delenv(SYSTEM_FIXED_FEE_ENV, raising=False)

        settings = load_split_settings()

        assert settings == SplitSettings(system_percent=0.0, system_fixed_fee=2.0)
        assert settings.percent_mode is False

    def test_reads_env_without_cache(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(SYSTEM_PERCENT_ENV, "7.5")
        first = load_split_settings()
        monkeypatch.setenv(SYSTEM_PERCENT_ENV, "10")
        second = load_split_settings()

        assert first.system_percent == pytest.approx(7.5)
        assert second.system_percent == pytest.approx(10)
        assert second.percent_mode is True

    @pytest.mark.parametrize("raw", ["abc", "nan", "inf", "1e999"])
    def test_invalid_values_fall_back(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv(SYSTEM_FIXED_FEE_ENV, raw)

        assert load_split_settings().system_fixed_fee == pytest.approx(2.0)

    def test_blank_value_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(SYSTEM_PERCENT_ENV, "  ")

        assert load_split_settings().system_percent == 0.0

    def test_validate(self) -> None:
        assert SplitSettings().validate() == []
        assert len(SplitSettings(system_percent=100).validate()) == 1
        assert len(SplitSettings(system_percent=-1, system_fixed_fee=-1).validate()) == 2


class TestAsaasSettings:
    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AS_URL", "https://api.asaas.com/v3")
        monkeypatch.setenv("AS_TOKEN", "tok")
        monkeypatch.setenv("AS_WEBHOOK_TOKEN", "whk")
        monkeypatch.setenv("AS_MAX_RETRIES", "5")

        settings = load_asaas_from_env()

        assert settings.endpoint("/subscriptions") == "https://api.asaas.com/v3/subscriptions"
        assert settings.access_token == "tok"
        assert settings.max_retries == 5
        assert settings.validate() == []

    def test_defaults_are_sandbox_and_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("AS_URL", "AS_TOKEN", "AS_WEBHOOK_TOKEN"):
            monkeypatch.delenv(name, raising=False)

        settings = load_asaas_from_env()

        assert settings.api_base_url == ASAAS_SANDBOX_URL
        errors = settings.validate()
        assert "AS_TOKEN não configurado" in errors
        assert "AS_WEBHOOK_TOKEN não configurado" in errors

    def test_invalid_limits(self) -> None:
        settings = AsaasSettings(
            access_token="t", webhook_token="w", request_timeout_seconds=0, max_retries=-1
        )

        assert len(settings.validate()) == 2


class TestBaseSettings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGE", "staging"), ("test", "test"), ("other", "development")],
    )
    def test_environment_parsing(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)

        assert _load_base_from_env().environment == expected

    def test_flags(self) -> None:
        assert PRODUCTION.is_production is True
        assert DEVELOPMENT.is_development is True
        assert BaseSettings(environment="staging").is_staging is True


class TestBackendSettings:
    def test_memory_backends_forbidden_in_production(self) -> None:
        assert SubscriptionStoreSettings().validate(PRODUCTION)
        assert DedupeSettings().validate(PRODUCTION)
        assert SubscriptionStoreSettings().validate(DEVELOPMENT) == []
        assert DedupeSettings().validate(DEVELOPMENT) == []

    def test_redis_requires_url(self) -> None:
        errors = DedupeSettings(backend="redis").validate(DEVELOPMENT)

        assert errors == ["DEDUPE_BACKEND=redis requer REDIS_URL configurado"]

    def test_firestore_project_fallback(self) -> None:
        assert FirestoreSettings().validate("my-project") == []
        assert FirestoreSettings().validate("") != []
