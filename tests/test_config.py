from __future__ import annotations

import dataclasses

import pytest

from sendly import AuthenticationError, ClientConfig, SendlyClient
from sendly.config import DEFAULT_BASE_URL


def test_defaults() -> None:
    config = ClientConfig(api_key="sk_test_1")
    assert config.base_url == DEFAULT_BASE_URL == "https://sendly.live/api/v1"
    assert config.timeout == 30.0
    assert config.max_retries == 3


def test_extra_headers_merge_into_defaults() -> None:
    config = ClientConfig(api_key="sk_test_1", headers={"X-Request-Source": "tests"})
    headers = config.default_headers()
    assert headers["Authorization"] == "Bearer sk_test_1"
    assert headers["X-Request-Source"] == "tests"


def test_missing_api_key_is_authentication_error() -> None:
    with pytest.raises(AuthenticationError) as excinfo:
        SendlyClient("")
    assert excinfo.value.message == "API key is required"


def test_negative_retries_rejected() -> None:
    with pytest.raises(ValueError):
        ClientConfig(api_key="sk_test_1", max_retries=-1)


def test_config_is_immutable() -> None:
    config = ClientConfig(api_key="sk_test_1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_retries = 5  # type: ignore[misc]


def test_extra_headers_are_read_only_copies() -> None:
    extra = {"X-Request-Source": "tests"}
    config = ClientConfig(api_key="sk_test_1", headers=extra)
    extra["X-Request-Source"] = "changed"
    with pytest.raises(TypeError):
        config.headers["X-Request-Source"] = "mutated"  # type: ignore[index]
    assert config.default_headers()["X-Request-Source"] == "tests"


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SENDLY_API_KEY", "sk_env")
    monkeypatch.setenv("SENDLY_BASE_URL", "http://localhost:4000/api/v1")
    monkeypatch.setenv("SENDLY_TIMEOUT", "5")
    monkeypatch.setenv("SENDLY_MAX_RETRIES", "0")

    config = ClientConfig.from_env()

    assert config.api_key == "sk_env"
    assert config.base_url == "http://localhost:4000/api/v1"
    assert config.timeout == 5.0
    assert config.max_retries == 0


def test_client_accepts_explicit_config() -> None:
    config = ClientConfig(api_key="sk_test_1", max_retries=0)
    client = SendlyClient(config=config)
    assert client.config is config
