"""Tests for product API configuration loading and transport construction."""

import httpx
import pytest
from pydantic import ValidationError

from product_sdk.clients.factory import build_http_client, build_product_client
from product_sdk.utils.config_loader import ProductApiConfig, load_client_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PRODUCT_API_BASE_URL", "PRODUCT_API_STORE_TOKEN", "PRODUCT_API_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)


def test_loads_nested_yaml_section(tmp_path):
    path = tmp_path / "product_api.yml"
    path.write_text(
        "product_api:\n  base_url: https://catalog.example.com/\n  store_token: abc\n  timeout_seconds: 5\n",
        encoding="utf-8",
    )

    config = load_client_config(path)

    assert config.base_url == "https://catalog.example.com"
    assert config.store_token == "abc"
    assert config.timeout_seconds == 5.0


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "product_api.yml"
    path.write_text("base_url: https://file.example.com\nstore_token: from-file\n", encoding="utf-8")
    monkeypatch.setenv("PRODUCT_API_STORE_TOKEN", "from-env")
    monkeypatch.setenv("PRODUCT_API_TIMEOUT_SECONDS", "2.5")

    config = load_client_config(path)

    assert config.base_url == "https://file.example.com"
    assert config.store_token == "from-env"
    assert config.timeout_seconds == 2.5


def test_environment_only_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("PRODUCT_API_BASE_URL", "https://env.example.com")
    monkeypatch.setenv("PRODUCT_API_STORE_TOKEN", "env-token")

    config = load_client_config(tmp_path / "missing.yml")

    assert config.base_url == "https://env.example.com"
    assert config.timeout_seconds == 20.0


def test_missing_token_fails_validation(tmp_path, monkeypatch):
    monkeypatch.setenv("PRODUCT_API_BASE_URL", "https://env.example.com")

    with pytest.raises(ValidationError):
        load_client_config(tmp_path / "missing.yml")


def test_non_positive_timeout_is_rejected():
    with pytest.raises(ValidationError):
        ProductApiConfig(base_url="https://x", store_token="t", timeout_seconds=0)


@pytest.mark.asyncio
async def test_factory_builds_client_with_configured_timeout():
    config = ProductApiConfig(base_url="https://catalog.example.com/", store_token="t", timeout_seconds=3)

    http_client = build_http_client(config)
    assert isinstance(http_client, httpx.AsyncClient)
    assert http_client.timeout.read == 3.0
    await http_client.aclose()

    async with build_product_client(config) as client:
        assert client.base_url == "https://catalog.example.com"
        assert client.store_token == "t"
    assert client.http_client.is_closed
