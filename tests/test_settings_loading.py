"""
Test settings loading.

Verifies that every variable documented in .env.example maps to exactly
one settings field, and that environment overrides are typed correctly.
"""
from __future__ import annotations

from pathlib import Path
import re

import pytest
from pydantic import ValidationError

# Import apps.api.deps so dotenv loads exactly once (canonical location).
import apps.api.deps  # noqa: F401

from core.settings import OrderSettings, get_app_settings

_ENV_KEYS = [
    "DATABASE_URL",
    "DB_ECHO_SQL",
    "DB_POOL_SIZE",
    "DB_MAX_OVERFLOW",
    "DB_POOL_TIMEOUT",
    "DB_POOL_RECYCLE",
    "ORDERS_CURRENCY",
    "ORDERS_DEFAULT_STATUS",
    "ORDERS_STRICT_STATUS",
    "API_TITLE",
    "API_CORS_ORIGINS",
    "LOG_LEVEL",
]


def _parse_env_keys(env_path: Path) -> list[str]:
    text = env_path.read_text(encoding="utf-8", errors="replace")
    keys: list[str] = []
    for line in text.splitlines():
        s = line.strip()
        if not s or s.startswith("#") or "=" not in s:
            continue
        k = s.split("=", 1)[0].strip()
        if re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", k) and k not in keys:
            keys.append(k)
    return keys


def _collect_alias_map(model) -> dict[str, str]:
    """
    Return map: ENV_ALIAS -> field_name for a Pydantic model.
    """
    return {
        field.alias: field_name
        for field_name, field in type(model).model_fields.items()
        if field.alias
    }


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear cached settings and any overrides set by the environment."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def test_every_example_env_key_is_mapped(fresh_settings):
    repo_root = Path(__file__).resolve().parents[1]
    keys = _parse_env_keys(repo_root / ".env.example")

    settings = get_app_settings()
    modules = {
        "database": settings.database,
        "orders": settings.orders,
        "api": settings.api,
    }

    alias_to_locator: dict[str, tuple[str, str]] = {}
    for module_name, model in modules.items():
        for alias, field_name in _collect_alias_map(model).items():
            if alias in alias_to_locator:
                pytest.fail(f"Duplicate env alias mapped twice: {alias}")
            alias_to_locator[alias] = (module_name, field_name)

    missing = [k for k in keys if k not in alias_to_locator]
    assert not missing, f"Unmapped env keys: {missing}"

    for env_key in keys:
        module_name, field_name = alias_to_locator[env_key]
        assert getattr(modules[module_name], field_name) is not None


def test_defaults(fresh_settings):
    settings = get_app_settings()

    assert settings.orders.currency == "USD"
    assert settings.orders.default_status == "Pending"
    assert settings.orders.strict_status is False
    assert settings.api.cors_origins == ["*"]


def test_environment_overrides(fresh_settings, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://shop:secret@db/shop")
    monkeypatch.setenv("DB_POOL_SIZE", "3")
    monkeypatch.setenv("ORDERS_CURRENCY", "eur")
    monkeypatch.setenv("ORDERS_STRICT_STATUS", "true")
    monkeypatch.setenv("API_CORS_ORIGINS", '["https://shop.example.com"]')

    settings = get_app_settings()

    assert settings.database.pool_size == 3
    assert settings.database.is_sqlite is False
    assert settings.orders.currency == "EUR"
    assert settings.orders.strict_status is True
    assert settings.api.cors_origins == ["https://shop.example.com"]


def test_settings_are_cached(fresh_settings):
    assert get_app_settings() is get_app_settings()


def test_invalid_currency_is_rejected(fresh_settings, monkeypatch):
    monkeypatch.setenv("ORDERS_CURRENCY", "DOLLARS")

    with pytest.raises(ValidationError):
        OrderSettings()
