"""
Tests de Settings (pydantic-settings).
"""

import importlib

import pytest
from pydantic import ValidationError

import core.config
from core.config import Settings


def test_defaults_bind_port_8080(monkeypatch):
    for name in ("APP_ENV", "LOG_LEVEL", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 8080
    assert settings.APP_ENV == "production"
    assert settings.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("log_level", "debug")
    settings = Settings(_env_file=None)

    assert settings.PORT == 9090
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize(
    "field, value",
    [("APP_ENV", "staging"), ("LOG_LEVEL", "VERBOSE"), ("PORT", "0"), ("PORT", "70000")],
)
def test_invalid_values_are_rejected(monkeypatch, field, value):
    monkeypatch.setenv(field, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_invalid_env_fails_only_when_settings_are_read(monkeypatch):
    """Importar el módulo no lee el entorno; el error aparece al pedir los settings."""
    monkeypatch.setenv("PORT", "0")
    module = importlib.reload(core.config)

    module.get_settings.cache_clear()
    try:
        with pytest.raises(ValidationError):
            module.get_settings()
    finally:
        module.get_settings.cache_clear()
