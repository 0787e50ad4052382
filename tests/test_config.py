import pytest
from pydantic import ValidationError

from truckroutes.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_prefix == "/api"
    assert settings.default_capacity == 6
    assert settings.max_capacity == 50
    assert settings.map_bounds_padding == 0.2


def test_origins_from_comma_separated_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TRO_FRONTEND_ALLOWED_ORIGINS", "http://a.test, http://b.test")

    settings = Settings(_env_file=None)

    assert settings.frontend_allowed_origins == ("http://a.test", "http://b.test")


def test_origins_from_json_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TRO_FRONTEND_ALLOWED_ORIGINS", '["http://a.test"]')

    settings = Settings(_env_file=None)

    assert settings.frontend_allowed_origins == ("http://a.test",)


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TRO_LOG_LEVEL", "debug")

    assert Settings(_env_file=None).log_level == "DEBUG"


def test_capacity_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, default_capacity=0)
