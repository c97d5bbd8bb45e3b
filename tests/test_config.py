"""
Tests for settings validation
"""
import pytest
from pydantic import ValidationError

from app.core.config import Settings


def make_settings(**overrides) -> Settings:
    values = {"DATABASE_URL": "sqlite+aiosqlite:///:memory:", **overrides}
    return Settings(_env_file=None, **values)


def test_defaults():
    settings = make_settings()

    assert settings.PORT == 3000
    assert settings.DOCS_URL == "/api"
    assert settings.API_PREFIX == ""
    assert settings.get_allowed_hosts() == ["*"]
    assert settings.is_production() is False


def test_plain_postgresql_url_uses_asyncpg():
    settings = make_settings(DATABASE_URL="postgresql://user:pw@db:5432/eventos")

    assert settings.DATABASE_URL == "postgresql+asyncpg://user:pw@db:5432/eventos"
    assert settings.get_config_summary()["database"] == "db:5432/eventos"


@pytest.mark.parametrize("url", ["mysql://db/eventos", "sqlite:///eventos.db"])
def test_unsupported_database_url_rejected(url):
    with pytest.raises(ValidationError):
        make_settings(DATABASE_URL=url)


def test_log_format_validated():
    assert make_settings(LOG_FORMAT="JSON").LOG_FORMAT == "json"

    with pytest.raises(ValidationError):
        make_settings(LOG_FORMAT="xml")


def test_allowed_hosts_split():
    settings = make_settings(ALLOWED_HOSTS="http://a.com, http://b.com")

    assert settings.get_allowed_hosts() == ["http://a.com", "http://b.com"]
