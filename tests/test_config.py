"""Tests for settings loading."""
from console.config import Settings


def test_defaults_use_sqlite():
    settings = Settings(_env_file=None)

    assert settings.is_sqlite
    assert settings.database_isolation_level == "SERIALIZABLE"
    assert settings.password_min_length == 8


def test_isolation_level_normalized():
    settings = Settings(_env_file=None, database_isolation_level="repeatable-read")
    assert settings.database_isolation_level == "REPEATABLE READ"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://user:pw@localhost/vaccines")
    monkeypatch.setenv("SQLITE_BUSY_TIMEOUT", "1.5")

    settings = Settings(_env_file=None)

    assert not settings.is_sqlite
    assert settings.sqlite_busy_timeout == 1.5
