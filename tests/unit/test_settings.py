"""Unit tests for application settings."""

import pytest

from app.infrastructure.config.settings import Settings
from app.infrastructure.stores import build_stores


def test_sqlite_url_from_path():
    settings = Settings(DATABASE_TYPE="sqlite", SQLITE_PATH="./data/helpdesk.db")
    assert settings.get_database_url() == "sqlite:///./data/helpdesk.db"


def test_postgresql_url_from_parts():
    settings = Settings(
        DATABASE_TYPE="postgresql",
        DB_USER="helpdesk",
        DB_PASSWORD="secret",
        DB_HOST="db",
        DB_PORT=5433,
        DB_NAME="tickets",
    )
    assert settings.get_database_url() == "postgresql://helpdesk:secret@db:5433/tickets"


def test_explicit_database_url_wins():
    settings = Settings(DATABASE_URL="sqlite://", DATABASE_TYPE="postgresql")
    assert settings.get_database_url() == "sqlite://"


def test_unsupported_database_type():
    with pytest.raises(ValueError):
        Settings(DATABASE_TYPE="oracle").get_database_url()


def test_unsupported_storage_backend():
    with pytest.raises(ValueError):
        build_stores(Settings(STORAGE_BACKEND="redis"))
