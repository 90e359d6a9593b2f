"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def _settings(**overrides) -> Settings:
    values = {"DB_TYPE": "mysql", "DB_PASSWORD": "pw"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestDatabaseType:
    @pytest.mark.parametrize("db_type", ["mysql", "postgres", "sqlite", " MySQL "])
    def test_supported(self, db_type):
        assert _settings(DB_TYPE=db_type).DB_TYPE == db_type.strip().lower()

    def test_unsupported_rejected(self):
        with pytest.raises(ValidationError, match="invalid DB_TYPE"):
            _settings(DB_TYPE="oracle")


class TestDatabaseURL:
    def test_mysql(self):
        settings = _settings(DB_USER="shop", DB_HOST="db", DB_PORT="3307", DB_NAME="store")
        assert settings.DATABASE_URL == "mysql+pymysql://shop:pw@db:3307/store?charset=utf8mb4"

    def test_postgres(self):
        settings = _settings(DB_TYPE="postgres", DB_PORT="5432", DB_SSLMODE="require")
        assert settings.DATABASE_URL == "postgresql+psycopg2://root:pw@localhost:5432/ecomgo?sslmode=require"

    def test_sqlite(self):
        assert _settings(DB_TYPE="sqlite", DB_NAME="local").DATABASE_URL == "sqlite:///local.db"

    def test_explicit_url_wins(self):
        assert _settings(DATABASE_URL="sqlite://").DATABASE_URL == "sqlite://"

    def test_values_are_trimmed(self):
        assert _settings(DB_HOST="  db.internal  ").DB_HOST == "db.internal"


class TestValidateDatabase:
    def test_complete_mysql_config(self):
        _settings().validate_database()

    def test_missing_password(self):
        with pytest.raises(ValueError, match="DB_PASSWORD"):
            _settings(DB_PASSWORD="").validate_database()

    @pytest.mark.parametrize("name", ["DB_USER", "DB_NAME", "DB_HOST"])
    def test_missing_required(self, name):
        with pytest.raises(ValueError, match=name):
            _settings(**{name: ""}).validate_database()

    def test_sqlite_needs_no_password(self):
        _settings(DB_TYPE="sqlite", DB_PASSWORD="").validate_database()

    def test_masked_summary_hides_password(self):
        summary = _settings(DB_PASSWORD="top-secret").masked_summary()
        assert summary["has_password"] is True
        assert "top-secret" not in summary.values()
