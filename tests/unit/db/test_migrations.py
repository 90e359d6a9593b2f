"""The Alembic revisions must build the same schema as the SQLModel metadata."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect
from sqlmodel import SQLModel

from app.core.config import get_settings
from app.db import base  # noqa: F401

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def _describe(url: str) -> dict:
    engine = create_engine(url)
    try:
        inspector = inspect(engine)
        columns = {
            c["name"]: (c["nullable"], c.get("default"))
            for c in inspector.get_columns("users")
        }
        indexes = {
            (i["name"], tuple(i["column_names"]), bool(i["unique"]))
            for i in inspector.get_indexes("users")
        }
        return {"columns": columns, "indexes": indexes}
    finally:
        engine.dispose()


@pytest.fixture
def migrated_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()

    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    command.upgrade(config, "head")

    yield url
    get_settings.cache_clear()


@pytest.fixture
def created_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'created.db'}"
    engine = create_engine(url)
    SQLModel.metadata.create_all(engine)
    engine.dispose()
    return url


class TestMigrationMatchesModels:
    def test_same_columns(self, migrated_url, created_url):
        assert _describe(migrated_url)["columns"] == _describe(created_url)["columns"]

    def test_same_indexes(self, migrated_url, created_url):
        assert _describe(migrated_url)["indexes"] == _describe(created_url)["indexes"]

    def test_no_server_default_on_timestamps(self, migrated_url):
        columns = _describe(migrated_url)["columns"]
        for name in ("created_at", "updated_at", "deleted_at"):
            assert columns[name][1] is None
