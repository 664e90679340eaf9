# tests/conftest.py
"""
Shared fixtures: a SQLite file database behind a real connection pool,
seeding helpers, pool checkout/checkin counters and a TestClient.
"""

import os

# Required settings must exist before anything calls get_settings()
os.environ.setdefault("DB_USER", "test-user")
os.environ.setdefault("DB_PW", "test-password")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event

from playstore.config import Settings
from playstore.db.engine import build_engine
from playstore.db.schema import apps, metadata
from playstore.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DB_USER="test-user",
        DB_PW="test-password",
        DB_URL=f"sqlite:///{tmp_path / 'playstore.db'}",
        DB_CONNECTION_LIMIT=4,
    )


@pytest.fixture
def engine(settings):
    engine = build_engine(settings)
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seed(engine):
    """Insert rows into the apps table: seed([{"app_id": ..., ...}, ...])."""

    def _seed(rows):
        with engine.begin() as conn:
            conn.execute(
                apps.insert(),
                [
                    {
                        "app_id": row["app_id"],
                        "name": row.get("name", row["app_id"]),
                        "category": row["category"],
                        "rating": row.get("rating"),
                        "installs": row.get("installs"),
                    }
                    for row in rows
                ],
            )

    return _seed


class PoolCounter:
    def __init__(self, engine):
        self.checkouts = 0
        self.checkins = 0
        event.listen(engine, "checkout", self._on_checkout)
        event.listen(engine, "checkin", self._on_checkin)

    def _on_checkout(self, dbapi_conn, conn_record, conn_proxy):
        self.checkouts += 1

    def _on_checkin(self, dbapi_conn, conn_record):
        self.checkins += 1

    def reset(self):
        self.checkouts = 0
        self.checkins = 0


@pytest.fixture
def pool_counter(engine):
    """Counts connections borrowed from and returned to the pool from now on."""
    return PoolCounter(engine)


@pytest.fixture
def client(settings, engine):
    app = create_app(settings, engine)
    with TestClient(app) as c:
        yield c
