from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

import models
from config import Settings
from database import make_engine, make_session_factory
from main import create_app, get_now_ms
from store import EntryStore

# 2026-10-19 12:00 UTC
NOW = int(datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc).timestamp() * 1000)
DAY_MS = 24 * 60 * 60 * 1000


@pytest.fixture()
def session():
    engine = make_engine("sqlite://")
    models.Base.metadata.create_all(bind=engine)
    db = make_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture()
def store(session) -> EntryStore:
    return EntryStore(session)


@pytest.fixture()
def clock():
    """Mutable 'now' shared with the app under test."""
    return {"now": NOW}


def _client(settings: Settings, clock):
    app = create_app(settings)
    app.dependency_overrides[get_now_ms] = lambda: clock["now"]
    return TestClient(app)


@pytest.fixture()
def client(clock):
    settings = Settings(password="abc", database_url="sqlite://", timezone="UTC")
    with _client(settings, clock) as c:
        yield c


@pytest.fixture()
def client_without_password(clock):
    settings = Settings(password=None, database_url="sqlite://", timezone="UTC")
    with _client(settings, clock) as c:
        yield c
