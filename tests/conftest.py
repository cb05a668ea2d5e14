"""
Shared fixtures: a fake psycopg2 connection wired into the query helper,
so repositories can be exercised without a running PostgreSQL.
"""
import pytest

from db import query
from models.profile import Profile
from tests.fakes import FakeConnection


@pytest.fixture
def fake_conn(monkeypatch) -> FakeConnection:
    """A FakeConnection handed out by the pool accessors db.query uses."""
    conn = FakeConnection()

    def _release(c):
        c.released = True

    monkeypatch.setattr(query, "get_connection", lambda: conn)
    monkeypatch.setattr(query, "release_connection", _release)
    return conn


@pytest.fixture
def rex() -> Profile:
    return Profile(
        email="a@x.com",
        dog_name="Rex",
        breed="Lab",
        description="Loves fetch",
        owner_name="Alex",
        image_link="https://img.example/rex.png",
    )
