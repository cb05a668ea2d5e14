"""
Query Helper Tests
Tests for statement execution, connection release and error propagation.
"""
import psycopg2
from psycopg2.pool import PoolError
import pytest

from db import connection, query
from db.errors import DataAccessError
from db.query import QueryResult, execute


class TestExecute:
    """Test suite for db.query.execute."""

    def test_binds_params_and_commits(self, fake_conn):
        """Statement and parameters are passed to the cursor unchanged."""
        fake_conn.rowcount = 1

        result = execute("op", "DELETE FROM auth WHERE email = %s;", ["a@x.com"])

        assert fake_conn.executed == [("DELETE FROM auth WHERE email = %s;", ("a@x.com",))]
        assert fake_conn.commits == 1
        assert result.rowcount == 1
        assert result.rows == []

    def test_fetch_one(self, fake_conn):
        fake_conn.rows = [("a@x.com",), ("b@x.com",)]

        result = execute("op", "SELECT email FROM token;", fetch="one")

        assert result.rows == [("a@x.com",)]
        assert result.first() == ("a@x.com",)

    def test_fetch_one_without_match(self, fake_conn):
        result = execute("op", "SELECT email FROM token;", fetch="one")

        assert result.rows == []
        assert result.first() is None

    def test_fetch_all(self, fake_conn):
        fake_conn.rows = [("a",), ("b",)]

        result = execute("op", "SELECT email FROM token;", fetch="all")

        assert result.rows == [("a",), ("b",)]

    def test_connection_released_on_success(self, fake_conn):
        execute("op", "SELECT 1;")

        assert fake_conn.released is True

    def test_driver_error_raises_data_access_error(self, fake_conn):
        """Failures are raised, not masked as an empty result."""
        cause = psycopg2.OperationalError("server closed the connection")
        fake_conn.error = cause

        with pytest.raises(DataAccessError) as exc_info:
            execute("get_user_profile", "SELECT 1;")

        assert exc_info.value.operation == "get_user_profile"
        assert exc_info.value.__cause__ is cause
        assert "get_user_profile" in str(exc_info.value)

    def test_driver_error_rolls_back_and_releases(self, fake_conn):
        fake_conn.error = psycopg2.IntegrityError("duplicate key")

        with pytest.raises(DataAccessError):
            execute("op", "INSERT INTO token VALUES (%s, %s);", ("a", "b"))

        assert fake_conn.rollbacks == 1
        assert fake_conn.commits == 0
        assert fake_conn.released is True


def test_query_result_defaults():
    result = QueryResult()

    assert result.rows == []
    assert result.rowcount == 0
    assert result.first() is None


class TestConnectionFailures:
    """Failures around borrowing and rolling back still surface as DataAccessError."""

    def test_dropped_connection_with_failing_rollback(self, fake_conn, monkeypatch):
        cause = psycopg2.OperationalError("server closed the connection unexpectedly")
        fake_conn.error = cause

        def _rollback():
            raise psycopg2.InterfaceError("connection already closed")

        monkeypatch.setattr(fake_conn, "rollback", _rollback)

        with pytest.raises(DataAccessError) as exc_info:
            execute("get_user_profile", "SELECT 1;")

        assert exc_info.value.operation == "get_user_profile"
        assert exc_info.value.__cause__ is cause
        assert fake_conn.released is True

    def test_closed_connection_skips_rollback(self, fake_conn):
        fake_conn.error = psycopg2.OperationalError("terminating connection")
        fake_conn.closed = True

        with pytest.raises(DataAccessError):
            execute("delete_token", "DELETE FROM token WHERE email = %s;", ("a@x.com",))

        assert fake_conn.rollbacks == 0
        assert fake_conn.released is True

    def test_exhausted_pool(self, monkeypatch):
        def _exhausted():
            raise PoolError("connection pool exhausted")

        released = []
        monkeypatch.setattr(query, "get_connection", _exhausted)
        monkeypatch.setattr(query, "release_connection", released.append)

        with pytest.raises(DataAccessError) as exc_info:
            execute("add_token", "SELECT 1;")

        assert isinstance(exc_info.value.__cause__, PoolError)
        assert released == []

    def test_pool_not_initialized(self, monkeypatch):
        monkeypatch.setattr(connection, "_pool", None)

        with pytest.raises(DataAccessError) as exc_info:
            execute("get_user_profile", "SELECT 1;")

        assert isinstance(exc_info.value.__cause__, RuntimeError)
