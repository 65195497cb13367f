"""Unit tests for the Database pool wrapper."""
import psycopg2
import pytest
from psycopg2 import pool

from db.connection import Database
from repositories.errors import DataAccessError
from tests.conftest import FakePool


class ExhaustedPool(FakePool):
    def getconn(self):
        raise pool.PoolError("connection pool exhausted")


def test_open_passes_settings_to_pool():
    db = Database(dsn="postgresql://u@h/d", min_conn=2, max_conn=7, connect_timeout=3, pool_factory=FakePool)

    db.open()

    assert db.is_open
    assert (db._pool.minconn, db._pool.maxconn, db._pool.dsn) == (2, 7, "postgresql://u@h/d")
    assert db._pool.kwargs == {"connect_timeout": 3}


def test_open_without_timeout():
    db = Database(dsn="postgresql://u@h/d", connect_timeout=None, pool_factory=FakePool)

    db.open()

    assert db._pool.kwargs == {}


def test_open_failure_is_reraised():
    def unreachable(*args, **kwargs):
        raise psycopg2.OperationalError("could not connect to server")

    db = Database(pool_factory=unreachable)

    with pytest.raises(psycopg2.OperationalError):
        db.open()
    assert not db.is_open


def test_close():
    db = Database(pool_factory=FakePool)
    db.open()
    fake = db._pool

    db.close()

    assert fake.closed
    assert not db.is_open


def test_connection_before_open():
    db = Database(pool_factory=FakePool)

    with pytest.raises(RuntimeError):
        with db.connection():
            pass


def test_connection_returned_when_block_raises():
    db = Database(pool_factory=FakePool)
    db.open()

    with pytest.raises(ValueError):
        with db.connection():
            raise ValueError("boom")

    assert db._pool.checked_out == db._pool.returned == 1


def test_exhausted_pool_raises_data_access_error():
    db = Database(pool_factory=ExhaustedPool)
    db.open()

    with pytest.raises(DataAccessError) as exc_info:
        with db.connection():
            pass

    assert isinstance(exc_info.value.__cause__, pool.PoolError)


def test_ping(fake_db):
    fake_db.ping()

    assert fake_db.pool.executed == ["SELECT %s;"]
    assert fake_db.pool.returned == 1


def test_ping_failure(fake_db, monkeypatch):
    def broken_cursor(self):
        raise psycopg2.InterfaceError("connection already closed")

    monkeypatch.setattr("tests.conftest.FakeConnection.cursor", broken_cursor)

    with pytest.raises(DataAccessError):
        fake_db.ping()


def test_repositories_reexport_db_error():
    from db import errors as db_errors
    from repositories import errors as repo_errors

    assert repo_errors.DataAccessError is db_errors.DataAccessError
