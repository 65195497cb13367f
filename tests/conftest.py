"""Shared fixtures: an in-memory stand-in for the psycopg2 pool."""
import threading

import psycopg2
import pytest
from fastapi.testclient import TestClient

from db.connection import Database
from main import create_app


class FakeCursor:
    """Answers queries from a table-name -> rows mapping."""

    def __init__(self, connection):
        self.connection = connection
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.connection.executed.append(sql)
        if sql.startswith("SELECT %s"):
            self._rows = [tuple(params)]
            return
        for table, result in self.connection.tables.items():
            if f"FROM {table}" in sql:
                if isinstance(result, Exception):
                    raise result
                self._rows = list(result)
                return
        raise psycopg2.ProgrammingError(f'relation in "{sql}" does not exist')

    def fetchall(self):
        return list(self._rows)

    def fetchone(self):
        return self._rows[0] if self._rows else None


class FakeConnection:
    def __init__(self, tables, executed):
        self.tables = tables
        self.executed = executed

    def cursor(self):
        return FakeCursor(self)


class FakePool:
    """Mimics ThreadedConnectionPool's getconn/putconn/closeall."""

    def __init__(self, minconn, maxconn, dsn, **kwargs):
        self.minconn = minconn
        self.maxconn = maxconn
        self.dsn = dsn
        self.kwargs = kwargs
        self.tables = {}
        self.executed = []
        self.checked_out = 0
        self.returned = 0
        self.closed = False
        self._lock = threading.Lock()

    def getconn(self):
        with self._lock:
            self.checked_out += 1
        return FakeConnection(self.tables, self.executed)

    def putconn(self, conn):
        with self._lock:
            self.returned += 1

    def closeall(self):
        self.closed = True


class FakeDatabase(Database):
    """A Database whose pool is a FakePool seeded with table rows."""

    def __init__(self, users=(), employments=()):
        super().__init__(dsn="postgresql://test@localhost/test", pool_factory=FakePool)
        self.open()
        self.set_table("users", users)
        self.set_table("employments", employments)

    @property
    def pool(self) -> FakePool:
        return self._pool

    def set_table(self, name, rows_or_error):
        self._pool.tables[name] = rows_or_error


@pytest.fixture
def fake_db():
    """An opened FakeDatabase with empty tables."""
    return FakeDatabase()


@pytest.fixture
def client(fake_db):
    """TestClient running the full app, lifespan included, over fake_db."""
    app = create_app(db=fake_db)
    with TestClient(app) as test_client:
        yield test_client
