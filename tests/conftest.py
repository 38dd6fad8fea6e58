"""
Pytest configuration and fixtures.
Unit tests run against a recording fake pool, so no database is needed.
"""

import pytest


class FakeCursor:
    """Records executed statements and hands back canned rows."""

    def __init__(self, connection):
        self.connection = connection

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.connection.executed.append((sql, params))
        if self.connection.error is not None:
            raise self.connection.error

    def fetchone(self):
        rows = self.connection.rows
        return rows[0] if rows else None

    def fetchall(self):
        return list(self.connection.rows)


class FakeConnection:
    def __init__(self):
        self.executed = []
        self.rows = []
        self.error = None
        self.closed = 0
        self.commits = 0
        self.rollbacks = 0
        self.cursor_factories = []

    def cursor(self, cursor_factory=None):
        self.cursor_factories.append(cursor_factory)
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakePool:
    """Stands in for db.connection.ConnectionPool with a single connection."""

    def __init__(self):
        self.conn = FakeConnection()
        self.borrowed = 0
        self.released = 0
        self.closed = False

    def get_connection(self):
        self.borrowed += 1
        return self.conn

    def release_connection(self, conn):
        assert conn is self.conn
        self.released += 1

    def close(self):
        self.closed = True

    # helpers for tests
    def returns(self, *rows):
        self.conn.rows = [dict(r) for r in rows]

    def fails_with(self, error):
        self.conn.error = error

    @property
    def last_query(self):
        return self.conn.executed[-1]


@pytest.fixture
def fake_pool():
    return FakePool()


def property_row(**overrides):
    """A properties row as RealDictCursor would return it."""
    row = {
        "id": 1,
        "owner_id": 7,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
        "cover_photo_url": "https://images.example.com/cover.jpg",
        "cost_per_night": 93061,
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
        "country": "Canada",
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "active": True,
        "average_rating": None,
    }
    row.update(overrides)
    return row
