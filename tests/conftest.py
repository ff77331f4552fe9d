"""
conftest.py — Shared fixtures for the School Management API tests.

Every test gets a ``SchoolStore`` on its own temporary SQLite file, so
no test sees another test's schools.  ``client`` serves a fresh app
bound to that store; ``broken_client`` serves an app whose store has
lost its ``schools`` table, which exercises the 500 path with a real
driver error.
"""

import pytest
from fastapi.testclient import TestClient

from school_management_api.app.core.db import SchoolStore, get_store
from school_management_api.app.main import create_app


@pytest.fixture()
def store(tmp_path):
    """An open store backed by a throwaway database file."""
    school_store = SchoolStore(str(tmp_path / "schools.db")).open()
    yield school_store
    school_store.close()


@pytest.fixture()
def broken_store(store):
    """A store whose ``schools`` table has been dropped."""
    store.connection.execute("DROP TABLE schools")
    store.connection.commit()
    return store


@pytest.fixture()
def client(store):
    app = create_app(store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def broken_client(broken_store):
    app = create_app()
    app.dependency_overrides[get_store] = lambda: broken_store
    # No context manager: startup would open the default database.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def oak_elementary():
    return {
        "name": "Oak Elementary",
        "address": "1 Oak St",
        "latitude": 40.0,
        "longitude": -75.0,
    }
