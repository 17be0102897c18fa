"""
Pytest configuration and fixtures for the placement cell tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Point settings at SQLite before importing any app modules
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")


@pytest.fixture(scope="function")
def engine(tmp_path):
    """Fresh SQLite database file with all tables created.

    A file (not :memory:) so the dashboard's concurrent reads each get
    their own connection.
    """
    from app.db.postgres import make_engine, create_tables

    engine = make_engine(f"sqlite:///{tmp_path / 'placement.db'}")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def store(engine):
    from app.db.store import SqlDataStore
    return SqlDataStore(engine)


@pytest.fixture(scope="function")
def client(store):
    """TestClient with the data store dependency pointed at the test database."""
    from fastapi.testclient import TestClient
    from app.main import app
    from app.db.store import get_store

    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def company(store):
    return store.insert("companies", {
        "company_name": "Infosys", "location": "Bengaluru", "industry_type": "IT Services",
        "hr_name": "Asha Rao", "hr_contact": "+91 9876543210",
    })


@pytest.fixture
def job(store, company):
    return store.insert("job_profiles", {"company_id": company["id"], "role": "Software Engineer", "package": 6.5})


@pytest.fixture
def student(store):
    return store.insert("students", make_student())


def make_student(**overrides):
    data = {
        "name": "Diya Iyer", "roll_number": "CS2021001", "branch": "CSE", "year": 4,
        "cgpa": 8.4, "email": "diya@example.edu", "phone_number": "9876500001",
    }
    data.update(overrides)
    return data


# Markers for test categories
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that go through the HTTP layer")
