# File: tests/conftest.py

"""
Shared fixtures.

DATABASE_URL must point at SQLite before anything under ``app`` is
imported, because the engine is built at import time.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest

from app.db.init_db import drop_db, init_db
from app.db.session import SessionLocal


@pytest.fixture(autouse=True)
def fresh_schema():
    drop_db()
    init_db()
    yield
    drop_db()


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
