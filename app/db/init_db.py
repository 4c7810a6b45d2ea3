"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before create_all() runs.
"""

import logging

from app.db.session import engine
from app.models.base import Base
from app.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db() -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    logger.info("Creating tables: %s", ", ".join(sorted(Base.metadata.tables)))
    Base.metadata.create_all(bind=engine)


def drop_db() -> None:
    """
    Drop all tables. Used by the test suite to reset state.
    """
    Base.metadata.drop_all(bind=engine)
