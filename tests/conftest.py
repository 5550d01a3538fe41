# tests/conftest.py
import os
import tempfile

# Keep the module-level database path out of the real user profile.
os.environ.setdefault("XDG_DATA_HOME", tempfile.mkdtemp(prefix="resource-workload-tests-"))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.models import BoundaryRule
from infra.db.base import Base
import infra.db.models  # noqa: F401
from infra.services import build_services


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    return build_services(session, boundary_rule=BoundaryRule.INCLUSIVE)
