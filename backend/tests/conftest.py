"""
Shared fixtures: every test gets its own in-memory SQLite database, so no
records leak between tests.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.database import init_db
from app.modules.estate_planning.queries import RegistryQueries
from app.modules.estate_planning.services import WillService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def service(db_session):
    return WillService(db_session)


@pytest.fixture
def queries(db_session):
    return RegistryQueries(db_session)


@pytest.fixture
def alice(service):
    return service.create_user("Alice", "alice@x.com")


@pytest.fixture
def bob(service):
    return service.create_executor("Bob", "bob@x.com")


@pytest.fixture
def will(service, alice, bob):
    return service.create_will(alice.id, bob.id)
