"""
Test configuration and shared fixtures for the report engine test suite.
Provides database setup, the API client and sample reporting data.
"""

import os

# Keep create_app()/init_db() away from on-disk databases
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REPORTING_DATABASE_URL"] = "sqlite://"

import pytest
from datetime import datetime, timezone
from unittest.mock import Mock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from report_engine.app import create_app
from report_engine.core import database
from report_engine.core.database import Base, DWBase, get_dw_db
from report_engine.datawarehouse.sample_data import seed_sample_data
from report_engine.query.executor import QueryExecutor


# ===== DATABASE SETUP =====


@pytest.fixture(scope="session")
def config_engine():
    """In-memory SQLite engine for the service database"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    from report_engine.logging.models import RequestLog  # noqa: F401
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture(scope="session")
def dw_engine():
    """In-memory SQLite engine for the reporting data store"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    from report_engine.datawarehouse import models  # noqa: F401
    DWBase.metadata.create_all(bind=engine)
    return engine


@pytest.fixture
def config_session_factory(config_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=config_engine)


@pytest.fixture
def config_db_session(config_engine, config_session_factory):
    session = config_session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        # Clean up all data after each test
        Base.metadata.drop_all(bind=config_engine)
        Base.metadata.create_all(bind=config_engine)


@pytest.fixture
def dw_db_session(dw_engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=dw_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        DWBase.metadata.drop_all(bind=dw_engine)
        DWBase.metadata.create_all(bind=dw_engine)


@pytest.fixture
def sample_data(dw_db_session):
    """Ledgers, tellers with transactions, offices with employees"""
    seed_sample_data(dw_db_session)
    return dw_db_session


@pytest.fixture
def executor(dw_db_session):
    return QueryExecutor(dw_db_session)


# ===== API =====


@pytest.fixture
def app(config_db_session, dw_db_session, config_session_factory, monkeypatch):
    """FastAPI app wired to the in-memory databases"""
    # Request logs are written outside dependency injection
    monkeypatch.setattr(database, "SessionLocal", config_session_factory)

    application = create_app()

    def override_get_dw_db():
        yield dw_db_session

    application.dependency_overrides[get_dw_db] = override_get_dw_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


# ===== UNIT HELPERS =====


class FixedClock:
    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def fixed_clock():
    return FixedClock(datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def mock_executor():
    """Executor whose results are queued per test via execute.side_effect"""
    return Mock(spec=QueryExecutor)
