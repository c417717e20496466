import os

# Point both services at throwaway databases before their modules are imported
os.environ["CLINIC_DATABASE_URL"] = "sqlite://"
os.environ["PERSON_DATABASE_URL"] = "sqlite://"
os.environ["CREATE_TABLES"] = "false"

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from clinic import database as clinic_database
from clinic.main import app as clinic_app
from person_registry import database as person_database
from person_registry.main import app as person_app


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def _override(app, get_db, session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def clinic_engine():
    engine = _memory_engine()
    clinic_database.Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def clinic_db(clinic_engine):
    """A session on the same database the client talks to, for seeding rows directly."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=clinic_engine)
    db = TestingSessionLocal()
    yield db
    db.close()


@pytest.fixture
def client(clinic_engine):
    _override(clinic_app, clinic_database.get_db, sessionmaker(autocommit=False, autoflush=False, bind=clinic_engine))
    yield TestClient(clinic_app)
    clinic_app.dependency_overrides.clear()


@pytest.fixture
def mock_db():
    """A session double; tests make its methods raise to drive the 500 paths."""
    return MagicMock(spec=Session)


@pytest.fixture
def mock_client(mock_db):
    clinic_app.dependency_overrides[clinic_database.get_db] = lambda: mock_db
    yield TestClient(clinic_app)
    clinic_app.dependency_overrides.clear()


@pytest.fixture
def person_engine():
    engine = _memory_engine()
    person_database.Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def person_client(person_engine):
    _override(person_app, person_database.get_db, sessionmaker(autocommit=False, autoflush=False, bind=person_engine))
    yield TestClient(person_app)
    person_app.dependency_overrides.clear()


@pytest.fixture
def person_mock_client(mock_db):
    person_app.dependency_overrides[person_database.get_db] = lambda: mock_db
    yield TestClient(person_app)
    person_app.dependency_overrides.clear()
