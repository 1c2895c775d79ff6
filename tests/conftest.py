"""Shared pytest fixtures for healthtravel tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from healthtravel.db.schema import Base, City
from healthtravel.db.session import enable_sqlite_foreign_keys


def make_engine():
    """Create an in-memory SQLite engine with foreign keys enforced."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    return make_engine()


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def add_city(session):
    """Return a helper that inserts and commits a city row."""

    def _add_city(city_id: str = "c1", city_name: str = "Lisbon") -> City:
        city = City(
            id=city_id,
            city_name=city_name,
            country="Portugal",
            overview="Coastal capital",
        )
        session.add(city)
        session.commit()
        return city

    return _add_city


@pytest.fixture
def client(engine):
    """TestClient wired to the in-memory engine."""
    from healthtravel.api.app import create_app, get_db_session

    app = create_app()

    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db
    return TestClient(app)
