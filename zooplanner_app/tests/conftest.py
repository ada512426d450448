"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from zooplanner_app.init_zoo import seed_default_enclosures
from zooplanner_app.models import Enclosure
from zooplanner_app.services.admission_rules import seat_residents
from zooplanner_app.services.species_catalog import resolve
from zooplanner_app.services.zoo_service import ZooService


@pytest.fixture
def db_session():
    """Provide an in-memory database session with initialized schema."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool
    from zooplanner_app.repositories.database import Base
    from zooplanner_app.repositories.enclosure_repository import EnclosureORM, ResidentBatchORM  # noqa: F401

    engine = create_engine(
        "sqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def seeded_session(db_session):
    """Session holding the five default enclosures."""
    seed_default_enclosures(db_session)
    return db_session


@pytest.fixture
def zoo(seeded_session):
    """ZooService loaded from the seeded database."""
    return ZooService.from_session(seeded_session)


@pytest.fixture
def make_enclosure():
    """Build an Enclosure from (species, count) resident pairs."""

    def _make(enclosure_id=1, habitats=("savana",), capacity=10, residents=()):
        enclosure = Enclosure(
            enclosure_id=enclosure_id,
            habitats=frozenset(habitats),
            total_capacity=capacity,
        )
        return seat_residents(enclosure, [resolve(species, count) for species, count in residents])

    return _make
