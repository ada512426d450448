"""
SQLAlchemy database setup for the zooplanner app.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Base declarative class for ORM models."""

    pass


# Will be assigned a sessionmaker instance by init_database at startup
SessionLocal: sessionmaker | None = None


def init_database(db_path: Path | None = None) -> sessionmaker:
    """
    Initialize the SQLite database, create tables, and configure SessionLocal.

    With no path the database lives in memory for the life of the process;
    a single shared connection keeps every session on the same data.
    """
    # Import ORM models so their metadata is registered on Base
    from .enclosure_repository import EnclosureORM, ResidentBatchORM  # noqa: F401

    if db_path is None:
        engine = create_engine(
            "sqlite://",
            future=True,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(f"sqlite:///{db_path}", future=True, echo=False)
    Base.metadata.create_all(bind=engine)

    global SessionLocal
    SessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        future=True,
    )
    return SessionLocal
