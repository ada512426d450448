"""
Repository layer for persistence (SQLite via SQLAlchemy).
"""

from zooplanner_app.repositories.database import SessionLocal, Base, init_database
from zooplanner_app.repositories.enclosure_repository import EnclosureRepository

__all__ = [
    "SessionLocal",
    "Base",
    "init_database",
    "EnclosureRepository",
]
