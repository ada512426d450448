"""
Initializer for the zoo's five documented enclosures.

Run from the project root with:

    python -m zooplanner_app.init_zoo

This will create the enclosures and their current residents in the
configured database if the enclosure table is empty.
"""

from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from .config.rules import HABITAT_FOREST, HABITAT_RIVER, HABITAT_SAVANNA
from .config.settings import Settings, init_logging
from .models import EnclosureDefinition
from .repositories import database
from .repositories.enclosure_repository import EnclosureRepository

logger = logging.getLogger(__name__)


DEFAULT_ENCLOSURES: List[EnclosureDefinition] = [
    EnclosureDefinition(id=1, habitats=[HABITAT_SAVANNA], total_capacity=10, residents=[("MACACO", 3)]),
    EnclosureDefinition(id=2, habitats=[HABITAT_FOREST], total_capacity=5),
    EnclosureDefinition(
        id=3, habitats=[HABITAT_SAVANNA, HABITAT_RIVER], total_capacity=7, residents=[("GAZELA", 1)]
    ),
    EnclosureDefinition(id=4, habitats=[HABITAT_RIVER], total_capacity=8),
    EnclosureDefinition(id=5, habitats=[HABITAT_SAVANNA], total_capacity=9, residents=[("LEAO", 1)]),
]


def seed_default_enclosures(db: Session) -> int:
    """Insert the default enclosures when none exist. Returns how many were created."""
    repo = EnclosureRepository(db)
    if repo.count():
        logger.debug("Enclosures already present; skipping seed")
        return 0

    for definition in DEFAULT_ENCLOSURES:
        repo.create(EnclosureDefinition(
            id=definition.id,
            habitats=list(definition.habitats),
            total_capacity=definition.total_capacity,
            residents=list(definition.residents),
        ))
    logger.info("Seeded %d enclosures", len(DEFAULT_ENCLOSURES))
    return len(DEFAULT_ENCLOSURES)


def init_zoo() -> None:
    if database.SessionLocal is None:
        settings = Settings.default()
        init_logging(settings)
        database.init_database(settings.db_path)

    with database.SessionLocal() as db:
        seed_default_enclosures(db)


if __name__ == "__main__":
    init_zoo()
