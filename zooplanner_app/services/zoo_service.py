"""
Allocation engine: which enclosures could take a requested batch.

`analyze` is a read-only query over the registered enclosures. `allocate`
seats a batch in one named enclosure and records it.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from ..models import (
    AllocationErrorKind,
    AnalysisResult,
    Enclosure,
    EnclosureDefinition,
    ViableEnclosure,
)
from ..repositories.enclosure_repository import EnclosureRepository
from .admission_rules import AdmissionEvaluation, admit, evaluate_admission, seat_residents
from .species_catalog import BatchValidationError, resolve

logger = logging.getLogger(__name__)


def build_enclosure(definition: EnclosureDefinition) -> Enclosure:
    """Create a live Enclosure from its stored definition, seating its residents."""
    if definition.id is None:
        raise ValueError("EnclosureDefinition.id must be set")
    enclosure = Enclosure(
        enclosure_id=definition.id,
        habitats=frozenset(definition.habitats),
        total_capacity=definition.total_capacity,
    )
    residents = [resolve(species_id, count) for species_id, count in definition.residents]
    return seat_residents(enclosure, residents)


class ZooService:
    """Encapsulates enclosure analysis and allocation for one zoo."""

    def __init__(self, enclosures: Iterable[Enclosure], repo: Optional[EnclosureRepository] = None) -> None:
        self._enclosures: List[Enclosure] = list(enclosures)
        self._repo = repo

    @classmethod
    def from_session(cls, db: Session) -> "ZooService":
        repo = EnclosureRepository(db)
        enclosures = [build_enclosure(d) for d in repo.list()]
        logger.info("Loaded %d enclosures", len(enclosures))
        return cls(enclosures, repo=repo)

    @property
    def enclosures(self) -> List[Enclosure]:
        return list(self._enclosures)

    def get_enclosure(self, enclosure_id: int) -> Enclosure | None:
        return next((e for e in self._enclosures if e.enclosure_id == enclosure_id), None)

    def analyze(self, species_id: Any, count: Any) -> AnalysisResult:
        """
        List every enclosure that could admit `count` animals of `species_id`,
        with the free space each would have left. Enclosures are not modified.
        """
        logger.info("Analysing %r x%r", species_id, count)
        try:
            batch = resolve(species_id, count)
        except BatchValidationError as exc:
            logger.info("Rejected request %r x%r: %s", species_id, count, exc.kind.message)
            return AnalysisResult.failure(exc.kind)

        viable: List[ViableEnclosure] = []
        for enclosure in self._enclosures:
            evaluation = evaluate_admission(enclosure, batch)
            if not evaluation.admitted:
                failed = evaluation.failed_check
                logger.debug(
                    "Enclosure %s refused %s: %s %s",
                    enclosure.enclosure_id, batch.species_id, failed.code, failed.message,
                )
                continue
            viable.append(ViableEnclosure(
                enclosure_id=enclosure.enclosure_id,
                free_space_after=enclosure.free_space(batch.species_id) - batch.total_space,
                total_capacity=enclosure.total_capacity,
            ))

        if not viable:
            return AnalysisResult.failure(AllocationErrorKind.NO_VIABLE_ENCLOSURE)
        return AnalysisResult(viable=viable)

    def explain(self, species_id: Any, count: Any) -> List[Tuple[int, AdmissionEvaluation]]:
        """Per-enclosure admission verdicts. Raises BatchValidationError on a bad request."""
        batch = resolve(species_id, count)
        return [(e.enclosure_id, evaluate_admission(e, batch)) for e in self._enclosures]

    def allocate(self, species_id: Any, count: Any, enclosure_id: int) -> AnalysisResult:
        """
        Seat the batch in the given enclosure if it can be admitted there.

        Check and seating are atomic per enclosure. When the service was
        loaded from a session the new resident is stored as well.
        """
        enclosure = self.get_enclosure(enclosure_id)
        if enclosure is None:
            raise LookupError(f"Enclosure {enclosure_id} not found")

        try:
            batch = resolve(species_id, count)
        except BatchValidationError as exc:
            return AnalysisResult.failure(exc.kind)

        if not admit(enclosure, batch):
            logger.info("Enclosure %s refused %s x%d", enclosure_id, batch.species_id, batch.count)
            return AnalysisResult.failure(AllocationErrorKind.NO_VIABLE_ENCLOSURE)

        if self._repo is not None:
            self._repo.add_resident(enclosure_id, batch.species_id, batch.count)
        logger.info("Seated %s x%d in enclosure %s", batch.species_id, batch.count, enclosure_id)
        return AnalysisResult(viable=[ViableEnclosure(
            enclosure_id=enclosure_id,
            free_space_after=enclosure.free_space(batch.species_id),
            total_capacity=enclosure.total_capacity,
        )])
