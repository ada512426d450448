"""
Enclosure-side admission checks, evaluated in order:

1. COMFORT   - the batch's own comfort predicate (habitat, space, species rule)
2. TOLERANCE - residents that only share under certain habitats must see them here
3. CARNIVORE - carnivores live only with their own species

Evaluation stops at the first failing check. The result keeps the lines so
callers can show why an enclosure was refused. `admit` and `seat_residents`
hand the checks to Enclosure.admit so check and seating stay atomic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, List

from ..models.enclosure import EnclosureSeedError
from ..models.species import ComfortRule
from .comfort_rules import is_comfortable

if TYPE_CHECKING:
    from ..models.batch import AnimalBatch
    from ..models.enclosure import Enclosure


CHECK_COMFORT = "COMFORT"
CHECK_TOLERANCE = "TOLERANCE"
CHECK_CARNIVORE = "CARNIVORE"


@dataclass(slots=True)
class AdmissionCheck:
    """Single admission check with pass/fail and a short explanation."""
    code: str
    passed: bool
    message: str


@dataclass(slots=True)
class AdmissionEvaluation:
    enclosure_id: int
    species_id: str
    checks: List[AdmissionCheck] = field(default_factory=list)

    @property
    def admitted(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def failed_check(self) -> AdmissionCheck | None:
        return next((c for c in self.checks if not c.passed), None)


def check_comfort(enclosure: "Enclosure", batch: "AnimalBatch") -> AdmissionCheck:
    free = enclosure.free_space(batch.species_id)
    if is_comfortable(batch, enclosure):
        return AdmissionCheck(
            CHECK_COMFORT, True,
            f"{batch.species_id} x{batch.count} needs {batch.total_space}, free {free}",
        )
    return AdmissionCheck(
        CHECK_COMFORT, False,
        f"{batch.species_id} x{batch.count} not comfortable "
        f"(habitats {sorted(enclosure.habitats)}, needs {batch.total_space}, free {free})",
    )


def check_tolerance(enclosure: "Enclosure", batch: "AnimalBatch") -> AdmissionCheck:
    for resident in enclosure.batches:
        if resident.comfort_rule is not ComfortRule.REQUIRES_DUAL_HABITAT_TOLERANCE:
            continue
        if resident.species_id == batch.species_id:
            continue
        missing = resident.tolerance_habitats - enclosure.habitats
        if missing:
            return AdmissionCheck(
                CHECK_TOLERANCE, False,
                f"{resident.species_id} shares only with {sorted(missing)} present",
            )
    return AdmissionCheck(CHECK_TOLERANCE, True, "Residents tolerate newcomers")


def check_carnivore(enclosure: "Enclosure", batch: "AnimalBatch") -> AdmissionCheck:
    if enclosure.has_carnivores and batch.species_id not in enclosure.species:
        return AdmissionCheck(CHECK_CARNIVORE, False, "Carnivores already housed here")
    if batch.carnivore and not enclosure.has_carnivores and enclosure.species:
        return AdmissionCheck(
            CHECK_CARNIVORE, False, f"{batch.species_id} is carnivorous; enclosure is occupied"
        )
    return AdmissionCheck(CHECK_CARNIVORE, True, "No predator/prey conflict")


_CHECKS = (check_comfort, check_tolerance, check_carnivore)


def evaluate_admission(enclosure: "Enclosure", batch: "AnimalBatch") -> AdmissionEvaluation:
    """Run the admission checks in order, stopping at the first failure."""
    evaluation = AdmissionEvaluation(enclosure_id=enclosure.enclosure_id, species_id=batch.species_id)
    for check in _CHECKS:
        line = check(enclosure, batch)
        evaluation.checks.append(line)
        if not line.passed:
            break
    return evaluation


def can_admit(enclosure: "Enclosure", batch: "AnimalBatch") -> bool:
    return evaluate_admission(enclosure, batch).admitted


def admit(enclosure: "Enclosure", batch: "AnimalBatch") -> bool:
    """Atomically check and seat the batch. Returns False when refused."""
    return enclosure.admit(batch, can_admit)


def seat_residents(enclosure: "Enclosure", batches: Iterable["AnimalBatch"]) -> "Enclosure":
    """
    Seat pre-existing residents through the normal admission path.

    Resident data is trusted, so a batch that does not fit raises
    EnclosureSeedError instead of being dropped.
    """
    for batch in batches:
        if not admit(enclosure, batch):
            raise EnclosureSeedError(
                f"Enclosure {enclosure.enclosure_id} cannot hold {batch.count} {batch.species_id}"
            )
    return enclosure
