"""
Species catalog: the fixed table of species the zoo accepts.

`resolve` turns a request (species name, head count) into an AnimalBatch,
validating both before any enclosure is looked at.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from ..config.rules import HABITAT_FOREST, HABITAT_RIVER, HABITAT_SAVANNA
from ..models import AllocationErrorKind, AnimalBatch, ComfortRule, SpeciesDescriptor


@dataclass(slots=True)
class BatchValidationError(Exception):
    kind: AllocationErrorKind

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.kind.message


_SPECIES: List[SpeciesDescriptor] = [
    SpeciesDescriptor("LEAO", 3, frozenset({HABITAT_SAVANNA}), carnivore=True),
    SpeciesDescriptor("LEOPARDO", 2, frozenset({HABITAT_SAVANNA}), carnivore=True),
    SpeciesDescriptor("CROCODILO", 3, frozenset({HABITAT_RIVER}), carnivore=True),
    SpeciesDescriptor(
        "MACACO",
        1,
        frozenset({HABITAT_SAVANNA, HABITAT_FOREST}),
        comfort_rule=ComfortRule.REQUIRES_COMPANION,
    ),
    SpeciesDescriptor("GAZELA", 2, frozenset({HABITAT_SAVANNA})),
    SpeciesDescriptor(
        "HIPOPOTAMO",
        4,
        frozenset({HABITAT_SAVANNA, HABITAT_RIVER}),
        comfort_rule=ComfortRule.REQUIRES_DUAL_HABITAT_TOLERANCE,
        tolerance_habitats=frozenset({HABITAT_SAVANNA, HABITAT_RIVER}),
    ),
]

_BY_ID: Dict[str, SpeciesDescriptor] = {d.species_id: d for d in _SPECIES}


def list_species() -> List[SpeciesDescriptor]:
    return list(_SPECIES)


def get_descriptor(species_id: str) -> SpeciesDescriptor | None:
    """Case-insensitive lookup of a species descriptor."""
    if not isinstance(species_id, str):
        return None
    return _BY_ID.get(species_id.upper())


def resolve(species_id: Any, count: Any) -> AnimalBatch:
    """
    Build a batch of `count` animals of `species_id`.

    A non-string species is reported before a bad count, and a bad count
    before an unknown name. Raises BatchValidationError.
    """
    if not isinstance(species_id, str):
        raise BatchValidationError(AllocationErrorKind.UNKNOWN_SPECIES)

    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise BatchValidationError(AllocationErrorKind.INVALID_COUNT)

    descriptor = get_descriptor(species_id)
    if descriptor is None:
        raise BatchValidationError(AllocationErrorKind.UNKNOWN_SPECIES)

    return AnimalBatch.from_descriptor(descriptor, count)
