"""
Enclosure model: fixed habitats and capacity, growing set of resident batches.

Occupied space, resident species and the carnivore flag are kept in step
with the resident list by `admit`, which is the only mutator. Whether a
batch may be admitted is decided by the caller's check.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List, Set

from ..config.rules import MIXED_SPECIES_PENALTY
from .batch import AnimalBatch


@dataclass(slots=True)
class EnclosureSeedError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(slots=True, eq=False)
class Enclosure:
    """A physical housing unit in the zoo."""

    enclosure_id: int
    habitats: FrozenSet[str]
    total_capacity: int

    occupied_space: int = field(default=0, init=False)
    species: Set[str] = field(default_factory=set, init=False)
    batches: List[AnimalBatch] = field(default_factory=list, init=False)
    has_carnivores: bool = field(default=False, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.total_capacity, bool) or self.total_capacity <= 0:
            raise ValueError(f"Enclosure {self.enclosure_id}: capacity must be positive")
        self.habitats = frozenset(self.habitats)

    def has_other_species(self, species_id: str) -> bool:
        """True if a species other than `species_id` already lives here."""
        return len(self.species) > 1 or (
            len(self.species) == 1 and species_id not in self.species
        )

    def free_space(self, species_id: str) -> int:
        """Space left for `species_id`, less the shared-space unit if it would mix species."""
        remaining = self.total_capacity - self.occupied_space
        if self.has_other_species(species_id):
            return remaining - MIXED_SPECIES_PENALTY
        return remaining

    def admit(self, batch: AnimalBatch, check: Callable[["Enclosure", AnimalBatch], bool]) -> bool:
        """
        Seat the batch if `check(self, batch)` passes.

        Check and update run under the enclosure lock. Returns False and
        leaves the enclosure untouched when admission is refused.
        """
        with self._lock:
            if not check(self, batch):
                return False
            self.has_carnivores = self.has_carnivores or batch.carnivore
            self.species.add(batch.species_id)
            self.batches.append(batch)
            self.occupied_space += batch.total_space
            return True
