"""
Animal batch model: N animals of one species offered (or housed) together.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

from .species import ComfortRule, SpeciesDescriptor


@dataclass(frozen=True, slots=True)
class AnimalBatch:
    """A group of same-species animals. Traits are copied from the descriptor."""

    species_id: str
    unit_space: int
    habitats: FrozenSet[str]
    count: int
    carnivore: bool = False
    comfort_rule: ComfortRule = ComfortRule.DEFAULT
    tolerance_habitats: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 1:
            raise ValueError(f"Batch count must be a positive integer, got {self.count!r}")

    @classmethod
    def from_descriptor(cls, descriptor: SpeciesDescriptor, count: int) -> "AnimalBatch":
        return cls(
            species_id=descriptor.species_id,
            unit_space=descriptor.unit_space,
            habitats=descriptor.habitats,
            count=count,
            carnivore=descriptor.carnivore,
            comfort_rule=descriptor.comfort_rule,
            tolerance_habitats=descriptor.tolerance_habitats,
        )

    @property
    def total_space(self) -> int:
        return self.unit_space * self.count
