"""
Species descriptor model.

Each species has a unit space cost, the habitats it accepts, a carnivore
flag and the comfort rule used when it is offered an enclosure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import FrozenSet


class ComfortRule(Enum):
    DEFAULT = auto()
    REQUIRES_COMPANION = auto()  # a lone animal refuses an empty enclosure
    REQUIRES_DUAL_HABITAT_TOLERANCE = auto()  # shares only when tolerance_habitats are all present


@dataclass(frozen=True, slots=True)
class SpeciesDescriptor:
    """Static traits of one species in the catalog."""

    species_id: str
    unit_space: int
    habitats: FrozenSet[str]
    carnivore: bool = False
    comfort_rule: ComfortRule = ComfortRule.DEFAULT
    tolerance_habitats: FrozenSet[str] = field(default_factory=frozenset)
