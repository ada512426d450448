"""
Comfort predicates: whether a batch accepts a candidate enclosure.

The default predicate checks habitat and space; species rules add to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

from ..models.species import ComfortRule

if TYPE_CHECKING:
    from ..models.batch import AnimalBatch
    from ..models.enclosure import Enclosure


def has_suitable_habitat(batch: "AnimalBatch", enclosure: "Enclosure") -> bool:
    return not batch.habitats.isdisjoint(enclosure.habitats)


def has_enough_space(batch: "AnimalBatch", free_space: int) -> bool:
    return free_space >= batch.total_space


def default_comfort(batch: "AnimalBatch", enclosure: "Enclosure") -> bool:
    free = enclosure.free_space(batch.species_id)
    return has_suitable_habitat(batch, enclosure) and has_enough_space(batch, free)


def companion_comfort(batch: "AnimalBatch", enclosure: "Enclosure") -> bool:
    """A single animal refuses an enclosure with nobody else in it."""
    if not default_comfort(batch, enclosure):
        return False
    free = enclosure.free_space(batch.species_id)
    if batch.count == 1 and free == enclosure.total_capacity:
        return False
    return True


def dual_habitat_comfort(batch: "AnimalBatch", enclosure: "Enclosure") -> bool:
    """Other species are tolerated only with every tolerance habitat present."""
    if not default_comfort(batch, enclosure):
        return False
    if enclosure.has_other_species(batch.species_id):
        return batch.tolerance_habitats <= enclosure.habitats
    return True


_RULES: Dict[ComfortRule, Callable[["AnimalBatch", "Enclosure"], bool]] = {
    ComfortRule.DEFAULT: default_comfort,
    ComfortRule.REQUIRES_COMPANION: companion_comfort,
    ComfortRule.REQUIRES_DUAL_HABITAT_TOLERANCE: dual_habitat_comfort,
}


def is_comfortable(batch: "AnimalBatch", enclosure: "Enclosure") -> bool:
    return _RULES[batch.comfort_rule](batch, enclosure)
