"""
Storage shape of an enclosure: what the repository keeps and the seed provides.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(slots=True)
class EnclosureDefinition:
    id: int | None = None
    habitats: List[str] = field(default_factory=list)
    total_capacity: int = 0

    # Pre-existing residents as (species_id, count), in admission order
    residents: List[Tuple[str, int]] = field(default_factory=list)
