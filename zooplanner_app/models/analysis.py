"""
Result types of an allocation analysis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..config.rules import MSG_INVALID_COUNT, MSG_NO_VIABLE_ENCLOSURE, MSG_UNKNOWN_SPECIES


class AllocationErrorKind(Enum):
    UNKNOWN_SPECIES = MSG_UNKNOWN_SPECIES
    INVALID_COUNT = MSG_INVALID_COUNT
    NO_VIABLE_ENCLOSURE = MSG_NO_VIABLE_ENCLOSURE

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ViableEnclosure:
    enclosure_id: int
    free_space_after: int
    total_capacity: int


@dataclass(slots=True)
class AnalysisResult:
    """Either a non-empty list of viable enclosures or a single error."""

    viable: List[ViableEnclosure] = field(default_factory=list)
    error: AllocationErrorKind | None = None

    def __post_init__(self) -> None:
        if bool(self.viable) == (self.error is not None):
            raise ValueError("AnalysisResult needs either viable enclosures or an error, not both")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, kind: AllocationErrorKind) -> "AnalysisResult":
        return cls(viable=[], error=kind)
