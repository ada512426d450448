"""
Domain models for the zooplanner app.

These are pure Python/domain classes, separate from ORM mappings.
"""

from .species import ComfortRule, SpeciesDescriptor
from .batch import AnimalBatch
from .enclosure import Enclosure, EnclosureSeedError
from .enclosure_definition import EnclosureDefinition
from .analysis import AllocationErrorKind, AnalysisResult, ViableEnclosure

__all__ = [
    "ComfortRule",
    "SpeciesDescriptor",
    "AnimalBatch",
    "Enclosure",
    "EnclosureSeedError",
    "EnclosureDefinition",
    "AllocationErrorKind",
    "AnalysisResult",
    "ViableEnclosure",
]
