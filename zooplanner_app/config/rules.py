"""
Husbandry rules shared by the catalog and the admission checks.

Values follow the zoo's enclosure handbook (the five-enclosure challenge
dataset). Messages are the user-facing strings returned by the analysis.
"""

from __future__ import annotations

# Habitat tags used by enclosures and species
HABITAT_SAVANNA = "savana"
HABITAT_FOREST = "floresta"
HABITAT_RIVER = "rio"

KNOWN_HABITATS = frozenset({HABITAT_SAVANNA, HABITAT_FOREST, HABITAT_RIVER})

# Space reserved once whenever an enclosure holds (or would hold) more than one species
MIXED_SPECIES_PENALTY = 1

# Error messages (kept in Portuguese, as published to keepers)
MSG_UNKNOWN_SPECIES = "Animal inválido"
MSG_INVALID_COUNT = "Quantidade inválida"
MSG_NO_VIABLE_ENCLOSURE = "Não há recinto viável"

# Viable enclosure line
VIABLE_ENCLOSURE_TEMPLATE = "Recinto {id} (espaço livre: {free} total: {total})"
