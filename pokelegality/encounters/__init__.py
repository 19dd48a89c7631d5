# encoding: utf8
"""Encounter templates: the ways a creature can enter a game."""
from .base import EncounterMatchRating, EncounterTemplate
from .egg import EggEncounter
from .gen8 import (
    AreaSlotType8, AreaWeather8, OverworldStaticEncounter, SlotEncounter)
from .static import DistributionEncounter, StaticEncounter

# Catalog documents name their variant with one of these
VARIANTS = dict((cls.kind, cls) for cls in (
    StaticEncounter,
    OverworldStaticEncounter,
    SlotEncounter,
    DistributionEncounter,
    EggEncounter,
))
