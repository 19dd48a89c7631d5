# encoding: utf8
"""Hatched creatures."""
import logging

from pokelegality import eggmoves
from pokelegality.versions import GameVersion
from .base import EncounterMatchRating, EncounterTemplate

log = logging.getLogger(__name__)


class EggEncounter(EncounterTemplate):
    """A creature hatched from an egg of `species`.

    Rating a record needs the species' move pools, which come from game
    data; `bind` produces a copy that carries them.
    """
    kind = 'egg'
    name = "Egg"
    fields = ('species', 'form', 'versions', 'generation', 'egg_location')

    def __init__(self, species, form=0, versions=(), generation=None,
                 egg_location=0, pools=None):
        super(EggEncounter, self).__init__(
            species, form, 1, 100, 0, versions, generation)
        self.egg_location = egg_location
        self.pools = pools

    def bind(self, data):
        if self.pools is not None:
            return self
        bound = EggEncounter(self.species, self.form, self.versions,
                             self.generation, self.egg_location,
                             pools=data.egg_pools(self.species))
        return bound

    @property
    def hatch_level(self):
        return eggmoves.get_hatch_level(self.generation)

    def is_within_range(self, record, chain):
        if not record.is_egg_origin:
            return False
        if self.egg_location and record.egg_location != self.egg_location:
            return False
        if (record.version != GameVersion.ANY
                and not self.is_version_allowed(record.version)):
            return False
        # Only the bottom of the line comes out of an egg
        base = chain[-1]
        return base.species == self.species and base.form == self.form

    def get_breed_moves(self, record):
        # Later games remember what hatched as relearn moves; before that
        # all we have is the current moveset
        if self.generation >= 6:
            return record.relearn_moves
        return record.moves

    def get_match_rating(self, record):
        if self.pools is None:
            return EncounterMatchRating.DEFERRED
        result = eggmoves.validate_breed(
            self.get_breed_moves(record), self.generation, self.pools)
        if not result.valid:
            log.debug("%r: no breeding order explains %r (%r)",
                      self, record, result.sources)
            return EncounterMatchRating.DEFERRED_ERRORS
        return EncounterMatchRating.MATCH

    def apply_to(self, record, seed=None):
        super(EggEncounter, self).apply_to(record, seed)
        record.level = self.hatch_level
        record.met_level = self.hatch_level
        record.egg_location = self.egg_location or 1
        if self.pools is not None:
            hatched = self.pools.base
            record.moves = hatched
            if self.generation >= 6:
                record.relearn_moves = hatched
        return record
