# encoding: utf8
"""Fixed encounters that don't involve the Galar overworld: legendaries,
gifts, and distributed event creatures.
"""
from pokelegality.correlation import Shiny
from pokelegality import formulae
from .base import (
    EncounterMatchRating, EncounterTemplate, is_partial_match_hidden,
    ivs_match, random_seed)

# Ability permission: 0 means any of the regular two
ANY_ABILITY = 0


class StaticEncounter(EncounterTemplate):
    """One fixed creature at one fixed level."""
    kind = 'static'
    name = "Static Encounter"
    fields = ('species', 'form', 'level', 'location', 'versions',
              'generation', 'egg_location', 'ivs', 'moves', 'ability',
              'shiny', 'gift', 'fateful')

    def __init__(self, species, form=0, level=1, location=0, versions=(),
                 generation=None, egg_location=0, ivs=(), moves=(),
                 ability=ANY_ABILITY, shiny=Shiny.RANDOM, gift=False,
                 fateful=False):
        super(StaticEncounter, self).__init__(
            species, form, level, level, location, versions, generation)
        self.egg_location = egg_location
        self.ivs = tuple(ivs)
        self.moves = tuple(moves)
        self.ability = ability
        self.shiny = Shiny(shiny)
        self.gift = bool(gift)
        self.fateful = bool(fateful)

    @property
    def level(self):
        return self.level_min

    def is_level_allowed(self, record, entry):
        return record.met_level == self.level and record.met_level <= entry.max_level

    def is_location_allowed(self, record):
        # Hatched from a gift egg: the met location is wherever it hatched
        if self.egg_location:
            return True
        return super(StaticEncounter, self).is_location_allowed(record)

    def is_within_range(self, record, chain):
        if not super(StaticEncounter, self).is_within_range(record, chain):
            return False
        if record.egg_location != self.egg_location:
            return False
        return ivs_match(self.ivs, record.ivs)

    def get_match_rating(self, record):
        if (record.generation >= 5 and record.has_hidden_ability
                and is_partial_match_hidden(record.species, self.species)):
            return EncounterMatchRating.PARTIAL_MATCH
        if record.fateful != self.fateful:
            return EncounterMatchRating.PARTIAL_MATCH
        return EncounterMatchRating.MATCH

    def apply_to(self, record, seed=None):
        super(StaticEncounter, self).apply_to(record, seed)
        record.egg_location = self.egg_location
        record.fateful = self.fateful
        if self.moves:
            record.moves = self.moves
        if self.ivs:
            record.ivs = [31 if iv == -1 else iv for iv in self.ivs]
        if self.ability != ANY_ABILITY:
            record.ability_number = self.ability
        _apply_shiny(self.shiny, record, seed)
        return record


class DistributionEncounter(EncounterTemplate):
    """An event creature handed out by a gift card.  Everything about it
    is fixed, and it's always a fateful encounter.
    """
    kind = 'distribution'
    name = "Event Gift"
    fields = ('species', 'form', 'level', 'location', 'versions',
              'generation', 'card_id', 'ivs', 'moves', 'ability', 'shiny')

    def __init__(self, species, form=0, level=1, location=0, versions=(),
                 generation=None, card_id=0, ivs=(), moves=(),
                 ability=ANY_ABILITY, shiny=Shiny.RANDOM):
        super(DistributionEncounter, self).__init__(
            species, form, level, level, location, versions, generation)
        self.card_id = card_id
        self.ivs = tuple(ivs)
        self.moves = tuple(moves)
        self.ability = ability
        self.shiny = Shiny(shiny)

    @property
    def level(self):
        return self.level_min

    @property
    def long_name(self):
        if self.card_id:
            return "{} #{:04d}".format(self.name, self.card_id)
        return self.name

    def is_within_range(self, record, chain):
        if not super(DistributionEncounter, self).is_within_range(record, chain):
            return False
        if not record.fateful:
            return False
        if not ivs_match(self.ivs, record.ivs):
            return False
        known = set(record.moves) | set(record.relearn_moves)
        return all(move in known for move in self.moves)

    def get_match_rating(self, record):
        if self.ability != ANY_ABILITY and record.ability_number != self.ability:
            return EncounterMatchRating.DEFERRED_ERRORS
        if self.shiny is Shiny.ALWAYS and not record.is_shiny:
            return EncounterMatchRating.PARTIAL_MATCH
        if self.shiny is Shiny.NEVER and record.is_shiny:
            return EncounterMatchRating.PARTIAL_MATCH
        return EncounterMatchRating.MATCH

    def apply_to(self, record, seed=None):
        super(DistributionEncounter, self).apply_to(record, seed)
        record.fateful = True
        record.moves = self.moves
        if record.generation >= 6:
            record.relearn_moves = self.moves
        if self.ivs:
            record.ivs = [31 if iv == -1 else iv for iv in self.ivs]
        if self.ability != ANY_ABILITY:
            record.ability_number = self.ability
        _apply_shiny(self.shiny, record, seed)
        return record


def _apply_shiny(shiny, record, seed):
    if seed is None:
        seed = random_seed()
    pid = seed & 0xFFFFFFFF
    if shiny is Shiny.ALWAYS and not formulae.is_shiny(pid, record.tid, record.sid):
        pid = formulae.get_shiny_pid(pid, record.tid, record.sid)
    elif shiny is Shiny.NEVER and formulae.is_shiny(pid, record.tid, record.sid):
        pid = formulae.force_not_shiny(pid)
    record.pid = pid
    record.encryption_constant = seed & 0xFFFFFFFF
