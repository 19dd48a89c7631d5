# encoding: utf8
"""What every kind of encounter template has in common."""
from enum import IntEnum
import random

from pokelegality import species as species_ids
from pokelegality.versions import (
    GameVersion, coerce_version, versions_for_generation)


class EncounterMatchRating(IntEnum):
    """How well a template explains a record.  Lower is better."""
    MATCH = 0
    PARTIAL_MATCH = 1
    DEFERRED = 2
    DEFERRED_ERRORS = 3
    NONE = 4


# Species with a single ability, which erase a hidden ability when a line
# evolves through them
_HIDDEN_ABILITY_BREAKERS = frozenset([
    species_ids.METAPOD,
    species_ids.KAKUNA,
    species_ids.PUPITAR,
    species_ids.SILCOON,
    species_ids.CASCOON,
])


def is_partial_match_hidden(current, original):
    """True if a hidden ability can't have survived evolving from
    `original` into `current`.
    """
    if current == original:
        return False
    return current in _HIDDEN_ABILITY_BREAKERS or original in _HIDDEN_ABILITY_BREAKERS


def ivs_match(template_ivs, record_ivs):
    """-1 on either side is a wildcard."""
    if not template_ivs:
        return True
    for fixed, stored in zip(template_ivs, record_ivs):
        if fixed == -1 or stored == -1:
            continue
        if fixed != stored:
            return False
    return True


def random_seed():
    return random.getrandbits(32)


class EncounterTemplate:
    """Base for all template variants.

    Subclasses declare the keyword fields they accept in `fields` (the
    catalog loader relies on this) and override the three hooks:
    `is_within_range`, `get_match_rating`, `apply_to`.
    """
    kind = None
    name = "Encounter"
    fields = ('species', 'form', 'level_min', 'level_max', 'location',
              'versions')

    def __init__(self, species, form=0, level_min=1, level_max=None,
                 location=0, versions=(), generation=None):
        self.species = species
        self.form = form
        self.level_min = level_min
        self.level_max = level_min if level_max is None else level_max
        self.location = location
        self.versions = frozenset(coerce_version(v) for v in versions)
        if generation is None:
            generation = self._guess_generation()
        self._generation = generation

    def _guess_generation(self):
        generations = set(v.generation for v in self.versions)
        if len(generations) != 1:
            raise ValueError(
                "Can't tell which generation {!r} belongs to; "
                "give it a generation or versions".format(self))
        return generations.pop()

    @property
    def generation(self):
        return self._generation

    @property
    def long_name(self):
        if not self.versions:
            return self.name
        return "{} ({})".format(
            self.name, '/'.join(v.name for v in sorted(self.versions)))

    def __repr__(self):
        return "<{}: species {} form {} lv{}-{}>".format(
            type(self).__name__, self.species, self.form,
            self.level_min, self.level_max)

    def bind(self, data):
        """Hook for templates that need per-version game data to rate a
        record; returns the template to use with that data.
        """
        return self

    ### Matching

    def is_version_allowed(self, version):
        if self.versions:
            return version in self.versions
        return version.generation == self.generation

    def find_chain_entry(self, chain):
        """The stage of `chain` this template could have produced."""
        for entry in chain:
            if entry.species == self.species and entry.form == self.form:
                return entry
        return None

    def is_level_allowed(self, record, entry):
        met = record.met_level
        return self.level_min <= met <= self.level_max and met <= entry.max_level

    def is_location_allowed(self, record):
        return self.location == 0 or self.location == record.met_location

    def is_within_range(self, record, chain):
        """The hard filter: species, form, level, version and location."""
        if record.version != GameVersion.ANY and not self.is_version_allowed(record.version):
            return False
        entry = self.find_chain_entry(chain)
        if entry is None:
            return False
        if not self.is_level_allowed(record, entry):
            return False
        return self.is_location_allowed(record)

    def get_match_rating(self, record):
        return EncounterMatchRating.MATCH

    ### Hypotheses

    def apply_to(self, record, seed=None):
        """Turn `record` (a copy!) into what this template generates."""
        record.species = self.species
        record.form = self.form
        record.level = self.level_min
        record.met_level = self.level_min
        record.met_location = self.location
        if not self.is_version_allowed(record.version):
            record.version = min(self.versions or versions_for_generation(self.generation))
        return record
