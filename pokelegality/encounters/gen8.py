# encoding: utf8
"""Sword and Shield: overworld slots and overworld statics.

Most Galar overworld creatures are rolled from a 32-bit seed (see
`pokelegality.correlation`), but not all of them: curry visitors, tree
shakes and scripted encounters use the global RNG instead.  Deciding which
applies to a given record is most of the work here.
"""
from enum import Enum, IntFlag
import logging

from pokelegality import correlation
from pokelegality import species as species_ids
from pokelegality.correlation import Requirement, Shiny
from pokelegality.versions import GameVersion
from .base import (
    EncounterMatchRating, EncounterTemplate, is_partial_match_hidden,
    ivs_match, random_seed)

log = logging.getLogger(__name__)

BOOST_LEVEL = 60

# Galar Mine, and Galar Mine No. 2
GALAR_MINE_LOCATIONS = frozenset([30, 54])

SW_SH = frozenset([GameVersion.SW, GameVersion.SH])


class AreaWeather8(IntFlag):
    NONE = 0
    Normal = 1
    Overcast = 2
    Raining = 4
    Thunderstorm = 8
    Intense_Sun = 16
    Snowing = 32
    Snowstorm = 64
    Sandstorm = 128
    Heavy_Fog = 256

    ALL = (Normal | Overcast | Raining | Thunderstorm | Intense_Sun
           | Snowing | Snowstorm | Sandstorm | Heavy_Fog)

    Shaking_Trees = 512
    Fishing = 1024


###
### Marks
###

MARK_CURRY = 'curry'
MARK_FISHING = 'fishing'

# Weather marks, and the weather they need
WEATHER_MARKS = {
    'cloudy': AreaWeather8.Overcast,
    'rainy': AreaWeather8.Raining,
    'stormy': AreaWeather8.Thunderstorm,
    'dry': AreaWeather8.Intense_Sun,
    'snowy': AreaWeather8.Snowing,
    'blizzard': AreaWeather8.Snowstorm,
    'sandstorm': AreaWeather8.Sandstorm,
    'misty': AreaWeather8.Heavy_Fog,
}


def has_weather_mark(marks):
    return any(mark in WEATHER_MARKS for mark in marks)


def has_curry_mark(record):
    """Curry spawns come from the global RNG.  A Shedinja only keeps the
    mark as its affixed ribbon.
    """
    if MARK_CURRY in record.marks:
        return True
    return (record.species == species_ids.SHEDINJA
            and record.affixed_ribbon == MARK_CURRY)


def is_mark_compatible(weather, marks):
    """A weather mark needs the slot to appear in that weather."""
    for mark, needed in WEATHER_MARKS.items():
        if mark in marks:
            return bool(weather & needed)
    return True


###
### Areas
###

def is_wild_area(location):
    return (122 <= location <= 154      # Wild Area
            or 164 <= location <= 194   # Isle of Armor
            or 204 <= location <= 234)  # Crown Tundra


def is_boosted_area_60(location):
    return is_wild_area(location)


def is_boosted_area_60_fog(location):
    # Only the main Wild Area boosts fog spawns by badge count
    return 122 <= location <= 154


class AreaSlotType8(Enum):
    SymbolMain = 'SymbolMain'
    SymbolMain2 = 'SymbolMain2'
    SymbolMain3 = 'SymbolMain3'
    HiddenMain = 'HiddenMain'
    HiddenMain2 = 'HiddenMain2'
    Surfing = 'Surfing'
    Surfing2 = 'Surfing2'
    Sky = 'Sky'
    Sky2 = 'Sky2'
    Ground = 'Ground'
    Sharpedo = 'Sharpedo'
    OnlyFishing = 'OnlyFishing'
    Inaccessible = 'Inaccessible'

    def can_encounter_via_fishing(self, weather):
        if self is AreaSlotType8.OnlyFishing:
            return True
        return self is AreaSlotType8.HiddenMain and bool(weather & AreaWeather8.Fishing)

    @property
    def can_encounter_via_curry(self):
        return self in _CURRY_SLOTS


_CURRY_SLOTS = frozenset([
    AreaSlotType8.HiddenMain,
    AreaSlotType8.HiddenMain2,
    AreaSlotType8.Surfing,
    AreaSlotType8.Surfing2,
    AreaSlotType8.OnlyFishing,
])


def _coerce_weather(value):
    if isinstance(value, AreaWeather8):
        return value
    if isinstance(value, str):
        flags = AreaWeather8.NONE
        for name in value.replace(',', '|').split('|'):
            flags |= AreaWeather8[name.strip()]
        return flags
    if isinstance(value, (list, tuple)):
        flags = AreaWeather8.NONE
        for name in value:
            flags |= _coerce_weather(name)
        return flags
    return AreaWeather8(value)


def _weather_name(weather):
    if weather.name:
        return weather.name.replace('_', '')
    return '|'.join(
        flag.name.replace('_', '') for flag in AreaWeather8
        if flag and flag is not AreaWeather8.ALL and weather & flag == flag)


def _apply_level(template, record, level):
    if template.weather == AreaWeather8.Heavy_Fog and is_boosted_area_60_fog(template.location):
        level = BOOST_LEVEL
    record.level = level
    record.met_level = level


###
### Slots
###

class SlotEncounter(EncounterTemplate):
    """A wild slot in a Galar area.

    `symbol` is set for areas where the creature walks around visibly;
    those always come from the overworld seed.
    """
    kind = 'slot8'
    name = "Wild Encounter"
    fields = EncounterTemplate.fields + ('weather', 'slot_type', 'symbol')

    def __init__(self, species, form=0, level_min=1, level_max=None,
                 location=0, versions=SW_SH, weather=AreaWeather8.Normal,
                 slot_type=AreaSlotType8.SymbolMain, symbol=False):
        super(SlotEncounter, self).__init__(
            species, form, level_min, level_max, location, versions,
            generation=8)
        self.weather = _coerce_weather(weather)
        self.slot_type = AreaSlotType8(slot_type)
        self.symbol = bool(symbol)

    @property
    def long_name(self):
        return "{} [{}] - {}".format(
            self.name, self.slot_type.value, _weather_name(self.weather))

    def is_level_allowed(self, record, entry):
        met = record.met_level
        if met > entry.max_level:
            return False
        if self.weather == AreaWeather8.Heavy_Fog and is_boosted_area_60_fog(self.location):
            # Fog-only spawns here are always boosted
            return met == BOOST_LEVEL
        if self.level_min <= met <= self.level_max:
            return True
        return met == BOOST_LEVEL and is_boosted_area_60(self.location)

    def get_flawless_iv_count(self, met_level):
        # Brilliant creatures are boosted to the slot's top level
        if met_level < self.level_max:
            return 0
        if self.symbol:
            return -1
        if self.weather & AreaWeather8.Fishing:
            return -1
        return 0

    def get_requirement(self, record):
        if self.symbol:
            return Requirement.MUST_HAVE
        if has_curry_mark(record):
            return Requirement.MUST_NOT_HAVE
        # Tree shakes use the global RNG, but some tree slots double as
        # regular slots
        if self.weather & AreaWeather8.Shaking_Trees:
            if self.weather == AreaWeather8.Shaking_Trees:
                return Requirement.MUST_NOT_HAVE
            return Requirement.EITHER
        return Requirement.MUST_HAVE

    def is_overworld_correlation_correct(self, record):
        return correlation.validate_overworld_encounter(
            record, flawless=self.get_flawless_iv_count(record.met_level))

    def get_match_rating(self, record):
        if record.has_hidden_ability and is_partial_match_hidden(record.species, self.species):
            return EncounterMatchRating.PARTIAL_MATCH

        marks = record.marks
        if MARK_CURRY in marks and not self.weather & AreaWeather8.ALL:
            return EncounterMatchRating.DEFERRED_ERRORS
        if MARK_FISHING in marks and not self.weather & AreaWeather8.Fishing:
            return EncounterMatchRating.DEFERRED_ERRORS
        # Tree and fishing slots get their weather checked elsewhere
        if not is_mark_compatible(self.weather, marks):
            return EncounterMatchRating.DEFERRED_ERRORS
        # Galar Mine hidden creatures only come out for curry or a rod
        if (self.location in GALAR_MINE_LOCATIONS
                and self.slot_type is AreaSlotType8.HiddenMain
                and MARK_CURRY not in marks
                and not self.slot_type.can_encounter_via_fishing(self.weather)):
            return EncounterMatchRating.DEFERRED_ERRORS

        requirement = self.get_requirement(record)
        if requirement is Requirement.EITHER:
            return EncounterMatchRating.MATCH
        consistent = self.is_overworld_correlation_correct(record)
        if requirement.is_satisfied_by(consistent):
            return EncounterMatchRating.MATCH
        return EncounterMatchRating.DEFERRED_ERRORS

    def apply_to(self, record, seed=None):
        super(SlotEncounter, self).apply_to(record, seed)
        if (not self.symbol and self.location in GALAR_MINE_LOCATIONS
                and not self.weather & AreaWeather8.Fishing):
            record.marks = record.marks | {MARK_CURRY}
        _apply_level(self, record, self.level_min)

        if seed is None:
            seed = random_seed()
        if self.get_requirement(record) is not Requirement.MUST_HAVE:
            record.encryption_constant = seed
            return record
        # Slots don't care about shininess
        return correlation.apply_overworld_details(
            record, seed, Shiny.RANDOM, self.get_flawless_iv_count(record.met_level))


###
### Statics
###

class OverworldStaticEncounter(EncounterTemplate):
    """A fixed overworld creature in Galar: legendaries standing in a
    field, gifts, scripted battles.
    """
    kind = 'static8'
    name = "Static Encounter"
    fields = ('species', 'form', 'level', 'location', 'versions', 'weather',
              'scripted_no_marks', 'gift', 'flawless', 'dynamax_level',
              'shiny', 'ivs', 'fateful')

    def __init__(self, species, form=0, level=1, location=0, versions=SW_SH,
                 weather=AreaWeather8.Normal, scripted_no_marks=False,
                 gift=False, flawless=0, dynamax_level=0,
                 shiny=Shiny.RANDOM, ivs=(), fateful=False):
        super(OverworldStaticEncounter, self).__init__(
            species, form, level, level, location, versions, generation=8)
        self.weather = _coerce_weather(weather)
        self.scripted_no_marks = bool(scripted_no_marks)
        self.gift = bool(gift)
        self.flawless = correlation.check_flawless(int(flawless))
        self.dynamax_level = int(dynamax_level)
        self.shiny = Shiny(shiny)
        self.ivs = tuple(ivs)
        self.fateful = bool(fateful)

    @property
    def level(self):
        return self.level_min

    @property
    def validation_shiny(self):
        # A random-shiny static can still be force-rerolled either way
        if self.shiny is Shiny.RANDOM:
            return Shiny.FIXED_VALUE
        return self.shiny

    def is_level_allowed(self, record, entry):
        met = record.met_level
        if met > entry.max_level:
            return False
        if (met < BOOST_LEVEL and self.weather == AreaWeather8.Heavy_Fog
                and is_boosted_area_60_fog(self.location)):
            return False
        if met == self.level:
            return True
        return (self.level < BOOST_LEVEL and is_boosted_area_60(self.location)
                and met == BOOST_LEVEL)

    def is_within_range(self, record, chain):
        if not super(OverworldStaticEncounter, self).is_within_range(record, chain):
            return False
        if record.dynamax_level < self.dynamax_level:
            return False
        return record.egg_location == 0 and ivs_match(self.ivs, record.ivs)

    def get_requirement(self, record):
        # Gifts can come from any 128-bit seed; scripted encounters don't
        # behave like saved overworld spawns
        if self.gift or self.scripted_no_marks:
            return Requirement.MUST_NOT_HAVE
        return Requirement.MUST_HAVE

    def is_overworld_correlation_correct(self, record):
        return correlation.validate_overworld_encounter(
            record, self.validation_shiny, self.flawless)

    def get_match_rating(self, record):
        if record.has_hidden_ability and is_partial_match_hidden(record.species, self.species):
            return EncounterMatchRating.PARTIAL_MATCH
        if record.fateful != self.fateful:
            return EncounterMatchRating.PARTIAL_MATCH

        requirement = self.get_requirement(record)
        consistent = self.is_overworld_correlation_correct(record)
        if (requirement is Requirement.MUST_HAVE) != consistent:
            return EncounterMatchRating.DEFERRED_ERRORS

        # Only slots hand out marks
        marks = record.marks
        if record.species == species_ids.SHEDINJA:
            # The mark is lost on evolving, the affixed ribbon isn't
            if MARK_CURRY in marks:
                return EncounterMatchRating.DEFERRED_ERRORS
            if record.affixed_ribbon == MARK_CURRY:
                return EncounterMatchRating.DEFERRED
            return EncounterMatchRating.MATCH
        if MARK_CURRY in marks or MARK_FISHING in marks or has_weather_mark(marks):
            return EncounterMatchRating.DEFERRED_ERRORS
        return EncounterMatchRating.MATCH

    def apply_to(self, record, seed=None):
        super(OverworldStaticEncounter, self).apply_to(record, seed)
        _apply_level(self, record, self.level)
        record.fateful = self.fateful
        record.dynamax_level = self.dynamax_level

        if seed is None:
            seed = random_seed()
        if self.get_requirement(record) is not Requirement.MUST_HAVE:
            record.encryption_constant = seed
            return record
        return correlation.apply_overworld_details(
            record, seed, self.validation_shiny, self.flawless)
