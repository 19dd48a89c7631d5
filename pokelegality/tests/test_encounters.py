# encoding: utf8
import pytest
parametrize = pytest.mark.parametrize

from pokelegality import formulae
from pokelegality.encounters import (
    DistributionEncounter, EggEncounter, OverworldStaticEncounter,
    SlotEncounter, StaticEncounter)
from pokelegality.encounters.base import EncounterMatchRating as Rating
from pokelegality.encounters.gen8 import AreaWeather8
from pokelegality.correlation import Requirement
from pokelegality.evolution import EvoCriteria
from pokelegality.gamedata import GameData
from pokelegality.learnset import EMPTY_LEARNSET, Learnset, LearnsetTable
from pokelegality.record import CreatureRecord
from pokelegality.species import (
    PICHU, PIKACHU, RAICHU, SHEDINJA, SILCOON, WURMPLE)
from pokelegality.versions import GameVersion

TID = 24890
SID = 51234

WILD_AREA = 130
GALAR_MINE = 30
ROUTE = 20


def trainer(**kwargs):
    """A blank record belonging to our test trainer."""
    return CreatureRecord(tid=TID, sid=SID, **kwargs)


def chain(*species, **kwargs):
    max_level = kwargs.get('max_level', 100)
    return [EvoCriteria(s, 0, 1, max_level, -1) for s in species]


def caught(species=25, level=10, location=WILD_AREA, **kwargs):
    return trainer(species=species, level=level, met_level=level,
                   met_location=location, version='SW', **kwargs)


###
### Galar slots
###

@pytest.fixture
def symbol_slot():
    return SlotEncounter(25, level_min=10, level_max=15, location=WILD_AREA,
                         symbol=True)


@pytest.fixture
def correlated(symbol_slot):
    """A record rolled from an overworld seed."""
    return symbol_slot.apply_to(trainer(), seed=0x1234)


def test_symbol_slot_round_trip(symbol_slot, correlated):
    assert correlated.version == GameVersion.SW
    assert correlated.met_level == 10
    assert symbol_slot.is_within_range(correlated, chain(25))
    assert symbol_slot.get_requirement(correlated) is Requirement.MUST_HAVE
    assert symbol_slot.get_match_rating(correlated) == Rating.MATCH


def test_symbol_slot_broken_iv(symbol_slot, correlated):
    ivs = list(correlated.ivs)
    ivs[0] = (ivs[0] + 1) % 32
    correlated.ivs = ivs
    assert symbol_slot.get_match_rating(correlated) == Rating.DEFERRED_ERRORS


def test_tree_slots(correlated):
    trees = SlotEncounter(25, level_min=10, location=WILD_AREA,
                          weather='Shaking_Trees')
    assert trees.get_requirement(correlated) is Requirement.MUST_NOT_HAVE
    assert trees.get_match_rating(correlated) == Rating.DEFERRED_ERRORS

    shaken = trees.apply_to(trainer(), seed=0x1234)
    assert shaken.encryption_constant == 0x1234
    assert trees.get_match_rating(shaken) == Rating.MATCH

    # A slot that's also on the ground could be either
    both = SlotEncounter(25, level_min=10, location=WILD_AREA,
                         weather='Normal|Shaking_Trees')
    assert both.get_requirement(correlated) is Requirement.EITHER
    assert both.get_match_rating(correlated) == Rating.MATCH
    assert both.get_match_rating(shaken) == Rating.MATCH


def test_curry_mark():
    slot = SlotEncounter(25, level_min=10, location=WILD_AREA,
                         slot_type='HiddenMain')
    correlated = slot.apply_to(trainer(), seed=0x99)
    assert slot.get_match_rating(correlated) == Rating.MATCH

    # Curry visitors aren't rolled from the overworld seed
    curried = correlated.copy(marks={'curry'})
    assert slot.get_requirement(curried) is Requirement.MUST_NOT_HAVE
    assert slot.get_match_rating(curried) == Rating.DEFERRED_ERRORS

    uncorrelated = caught(marks={'curry'}, encryption_constant=0x99)
    assert slot.get_match_rating(uncorrelated) == Rating.MATCH


def test_shedinja_affixed_curry():
    slot = SlotEncounter(SHEDINJA, level_min=10, location=WILD_AREA,
                         slot_type='HiddenMain')
    record = caught(SHEDINJA, affixed_ribbon='curry')
    assert slot.get_requirement(record) is Requirement.MUST_NOT_HAVE
    # Only a Shedinja loses the mark itself
    other = caught(affixed_ribbon='curry')
    assert slot.get_requirement(other) is Requirement.MUST_HAVE


def test_curry_mark_needs_weather():
    fishing = SlotEncounter(25, level_min=10, location=WILD_AREA,
                            weather='Fishing', slot_type='OnlyFishing')
    record = caught(marks={'curry'})
    assert fishing.get_match_rating(record) == Rating.DEFERRED_ERRORS


def test_fishing_mark(correlated):
    ground = SlotEncounter(25, level_min=10, level_max=15, location=WILD_AREA)
    fishing = SlotEncounter(25, level_min=10, level_max=15, location=WILD_AREA,
                            weather=AreaWeather8.Fishing,
                            slot_type='OnlyFishing')
    fished = correlated.copy(marks={'fishing'})
    assert ground.get_match_rating(fished) == Rating.DEFERRED_ERRORS
    assert fishing.get_match_rating(fished) == Rating.MATCH


def test_weather_mark(correlated):
    rainy = correlated.copy(marks={'rainy'})
    clear = SlotEncounter(25, level_min=10, level_max=15, location=WILD_AREA,
                          symbol=True)
    raining = SlotEncounter(25, level_min=10, level_max=15, location=WILD_AREA,
                            weather=['Normal', 'Raining'], symbol=True)
    assert clear.get_match_rating(rainy) == Rating.DEFERRED_ERRORS
    assert raining.get_match_rating(rainy) == Rating.MATCH


def test_galar_mine():
    slot = SlotEncounter(25, level_min=10, location=GALAR_MINE,
                         slot_type='HiddenMain')
    record = slot.apply_to(trainer(), seed=0x5151)
    # The only way to meet these is over curry
    assert 'curry' in record.marks
    assert record.encryption_constant == 0x5151
    assert slot.get_match_rating(record) == Rating.MATCH

    no_curry = record.copy(marks=())
    assert slot.get_match_rating(no_curry) == Rating.DEFERRED_ERRORS


def test_hidden_ability_lost_in_evolution():
    slot = SlotEncounter(WURMPLE, level_min=3, location=ROUTE)
    record = caught(SILCOON, level=7, location=ROUTE, ability_number=4)
    assert slot.get_match_rating(record) == Rating.PARTIAL_MATCH


@parametrize(('location', 'level', 'expected'), [
    (WILD_AREA, 10, True),
    (WILD_AREA, 15, True),
    (WILD_AREA, 16, False),
    (WILD_AREA, 60, True),
    (ROUTE, 60, False),
    (ROUTE, 12, True),
])
def test_slot_levels(location, level, expected):
    slot = SlotEncounter(25, level_min=10, level_max=15, location=location)
    record = caught(level=level, location=location)
    assert slot.is_within_range(record, chain(25)) == expected


def test_slot_met_level_capped_by_chain():
    slot = SlotEncounter(25, level_min=10, level_max=15, location=WILD_AREA)
    record = caught(level=12)
    assert not slot.is_within_range(record, chain(25, max_level=11))


def test_slot_other_games():
    slot = SlotEncounter(25, level_min=10, location=WILD_AREA)
    record = caught().copy(version='X')
    assert not slot.is_within_range(record, chain(25))
    assert not slot.is_within_range(caught(species=26), chain(26))


@parametrize(('level', 'expected'), [(12, False), (60, True)])
def test_fog_is_always_boosted(level, expected):
    slot = SlotEncounter(25, level_min=10, level_max=15, location=WILD_AREA,
                         weather='Heavy_Fog')
    assert slot.is_within_range(caught(level=level), chain(25)) == expected


def test_fog_applies_boosted_level():
    slot = SlotEncounter(25, level_min=10, level_max=15, location=WILD_AREA,
                         weather='Heavy_Fog', symbol=True)
    record = slot.apply_to(trainer(), seed=1)
    assert record.level == record.met_level == 60


def test_flawless_counts(symbol_slot):
    assert symbol_slot.get_flawless_iv_count(10) == 0
    assert symbol_slot.get_flawless_iv_count(15) == -1

    ground = SlotEncounter(25, level_min=10, level_max=15, location=WILD_AREA)
    assert ground.get_flawless_iv_count(15) == 0
    fishing = SlotEncounter(25, level_min=10, level_max=15, location=WILD_AREA,
                            weather='Fishing', slot_type='OnlyFishing')
    assert fishing.get_flawless_iv_count(15) == -1


def test_slot_names(symbol_slot):
    assert symbol_slot.long_name == "Wild Encounter [SymbolMain] - Normal"
    fog = SlotEncounter(25, weather='Heavy_Fog')
    assert fog.long_name == "Wild Encounter [SymbolMain] - HeavyFog"


###
### Galar statics
###

@pytest.fixture
def legend():
    return OverworldStaticEncounter(144, level=70, location=WILD_AREA,
                                    flawless=3)


@pytest.fixture
def spawned(legend):
    return legend.apply_to(trainer(), seed=0xABCD)


def test_static8_round_trip(legend, spawned):
    assert spawned.level == 70
    assert spawned.ivs.count(31) >= 3
    assert legend.is_within_range(spawned, chain(144))
    assert legend.get_match_rating(spawned) == Rating.MATCH


def test_static8_broken_iv(legend, spawned):
    ivs = list(spawned.ivs)
    index = ivs.index(31)
    ivs[index] = 30
    spawned.ivs = ivs
    assert legend.get_match_rating(spawned) == Rating.DEFERRED_ERRORS


@parametrize('mark', ['curry', 'fishing', 'rainy'])
def test_static8_never_has_marks(legend, spawned, mark):
    marked = spawned.copy(marks={mark})
    assert legend.get_match_rating(marked) == Rating.DEFERRED_ERRORS


def test_static8_fateful(legend, spawned):
    fateful = spawned.copy(fateful=True)
    assert legend.get_match_rating(fateful) == Rating.PARTIAL_MATCH


def test_shedinja_keeps_weather_marks():
    shedinja = OverworldStaticEncounter(SHEDINJA, level=20, location=WILD_AREA)
    record = shedinja.apply_to(trainer(), seed=0x4444)
    assert shedinja.get_match_rating(record.copy(marks={'rainy'})) == Rating.MATCH
    assert shedinja.get_match_rating(
        record.copy(marks={'curry'})) == Rating.DEFERRED_ERRORS
    # Evolving drops the mark but not the affixed ribbon
    assert shedinja.get_match_rating(
        record.copy(affixed_ribbon='curry')) == Rating.DEFERRED
    assert shedinja.get_match_rating(
        record.copy(affixed_ribbon='rainy')) == Rating.MATCH


def test_static8_gift(legend, spawned):
    gift = OverworldStaticEncounter(144, level=70, location=WILD_AREA,
                                    gift=True, flawless=3)
    assert gift.get_requirement(spawned) is Requirement.MUST_NOT_HAVE
    assert gift.get_match_rating(spawned) == Rating.DEFERRED_ERRORS

    handed_over = gift.apply_to(trainer(), seed=0xABCD)
    assert gift.get_match_rating(handed_over) == Rating.MATCH


@parametrize(('weather', 'level', 'expected'), [
    ('Normal', 20, True),
    ('Normal', 60, True),
    ('Normal', 21, False),
    ('Heavy_Fog', 20, False),
    ('Heavy_Fog', 60, True),
])
def test_static8_levels(weather, level, expected):
    static = OverworldStaticEncounter(25, level=20, location=WILD_AREA,
                                      weather=weather)
    assert static.is_within_range(caught(level=level), chain(25)) == expected


def test_static8_fixed_ivs():
    static = OverworldStaticEncounter(25, level=20, location=ROUTE,
                                      ivs=[31, -1, 31, -1, -1, -1])
    good = caught(level=20, location=ROUTE, ivs=[31, 4, 31, 9, 9, 9])
    bad = good.copy(ivs=[30, 4, 31, 9, 9, 9])
    assert static.is_within_range(good, chain(25))
    assert not static.is_within_range(bad, chain(25))


def test_static8_dynamax_level():
    static = OverworldStaticEncounter(25, level=20, location=ROUTE,
                                      dynamax_level=2)
    record = static.apply_to(trainer(), seed=0x2222)
    assert record.dynamax_level == 2
    assert static.is_within_range(record, chain(25))
    assert static.is_within_range(record.copy(dynamax_level=5), chain(25))
    assert not static.is_within_range(record.copy(dynamax_level=1), chain(25))


@parametrize('flawless', [-1, 0, 6])
def test_static8_flawless_range(flawless):
    static = OverworldStaticEncounter(25, level=20, flawless=flawless)
    assert static.flawless == flawless


@parametrize('flawless', [7, -2])
def test_static8_flawless_out_of_range(flawless):
    with pytest.raises(ValueError):
        OverworldStaticEncounter(25, level=20, flawless=flawless)


###
### Other statics
###

@pytest.fixture
def static4():
    return StaticEncounter(150, level=70, location=50, versions=['D', 'P'])


def in_sinnoh(**kwargs):
    kwargs.setdefault('version', 'D')
    return trainer(species=150, level=75, met_level=70, met_location=50,
                   **kwargs)


def test_static_range(static4):
    assert static4.generation == 4
    assert static4.is_within_range(in_sinnoh(), chain(150))
    assert not static4.is_within_range(in_sinnoh().copy(met_level=71), chain(150))
    assert not static4.is_within_range(in_sinnoh(egg_location=2000), chain(150))
    assert not static4.is_within_range(in_sinnoh(version='HG'), chain(150))


def test_static_rating(static4):
    assert static4.get_match_rating(in_sinnoh()) == Rating.MATCH
    assert static4.get_match_rating(in_sinnoh(fateful=True)) == Rating.PARTIAL_MATCH


def test_static_hidden_ability_from_gen5():
    static = StaticEncounter(WURMPLE, level=5, versions=['D', 'W'],
                             generation=4)
    record = trainer(species=SILCOON, level=7, met_level=5, ability_number=4)
    assert static.get_match_rating(record.copy(version='D')) == Rating.MATCH
    assert static.get_match_rating(
        record.copy(version='W')) == Rating.PARTIAL_MATCH


def test_static_gift_egg():
    static = StaticEncounter(175, level=1, egg_location=2011, versions=['HG'])
    record = trainer(species=175, level=1, met_level=1, met_location=99,
                     egg_location=2011, version='HG')
    assert static.is_within_range(record, chain(175))
    assert not static.is_within_range(record.copy(egg_location=0), chain(175))


def test_static_apply():
    static = StaticEncounter(
        150, level=70, location=50, versions=['D'], ivs=[31, -1, 31, 31, 31, 31],
        moves=[94, 105], ability=2, shiny='always')
    record = static.apply_to(trainer(), seed=0x77)
    assert record.species == 150
    assert record.met_location == 50
    assert record.ivs == (31,) * 6
    assert record.moves == (94, 105)
    assert record.ability_number == 2
    assert record.is_shiny
    assert static.is_within_range(record.copy(), chain(150))


###
### Distributions
###

@pytest.fixture
def event():
    return DistributionEncounter(
        25, level=25, versions=['SW', 'SH'], card_id=1234, ivs=[31] * 6,
        moves=[344, 85], ability=4, shiny='always')


@pytest.fixture
def gifted(event):
    return event.apply_to(trainer(), seed=0x5555)


def test_distribution_round_trip(event, gifted):
    assert gifted.fateful
    assert gifted.moves == (344, 85)
    assert gifted.relearn_moves == (344, 85)
    assert gifted.is_shiny
    assert gifted.has_hidden_ability
    assert event.is_within_range(gifted, chain(25))
    assert event.get_match_rating(gifted) == Rating.MATCH


def test_distribution_needs_fateful(event, gifted):
    assert not event.is_within_range(gifted.copy(fateful=False), chain(25))


def test_distribution_moves(event, gifted):
    # Forgotten, but still relearnable
    relearned = gifted.copy(moves=[85], relearn_moves=[344])
    assert event.is_within_range(relearned, chain(25))
    forgotten = gifted.copy(moves=[85], relearn_moves=[])
    assert not event.is_within_range(forgotten, chain(25))


def test_distribution_ability(event, gifted):
    assert event.get_match_rating(
        gifted.copy(ability_number=1)) == Rating.DEFERRED_ERRORS


def test_distribution_shiny(event, gifted):
    plain = gifted.copy(pid=formulae.force_not_shiny(gifted.pid))
    assert not plain.is_shiny
    assert event.get_match_rating(plain) == Rating.PARTIAL_MATCH


def test_distribution_name(event):
    assert event.long_name == "Event Gift #1234"


###
### Eggs
###

THUNDER_SHOCK = 84
CHARM = 204
SWEET_KISS = 186


@pytest.fixture
def egg_data():
    learnsets = [EMPTY_LEARNSET] * 494
    learnsets[PICHU] = Learnset.from_pairs([
        (THUNDER_SHOCK, 1), (CHARM, 1), (39, 5)])
    return GameData(
        'P',
        learnsets=LearnsetTable(learnsets, name='learnsets4'),
        egg_moves={PICHU: [SWEET_KISS]},
        encounters=[EggEncounter(PICHU, versions=['P'])],
    )


def hatched(moves, **kwargs):
    return trainer(species=PICHU, level=1, met_level=1, egg_location=2000,
                   version='P', moves=moves, **kwargs)


def test_unbound_egg_is_deferred():
    egg = EggEncounter(PICHU, versions=['P'])
    assert egg.pools is None
    assert egg.get_match_rating(hatched([THUNDER_SHOCK])) == Rating.DEFERRED


def test_bound_egg(egg_data):
    egg, = egg_data.encounters
    assert egg.pools is not None
    assert egg.pools.base == (THUNDER_SHOCK, CHARM)

    good = hatched([THUNDER_SHOCK, CHARM, SWEET_KISS])
    assert egg.get_match_rating(good) == Rating.MATCH
    bad = hatched([SWEET_KISS, THUNDER_SHOCK, CHARM])
    assert egg.get_match_rating(bad) == Rating.DEFERRED_ERRORS


def test_egg_range(egg_data):
    egg, = egg_data.encounters
    record = hatched([THUNDER_SHOCK]).copy(species=RAICHU, level=30)
    assert egg.is_within_range(record, chain(RAICHU, PIKACHU, PICHU))
    assert not egg.is_within_range(record, chain(RAICHU, PIKACHU))
    assert not egg.is_within_range(record.copy(egg_location=0),
                                   chain(RAICHU, PIKACHU, PICHU))
    assert not egg.is_within_range(record.copy(version='D'),
                                   chain(RAICHU, PIKACHU, PICHU))


def test_egg_apply(egg_data):
    egg, = egg_data.encounters
    record = egg.apply_to(trainer())
    assert record.is_egg_origin
    assert record.level == 1
    assert record.version == GameVersion.P
    assert record.moves == (THUNDER_SHOCK, CHARM)
    assert egg.get_match_rating(record) == Rating.MATCH
