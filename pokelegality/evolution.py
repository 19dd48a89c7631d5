# encoding: utf8
"""Evolution methods and the per-generation evolution graph.

Method codes follow the Generation 6+ numbering.  Older tables get shifted
into this space by their decoders (see `pokelegality.extract.evolutions`).
"""
from collections import defaultdict, namedtuple
from enum import IntEnum
import logging

from pokelegality.errors import RangeError

log = logging.getLogger(__name__)


class EvolutionType(IntEnum):
    NONE = 0
    LEVEL_UP_FRIENDSHIP = 1
    LEVEL_UP_FRIENDSHIP_MORNING = 2
    LEVEL_UP_FRIENDSHIP_NIGHT = 3
    LEVEL_UP = 4
    TRADE = 5
    TRADE_HELD_ITEM = 6
    TRADE_SHELMET_KARRABLAST = 7
    USE_ITEM = 8
    LEVEL_UP_ATK = 9
    LEVEL_UP_AEQD = 10
    LEVEL_UP_DEF = 11
    LEVEL_UP_ECL5 = 12
    LEVEL_UP_ECGEQ5 = 13
    LEVEL_UP_NINJASK = 14
    LEVEL_UP_SHEDINJA = 15
    LEVEL_UP_BEAUTY = 16
    USE_ITEM_MALE = 17
    USE_ITEM_FEMALE = 18
    LEVEL_UP_HELD_ITEM_DAY = 19
    LEVEL_UP_HELD_ITEM_NIGHT = 20
    LEVEL_UP_KNOW_MOVE = 21
    LEVEL_UP_WITH_TEAMMATE = 22
    LEVEL_UP_MALE = 23
    LEVEL_UP_FEMALE = 24
    LEVEL_UP_ELECTRIC = 25
    LEVEL_UP_FOREST = 26
    LEVEL_UP_COLD = 27
    LEVEL_UP_INVERTED = 28
    LEVEL_UP_AFFECTION50_MOVE_TYPE = 29
    LEVEL_UP_MOVE_TYPE = 30
    LEVEL_UP_WEATHER = 31
    LEVEL_UP_MORNING = 32
    LEVEL_UP_NIGHT = 33
    LEVEL_UP_FORM_FEMALE1 = 34
    UNUSED = 35
    LEVEL_UP_VERSION = 36
    LEVEL_UP_VERSION_DAY = 37
    LEVEL_UP_VERSION_NIGHT = 38
    LEVEL_UP_SUMMIT = 39
    LEVEL_UP_DUSK = 40
    LEVEL_UP_WORMHOLE = 41
    USE_ITEM_WORMHOLE = 42
    CRITICAL_HITS_IN_BATTLE = 43
    HIT_POINTS_LOST_IN_BATTLE = 44
    SPIN = 45
    LEVEL_UP_NATURE_AMPED = 46
    LEVEL_UP_NATURE_LOW_KEY = 47
    TOWER_OF_DARKNESS = 48
    TOWER_OF_WATERS = 49

    @property
    def is_trade(self):
        return self in (EvolutionType.TRADE, EvolutionType.TRADE_HELD_ITEM,
                        EvolutionType.TRADE_SHELMET_KARRABLAST)

    @property
    def is_level_up_required(self):
        return self.name.startswith('LEVEL_UP')


# Methods whose argument is an item, move, species or type rather than a
# level.  Decoders leave `level` at 0 for these.
EVOLUTIONS_WITH_ARGUMENT = frozenset([
    6, 8, 16, 17, 18, 19, 20, 21, 22, 29, 42,
])


class EvolutionMethod(namedtuple('EvolutionMethod',
        'method species argument level form')):
    """One outgoing edge: how, into what, and at what level (0 if the method
    isn't level-gated).  `form` is -1 when the target keeps the source form.
    """
    __slots__ = ()

    def __new__(cls, method, species, argument=0, level=0, form=-1):
        return super(EvolutionMethod, cls).__new__(
            cls, method, species, argument, level, form)

    @property
    def type(self):
        try:
            return EvolutionType(self.method)
        except ValueError:
            return EvolutionType.NONE

    def get_destination_form(self, form):
        if self.form == -1:
            return form
        return self.form

    def __repr__(self):
        return "<EvolutionMethod {} -> {} arg={} lv={}>".format(
            self.type.name, self.species, self.argument, self.level)


class EvoCriteria(namedtuple('EvoCriteria',
        'species form min_level max_level method')):
    """One stage of an evolution chain, with the level window in which the
    creature could have been this species.  `method` is how the *next*
    stage up was reached, or -1 for the most evolved stage.
    """
    __slots__ = ()

    @property
    def requires_level_up(self):
        return self.method > 0 and EvolutionType(self.method).is_level_up_required

    @property
    def is_trade_required(self):
        return self.method > 0 and EvolutionType(self.method).is_trade


EvolutionLink = namedtuple('EvolutionLink', 'species form method')


class EvolutionTree(object):
    """Generation-specific evolution data, indexed both ways.

    `entries[species]` is the ordered tuple of `EvolutionMethod`s for that
    species, exactly as the game lists them.  The reverse lineage
    (destination -> sources) is built once here; nothing mutates either
    afterwards.
    """

    def __init__(self, entries, name=None):
        self.name = name or 'evolutions'
        self.entries = tuple(tuple(methods) for methods in entries)
        self.max_species = len(self.entries) - 1

        lineage = defaultdict(list)
        for species, methods in enumerate(self.entries):
            for evo in methods:
                if evo.species == 0:
                    continue
                # Older games don't have per-form evolution data, so forms
                # carry through unchanged
                key = (evo.species, evo.get_destination_form(0))
                lineage[key].append(EvolutionLink(species, 0, evo))
        self._lineage = dict(
            (key, tuple(links)) for key, links in lineage.items())

        log.debug("%s: %d species, %d evolution targets",
                  self.name, len(self.entries), len(self._lineage))

    def _check(self, species):
        if not 0 <= species <= self.max_species:
            raise RangeError("species not in evolution table",
                             table=self.name, index=species)

    def __len__(self):
        return len(self.entries)

    def __getitem__(self, species):
        self._check(species)
        return self.entries[species]

    def get_evolutions(self, species, form=0):
        """All (species, form) pairs directly reachable from here."""
        return [(evo.species, evo.get_destination_form(form))
                for evo in self[species]]

    def get_pre_evolutions(self, species, form=0):
        self._check(species)
        return self._lineage.get((species, form), ())

    def get_evolution_chain(self, species, form=0, level=100, min_level=1):
        """List of `EvoCriteria`, most evolved first, back to the base.

        A pre-evolution is only listed if the creature could actually have
        been it within [min_level, level]: level-gated methods need the
        current level to reach them, and anything that needs a level-up to
        evolve caps the previous stage one level lower.
        """
        self._check(species)
        chain = []
        max_level = level
        method = -1
        seen = set()
        while True:
            chain.append(EvoCriteria(species, form, min_level, max_level, method))
            seen.add((species, form))

            next_stage = None
            for link in self.get_pre_evolutions(species, form):
                if (link.species, link.form) in seen:
                    continue
                evo = link.method
                if evo.level and max_level < evo.level:
                    continue
                stage_max = max_level
                if evo.type.is_level_up_required:
                    stage_max -= 1
                if stage_max < min_level:
                    continue
                next_stage = link, stage_max
                break

            if next_stage is None:
                return chain
            link, max_level = next_stage
            species, form, method = link.species, link.form, link.method.method

    def get_base_species(self, species, form=0):
        """The unconstrained bottom of the chain: what hatches."""
        chain = self.get_evolution_chain(species, form, level=100, min_level=0)
        bottom = chain[-1]
        return bottom.species, bottom.form
