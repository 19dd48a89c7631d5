# encoding: utf8
"""Reconstructing how a hatched creature got its starting moves.

An egg starts with the moves its species knows at the hatch level, then
gets inherited moves appended phase by phase, in an order that changed
between generations.  Once four moves are known, each new one pushes the
oldest out.  Given the moves that hatched, we work out which phase each
one could have come from.

Everything here works on tags; turning a tag into text is the caller's
business (see `get_source_label`).
"""
from collections import namedtuple
from enum import IntEnum

from pokelegality import species as species_ids

VOLT_TACKLE = 344

# The sentinel handed to label functions for a move index that doesn't exist
EMPTY = 'empty'


###
### Phase orders
###

class EggSource2(IntEnum):
    NONE = 0
    BASE = 1
    FATHER_EGG = 2
    FATHER_TM = 3
    PARENT_LEVEL_UP = 4
    TUTOR = 5
    MAX = 6


class EggSource34(IntEnum):
    NONE = 0
    BASE = 1
    FATHER_EGG = 2
    FATHER_TM = 3
    PARENT_LEVEL_UP = 4
    MAX = 5
    VOLT_TACKLE = 6


class EggSource5(IntEnum):
    NONE = 0
    BASE = 1
    FATHER_EGG = 2
    # Machines come after level-up moves here, unlike Generations 3 and 4
    PARENT_LEVEL_UP = 3
    FATHER_TM = 4
    MAX = 5
    VOLT_TACKLE = 6


class EggSource6(IntEnum):
    NONE = 0
    BASE = 1
    PARENT_LEVEL_UP = 2
    PARENT_EGG = 3
    MAX = 4
    VOLT_TACKLE = 5


def get_egg_source_order(generation):
    """The phase enumeration for a generation, or None if nothing in that
    generation hatches from an egg.
    """
    if generation >= 6:
        return EggSource6
    elif generation == 5:
        return EggSource5
    elif generation >= 3:
        return EggSource34
    elif generation == 2:
        return EggSource2
    return None


def get_hatch_level(generation):
    if generation <= 3:
        return 5
    return 1


###
### Move pools
###

class EggMovePools(namedtuple('EggMovePools',
        'base level_up egg machine tutor volt_tackle')):
    """Where inherited moves can come from, for one species.

    `base` is ordered (oldest first); the rest are sets.
    """
    __slots__ = ()

    def __new__(cls, base=(), level_up=(), egg=(), machine=(), tutor=(),
                volt_tackle=False):
        return super(EggMovePools, cls).__new__(
            cls, tuple(base)[-4:], frozenset(level_up), frozenset(egg),
            frozenset(machine), frozenset(tutor), bool(volt_tackle))

    @classmethod
    def from_learnset(cls, species, generation, learnset, egg=(),
                      machine=(), tutor=()):
        base = learnset.get_encounter_moves(get_hatch_level(generation))
        return cls(
            base=base,
            level_up=learnset.moves,
            egg=egg,
            machine=machine,
            tutor=tutor,
            volt_tackle=(species == species_ids.PICHU and generation >= 3),
        )

    def _pool(self, tag):
        name = tag.name
        if name == 'BASE':
            return self.base
        elif name in ('FATHER_EGG', 'PARENT_EGG'):
            return self.egg
        elif name == 'FATHER_TM':
            return self.machine
        elif name == 'PARENT_LEVEL_UP':
            return self.level_up
        elif name == 'TUTOR':
            return self.tutor
        return ()

    def possible_sources(self, order, move, is_last=False):
        """Every phase of `order` that could have supplied `move`."""
        sources = [tag for tag in order
                   if order.NONE < tag < order.MAX and move in self._pool(tag)]
        if (is_last and self.volt_tackle and move == VOLT_TACKLE
                and 'VOLT_TACKLE' in order.__members__):
            sources.append(order.VOLT_TACKLE)
        return sources


###
### Reconstruction
###

BreedResult = namedtuple('BreedResult', 'sources valid')


def _base_rule_holds(moves, sources, order, base):
    """Base moves sit at the front, in order, and are exactly as many of
    the newest ones as the inherited moves left room for.
    """
    base_count = sum(1 for tag in sources if tag == order.BASE)
    inherited = len(moves) - base_count
    expected = min(len(base), 4 - inherited)
    if base_count != expected:
        return False
    return tuple(moves[:base_count]) == base[len(base) - base_count:]


def _search(moves, options, order, base):
    """Depth-first search for a phase per move with phases never going
    backwards along the list.  First hit in phase order wins.
    """
    assigned = []

    def step(index, floor):
        if index == len(moves):
            return _base_rule_holds(moves, assigned, order, base)
        for tag in options[index]:
            if tag < floor:
                continue
            assigned.append(tag)
            if step(index + 1, tag):
                return True
            assigned.pop()
        return False

    if step(0, order.NONE):
        return list(assigned)
    return None


def validate_breed(moves, generation, pools):
    """Explain a hatched moveset.

    Returns a `BreedResult` whose `sources` has one tag per move.  If no
    consistent explanation exists, `valid` is False and each move gets its
    earliest possible phase, or NONE when nothing explains it at all.
    """
    order = get_egg_source_order(generation)
    if order is None:
        raise ValueError(
            "Nothing hatches in generation {}".format(generation))

    moves = [move for move in moves if move]
    if len(moves) > 4:
        raise ValueError("A hatched creature knows at most four moves")
    if len(set(moves)) != len(moves):
        return BreedResult(tuple(order.NONE for move in moves), False)

    options = [
        pools.possible_sources(order, move, is_last=(i == len(moves) - 1))
        for i, move in enumerate(moves)
    ]

    found = _search(moves, options, order, pools.base)
    if found is not None:
        return BreedResult(tuple(found), True)

    fallback = tuple(opts[0] if opts else order.NONE for opts in options)
    return BreedResult(fallback, False)


def get_source_label(result, generation, index, labeler):
    """Label the phase of one move, via `labeler(tag, generation)`.

    Indices past the end of the moveset, and generations without breeding,
    get the `EMPTY` sentinel instead of a tag.
    """
    if get_egg_source_order(generation) is None:
        return labeler(EMPTY, generation)
    if not 0 <= index < len(result.sources):
        return labeler(EMPTY, generation)
    return labeler(result.sources[index], generation)
