# encoding: utf8
"""Level-up learnsets."""
from pokelegality.errors import RangeError


class Learnset(object):
    """Moves a species learns by level, in the order the game lists them.

    `levels` never decreases; a move is known at level L iff its level is
    at most L.
    """
    __slots__ = ('moves', 'levels')

    def __init__(self, moves=(), levels=()):
        moves = tuple(moves)
        levels = tuple(levels)
        if len(moves) != len(levels):
            raise ValueError("moves and levels must pair up")
        self.moves = moves
        self.levels = levels

    @classmethod
    def from_pairs(cls, pairs):
        pairs = list(pairs)
        return cls([move for move, level in pairs],
                   [level for move, level in pairs])

    def __len__(self):
        return len(self.moves)

    def __iter__(self):
        return iter(zip(self.moves, self.levels))

    def __eq__(self, other):
        if not isinstance(other, Learnset):
            return NotImplemented
        return self.moves == other.moves and self.levels == other.levels

    def __hash__(self):
        return hash((self.moves, self.levels))

    def __repr__(self):
        return "<Learnset {}>".format(
            ', '.join('{}@{}'.format(m, l) for m, l in self))

    def is_sorted(self):
        return all(a <= b for a, b in zip(self.levels, self.levels[1:]))

    def get_moves(self, max_level, min_level=0):
        return [move for move, level in self
                if min_level <= level <= max_level]

    def get_encounter_moves(self, level):
        """The moveset a creature generated at `level` starts with: the last
        four distinct moves learned at or below it, oldest first.
        """
        known = []
        for move, learned_at in self:
            if learned_at > level:
                break
            if move in known:
                continue
            known.append(move)
        return known[-4:]

    def get_level_learn_move(self, move):
        """First level `move` is learned at, or -1."""
        for m, level in self:
            if m == move:
                return level
        return -1

    def can_learn(self, move, level=100):
        learned_at = self.get_level_learn_move(move)
        return learned_at != -1 and learned_at <= level


EMPTY_LEARNSET = Learnset()


class LearnsetTable(object):
    """A decoded learnset table, one `Learnset` per species id."""

    def __init__(self, learnsets, name=None):
        self.name = name or 'learnsets'
        self._learnsets = tuple(learnsets)

    def __len__(self):
        return len(self._learnsets)

    def __iter__(self):
        return iter(self._learnsets)

    def __getitem__(self, species):
        if not 0 <= species < len(self._learnsets):
            raise RangeError("species not in learnset table",
                             table=self.name, index=species)
        return self._learnsets[species]

    @property
    def max_species(self):
        return len(self._learnsets) - 1
