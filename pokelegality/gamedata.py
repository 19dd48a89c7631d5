# encoding: utf8
"""Per-version game data, built once and shared.

Everything in a `GameData` is read-only after construction, so any number
of threads can match records against it.  Construction itself goes through
`GameDataRegistry.get`, which makes sure each version is built exactly
once.
"""
import logging
import threading

from pokelegality.eggmoves import EggMovePools
from pokelegality.errors import RangeError
from pokelegality.evolution import EvolutionTree
from pokelegality.learnset import EMPTY_LEARNSET, LearnsetTable
from pokelegality.species import max_species_id
from pokelegality.versions import coerce_version

log = logging.getLogger(__name__)


def empty_evolution_tree(generation):
    return EvolutionTree(
        [() for _ in range(max_species_id(generation) + 1)],
        name='evolutions{}'.format(generation))


def empty_learnset_table(generation):
    return LearnsetTable(
        [EMPTY_LEARNSET] * (max_species_id(generation) + 1),
        name='learnsets{}'.format(generation))


class GameData(object):
    """Tables and encounter templates for one game version."""

    def __init__(self, version, evolutions=None, learnsets=None,
                 egg_moves=None, machine_moves=None, tutor_moves=None,
                 encounters=()):
        self.version = coerce_version(version)
        generation = self.generation
        if evolutions is None:
            evolutions = empty_evolution_tree(generation)
        if learnsets is None:
            learnsets = empty_learnset_table(generation)
        self.evolutions = evolutions
        self.learnsets = learnsets
        self.egg_moves = _freeze_moves(egg_moves)
        self.machine_moves = _freeze_moves(machine_moves)
        self.tutor_moves = _freeze_moves(tutor_moves)
        # Declaration order matters: it breaks ties between equally good
        # templates
        self.encounters = tuple(template.bind(self) for template in encounters)

    @property
    def generation(self):
        return self.version.generation

    def __repr__(self):
        return "<GameData {}: {} encounters>".format(
            self.version.name, len(self.encounters))

    def egg_pools(self, species):
        return EggMovePools.from_learnset(
            species, self.generation, self.learnsets[species],
            egg=self.egg_moves.get(species, ()),
            machine=self.machine_moves.get(species, ()),
            tutor=self.tutor_moves.get(species, ()),
        )


def _freeze_moves(mapping):
    if not mapping:
        return {}
    return dict((int(species), tuple(moves)) for species, moves in mapping.items())


class GameDataRegistry(object):
    """Lazily builds and hands out `GameData`, one per version.

    `register` a loader (a callable taking the version and returning
    `GameData`); the first `get` for that version calls it, under a lock,
    and every later `get` returns the same object.
    """

    def __init__(self):
        self._loaders = {}
        self._data = {}
        self._lock = threading.Lock()

    def register(self, version, loader):
        version = coerce_version(version)
        with self._lock:
            self._loaders[version] = loader
            self._data.pop(version, None)

    def __contains__(self, version):
        return coerce_version(version) in self._loaders

    def get(self, version):
        version = coerce_version(version)
        data = self._data.get(version)
        if data is not None:
            return data

        with self._lock:
            data = self._data.get(version)
            if data is None:
                try:
                    loader = self._loaders[version]
                except KeyError:
                    raise RangeError("no game data registered for this version",
                                     table='registry', index=version.name)
                log.info("Building game data for %s", version.name)
                data = loader(version)
                self._data[version] = data
        return data


registry = GameDataRegistry()
