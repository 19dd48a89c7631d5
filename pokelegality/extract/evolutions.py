# encoding: utf8
"""Decoders for the packed evolution tables of Generations III and IV.

Both produce a list of `EvolutionMethod` tuples per national species id,
with method codes shifted into the Generation 6+ numbering.
"""
import logging

from construct import Array, ConstructError, Int8ul, Int16ul, Padding, Struct

from pokelegality.errors import DecodeError, RangeError
from pokelegality.evolution import EVOLUTIONS_WITH_ARGUMENT, EvolutionMethod
from pokelegality.species import (
    MAX_SPECIES_ID_3, MAX_SPECIES_INDEX_3, national_from_gen3)

log = logging.getLogger(__name__)


###
### Generation III
###

# Up to five 8-byte entries per internal species index; a zero method ends
# the list early.  Target species use the internal numbering too.
EVOLUTION_ENTRIES_3 = 5
evolution3_struct = Struct(
    'method' / Int16ul,
    'argument' / Int16ul,
    'species' / Int16ul,
    Padding(2),
)
evolution3_block_struct = Array(EVOLUTION_ENTRIES_3, evolution3_struct)
EVOLUTION_STRIDE_3 = evolution3_block_struct.sizeof()

# Friendship (day/night/any), trade, trade while holding an item
_PASSTHROUGH_METHODS_3 = frozenset([1, 2, 3, 5, 6])
# Tyrogue's three, Wurmple's two, Nincada's two
_LEVEL_SHIFTED_METHODS_3 = frozenset(range(8, 15))


def _method_from_gen3(raw, index):
    method = raw.method
    arg = raw.argument
    try:
        species = national_from_gen3(raw.species)
    except RangeError:
        raise DecodeError(
            "evolution target {} isn't a species".format(raw.species),
            table='evolutions3', index=index)

    if method in _PASSTHROUGH_METHODS_3:
        return EvolutionMethod(method, species, argument=arg)
    elif method == 4:
        return EvolutionMethod(4, species, argument=arg, level=arg)
    elif method in (7, 15):
        # Use item; beauty
        return EvolutionMethod(method + 1, species, argument=arg)
    elif method in _LEVEL_SHIFTED_METHODS_3:
        return EvolutionMethod(method + 1, species, argument=arg, level=arg)
    raise DecodeError(
        "unrecognized evolution method {}".format(method),
        table='evolutions3', index=index)


def decode_evolutions_gen3(data):
    """Decode the Generation III evolution table.

    Blocks are indexed by internal species index; the result is indexed by
    national id, with room for every Generation III species.
    """
    data = bytes(data)
    if len(data) % EVOLUTION_STRIDE_3:
        raise DecodeError(
            "{} bytes isn't a whole number of {}-byte species blocks".format(
                len(data), EVOLUTION_STRIDE_3),
            table='evolutions3')
    block_count = len(data) // EVOLUTION_STRIDE_3
    if block_count > MAX_SPECIES_INDEX_3 + 1:
        raise DecodeError(
            "{} species blocks, but Generation III only has {}".format(
                block_count, MAX_SPECIES_INDEX_3 + 1),
            table='evolutions3')

    evolutions = [[] for _ in range(MAX_SPECIES_ID_3 + 1)]
    for index in range(1, block_count):
        species = national_from_gen3(index)
        if species == 0:
            # One of the unused "?" slots
            continue

        offset = index * EVOLUTION_STRIDE_3
        try:
            block = evolution3_block_struct.parse(
                data[offset:offset + EVOLUTION_STRIDE_3])
        except ConstructError as e:
            raise DecodeError(str(e), table='evolutions3', index=index)

        methods = evolutions[species]
        for raw in block:
            if raw.method == 0:
                break
            methods.append(_method_from_gen3(raw, index))

    log.debug("evolutions3: decoded %d species blocks", block_count)
    return evolutions


###
### Generation IV
###

# Seven 6-byte entries per species, then two bytes of alignment.  Only the
# low byte of the method matters.
EVOLUTION_ENTRIES_4 = 7
evolution4_struct = Struct(
    'method' / Int8ul,
    Padding(1),
    'argument' / Int16ul,
    'species' / Int16ul,
)
evolution4_block_struct = Struct(
    'entries' / Array(EVOLUTION_ENTRIES_4, evolution4_struct),
    Padding(2),
)
EVOLUTION_STRIDE_4 = evolution4_block_struct.sizeof()


def _method_from_gen4(raw):
    method = raw.method
    # Generation IV has no equivalent of the Shelmet/Karrablast trade, so
    # everything from 7 up is one behind
    if method > 6:
        method += 1
    if method in EVOLUTIONS_WITH_ARGUMENT:
        level = 0
    else:
        level = raw.argument
    return EvolutionMethod(method, raw.species, argument=raw.argument,
                           level=level)


def decode_evolutions_gen4(data):
    """Decode the Generation IV evolution table, indexed by national id."""
    data = bytes(data)
    if len(data) % EVOLUTION_STRIDE_4:
        raise DecodeError(
            "{} bytes isn't a whole number of {}-byte species blocks".format(
                len(data), EVOLUTION_STRIDE_4),
            table='evolutions4')

    evolutions = []
    for index in range(len(data) // EVOLUTION_STRIDE_4):
        offset = index * EVOLUTION_STRIDE_4
        try:
            block = evolution4_block_struct.parse(
                data[offset:offset + EVOLUTION_STRIDE_4])
        except ConstructError as e:
            raise DecodeError(str(e), table='evolutions4', index=index)

        methods = []
        for raw in block.entries:
            if raw.method == 0:
                break
            methods.append(_method_from_gen4(raw))
        evolutions.append(methods)

    log.debug("evolutions4: decoded %d species blocks", len(evolutions))
    return evolutions


DECODERS = {
    'g3': decode_evolutions_gen3,
    'g4': decode_evolutions_gen4,
}


def decode_evolutions(data, layout):
    try:
        decoder = DECODERS[layout]
    except KeyError:
        raise ValueError("Unknown evolution table layout: {!r}".format(layout))
    return decoder(data)
