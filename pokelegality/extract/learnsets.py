# encoding: utf8
"""Decoders for level-up learnset tables.

The Game Boy games pack every species' learnset into one contiguous run of
(level, move) byte pairs, each species' list ending with a zero.  Everything
later stores one 16-bit list per species, usually inside a packed container
(see `pokelegality.extract.lib.pc`).
"""
import io
import logging

from construct import (
    Array, ConstructError, Int8ul, Int16sl, Peek, StreamError, Struct,
    Subconstruct)
from construct.lib import ListContainer

from pokelegality.errors import DecodeError
from pokelegality.learnset import EMPTY_LEARNSET, Learnset, LearnsetTable
from pokelegality.extract.lib import pc

log = logging.getLogger(__name__)


class NullTerminatedArray(Subconstruct):
    """Repeats the subcon until the next byte is a zero, then eats the
    zero.  Running out of data first is an error.
    """
    _peeker = Peek(Int8ul)
    __slots__ = ()

    def _parse(self, stream, context, path):
        obj = ListContainer()
        while True:
            nextbyte = self._peeker._parsereport(stream, context, path)
            if nextbyte is None:
                raise StreamError("ran out of data before a terminator",
                                  path=path)
            if nextbyte == 0:
                break
            obj.append(self.subcon._parsereport(stream, context, path))

        # Consume the trailing zero
        stream.read(1)

        return obj

    def _build(self, obj, stream, context, path):
        raise NotImplementedError


###
### 8-bit
###

def _sorted_learnset(pairs, table, index):
    learnset = Learnset([pair.move for pair in pairs],
                        [pair.level for pair in pairs])
    if not learnset.is_sorted():
        raise DecodeError("levels go down: {}".format(list(learnset.levels)),
                          table=table, index=index)
    return learnset


learnset8_pair_struct = Struct(
    'level' / Int8ul,
    'move' / Int8ul,
)
learnset8_struct = NullTerminatedArray(learnset8_pair_struct)


def decode_learnsets8(data, max_species):
    """Decode `max_species + 1` consecutive 8-bit learnsets.

    Species 0 is included; the games keep a (normally empty) list for it.
    """
    stream = io.BytesIO(bytes(data))
    learnsets = []
    for species in range(max_species + 1):
        try:
            pairs = learnset8_struct.parse_stream(stream)
        except ConstructError as e:
            raise DecodeError(str(e), table='learnsets8', index=species)
        if pairs:
            learnsets.append(_sorted_learnset(pairs, 'learnsets8', species))
        else:
            learnsets.append(EMPTY_LEARNSET)

    leftover = len(stream.getvalue()) - stream.tell()
    if leftover:
        log.debug("learnsets8: %d trailing bytes after species %d",
                  leftover, max_species)
    log.debug("learnsets8: decoded %d species", len(learnsets))
    return LearnsetTable(learnsets, name='learnsets8')


###
### 16-bit
###

learnset16_pair_struct = Struct(
    'move' / Int16sl,
    'level' / Int16sl,
)


def decode_learnset16(data, index=None):
    """Decode one species' 16-bit learnset.

    The list is followed by a 4-byte terminator, which isn't counted.  An
    empty buffer is an empty learnset.
    """
    data = bytes(data)
    if not data:
        return EMPTY_LEARNSET
    if len(data) % 4 or len(data) < 4:
        raise DecodeError(
            "{} bytes isn't a whole number of 4-byte pairs plus a "
            "terminator".format(len(data)),
            table='learnsets16', index=index)

    count = len(data) // 4 - 1
    try:
        pairs = Array(count, learnset16_pair_struct).parse(data)
    except ConstructError as e:
        raise DecodeError(str(e), table='learnsets16', index=index)
    return _sorted_learnset(pairs, 'learnsets16', index)


def decode_learnsets16(entries):
    """Decode a list of per-species 16-bit learnset buffers."""
    learnsets = [decode_learnset16(entry, index=species)
                 for species, entry in enumerate(entries)]
    log.debug("learnsets16: decoded %d species", len(learnsets))
    return LearnsetTable(learnsets, name='learnsets16')


def decode_learnsets16_container(data, identifier=None):
    """Decode a packed container holding one 16-bit learnset per species."""
    return decode_learnsets16(pc.unpack(data, identifier))
