"""Allegedly stands for 'Pokémon Container'.  Completely generic, dead-simple
container format; the learnset and evolution dumps ship one entry per
species inside one of these.

Layout: a two-character identifier, a u16 entry count, then count + 1 u32
offsets.  Entry 0 ranges from offset A to B, entry 1 from B to C, etc.
"""
import struct

from pokelegality.errors import DecodeError
from .base import _ContainerFile, Substream


class PokemonContainerFile(_ContainerFile):
    table = 'container'

    def __init__(self, stream, identifier=None):
        self.stream = stream = Substream(stream)

        magic, entry_ct = stream.unpack('<2sH', table=self.table)
        if identifier is not None and magic != identifier:
            raise DecodeError(
                "expected container {!r}, got {!r}".format(identifier, magic),
                table=self.table)
        self.identifier = magic

        offsets = stream.unpack('<{}L'.format(entry_ct + 1), table=self.table)
        total = len(stream)
        self.slices = []
        for i in range(entry_ct):
            start, end = offsets[i:i + 2]
            if not start <= end <= total:
                raise DecodeError(
                    "entry spans {}..{} in a {}-byte container".format(
                        start, end, total),
                    table=self.table, index=i)
            self.slices.append(self.stream.slice(start, end - start))


def unpack(data, identifier=None):
    """Split a packed container into a list of per-entry byte strings."""
    if isinstance(identifier, str):
        identifier = identifier.encode('ascii')
    container = PokemonContainerFile(Substream.from_bytes(data), identifier)
    return [entry.read() for entry in container]


def pack(entries, identifier):
    """The inverse of `unpack`.  Handy for building fixtures."""
    if isinstance(identifier, str):
        identifier = identifier.encode('ascii')
    header_size = 4 + 4 * (len(entries) + 1)
    offsets = [header_size]
    for entry in entries:
        offsets.append(offsets[-1] + len(entry))
    header = struct.pack(
        '<2sH{}L'.format(len(offsets)), identifier, len(entries), *offsets)
    return header + b''.join(entries)
