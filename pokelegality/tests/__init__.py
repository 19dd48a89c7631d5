# encoding: utf8
"""Test support code: builders for packed tables, so tests can say what a
table contains instead of spelling out bytes.
"""
import struct


def pack_evolutions3(blocks, count=412):
    """`blocks` maps internal species index -> list of (method, argument,
    internal target index).
    """
    out = bytearray(40 * count)
    for index, entries in blocks.items():
        for i, (method, argument, species) in enumerate(entries):
            struct.pack_into('<HHHxx', out, index * 40 + i * 8,
                             method, argument, species)
    return bytes(out)


def pack_evolutions4(blocks, count=494):
    """Same as `pack_evolutions3`, but national ids and the 44-byte layout."""
    out = bytearray(44 * count)
    for species, entries in blocks.items():
        for i, (method, argument, target) in enumerate(entries):
            struct.pack_into('<BxHH', out, species * 44 + i * 6,
                             method, argument, target)
    return bytes(out)


def pack_learnsets8(learnsets):
    """A list of [(level, move), ...] per species, species 0 first."""
    out = bytearray()
    for pairs in learnsets:
        for level, move in pairs:
            out += bytes([level, move])
        out.append(0)
    return bytes(out)


def pack_learnset16(pairs):
    """One species' [(move, level), ...], terminator included."""
    if not pairs:
        return b''
    out = b''.join(struct.pack('<hh', move, level) for move, level in pairs)
    return out + struct.pack('<hh', -1, -1)
