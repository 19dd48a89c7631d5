# encoding: utf8
"""Game versions, numbered the way the games themselves store them in a
creature's origin data.
"""
from enum import IntEnum


class GameVersion(IntEnum):
    ANY = 0

    # Generation 3
    S = 1
    R = 2
    E = 3
    FR = 4
    LG = 5
    CXD = 15

    # Generation 4
    HG = 7
    SS = 8
    D = 10
    P = 11
    PT = 12

    # Generation 5
    W = 20
    B = 21
    W2 = 22
    B2 = 23

    # Generation 6
    X = 24
    Y = 25
    AS = 26
    OR = 27

    # Generation 7
    SN = 30
    MN = 31
    US = 32
    UM = 33
    GO = 34

    # Virtual Console releases of Generations 1 and 2
    RD = 35
    GN = 36
    BU = 37
    YW = 38
    GD = 39
    SV = 40
    C = 41

    GP = 42
    GE = 43

    # Generation 8
    SW = 44
    SH = 45
    BD = 48
    SP = 49

    @property
    def generation(self):
        return _GENERATIONS.get(self, 0)


_GENERATIONS = {}
for _generation, _versions in (
        (1, 'RD GN BU YW'),
        (2, 'GD SV C'),
        (3, 'S R E FR LG CXD'),
        (4, 'HG SS D P PT'),
        (5, 'W B W2 B2'),
        (6, 'X Y AS OR'),
        (7, 'SN MN US UM GO GP GE'),
        (8, 'SW SH BD SP')):
    for _name in _versions.split():
        _GENERATIONS[GameVersion[_name]] = _generation
del _generation, _versions, _name


def versions_for_generation(generation):
    return frozenset(v for v, g in _GENERATIONS.items() if g == generation)


def coerce_version(value):
    """Accept a GameVersion, its integer value, or its name."""
    if isinstance(value, GameVersion):
        return value
    if isinstance(value, str):
        try:
            return GameVersion[value.upper()]
        except KeyError:
            raise ValueError("Not a known game version: {!r}".format(value))
    return GameVersion(value)
