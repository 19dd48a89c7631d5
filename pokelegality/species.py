# encoding: utf8
"""Species numbering.

Everything in this package speaks national dex numbers, except the
Generation III games, which store species by an internal index: Kanto and
Johto line up, then 25 unused "?" slots, then Hoenn in an order nobody has
ever explained.
"""
from pokelegality.errors import RangeError

MAX_SPECIES_ID_1 = 151
MAX_SPECIES_ID_2 = 251
MAX_SPECIES_ID_3 = 386
MAX_SPECIES_ID_4 = 493
MAX_SPECIES_ID_5 = 649
MAX_SPECIES_ID_6 = 721
MAX_SPECIES_ID_7 = 809
MAX_SPECIES_ID_8 = 898

MAX_SPECIES_INDEX_3 = 411

# Named species that some rule somewhere has to single out
METAPOD = 11
KAKUNA = 14
PIKACHU = 25
RAICHU = 26
PICHU = 172
PUPITAR = 247
WURMPLE = 265
SILCOON = 266
CASCOON = 268
NINCADA = 290
NINJASK = 291
SHEDINJA = 292

# National ids for internal indices 277 through 411
_HOENN_BY_INDEX = (
    252, 253, 254,  # treecko line
    255, 256, 257,  # torchic line
    258, 259, 260,  # mudkip line
    261, 262,       # poochyena, mightyena
    263, 264,       # zigzagoon, linoone
    265, 266, 267, 268, 269,  # wurmple, silcoon, beautifly, cascoon, dustox
    270, 271, 272,  # lotad line
    273, 274, 275,  # seedot line
    290, 291, 292,  # nincada, ninjask, shedinja
    276, 277,       # taillow, swellow
    285, 286,       # shroomish, breloom
    327,            # spinda
    278, 279,       # wingull, pelipper
    283, 284,       # surskit, masquerain
    320, 321,       # wailmer, wailord
    300, 301,       # skitty, delcatty
    352,            # kecleon
    343, 344,       # baltoy, claydol
    299,            # nosepass
    324,            # torkoal
    302,            # sableye
    339, 340,       # barboach, whiscash
    370,            # luvdisc
    341, 342,       # corphish, crawdaunt
    349, 350,       # feebas, milotic
    318, 319,       # carvanha, sharpedo
    328, 329, 330,  # trapinch line
    296, 297,       # makuhita, hariyama
    309, 310,       # electrike, manectric
    322, 323,       # numel, camerupt
    363, 364, 365,  # spheal line
    331, 332,       # cacnea, cacturne
    361, 362,       # snorunt, glalie
    337, 338,       # lunatone, solrock
    298,            # azurill
    325, 326,       # spoink, grumpig
    311, 312,       # plusle, minun
    303,            # mawile
    307, 308,       # meditite, medicham
    333, 334,       # swablu, altaria
    360,            # wynaut
    355, 356,       # duskull, dusclops
    315,            # roselia
    287, 288, 289,  # slakoth line
    316, 317,       # gulpin, swalot
    357,            # tropius
    293, 294, 295,  # whismur line
    366, 367, 368,  # clamperl, huntail, gorebyss
    359,            # absol
    353, 354,       # shuppet, banette
    336, 335,       # seviper, zangoose
    369,            # relicanth
    304, 305, 306,  # aron line
    351,            # castform
    313, 314,       # volbeat, illumise
    345, 346,       # lileep, cradily
    347, 348,       # anorith, armaldo
    280, 281, 282,  # ralts line
    371, 372, 373,  # bagon line
    374, 375, 376,  # beldum line
    377, 378, 379,  # regirock, regice, registeel
    382, 383, 384,  # kyogre, groudon, rayquaza
    380, 381,       # latias, latios
    385, 386,       # jirachi, deoxys
    358,            # chimecho
)

_FIRST_HOENN_INDEX = 277

_NATIONAL_FROM_INDEX_3 = tuple(
    list(range(MAX_SPECIES_ID_2 + 1))
    + [0] * (_FIRST_HOENN_INDEX - MAX_SPECIES_ID_2 - 1)
    + list(_HOENN_BY_INDEX)
)
_INDEX_3_FROM_NATIONAL = dict(
    (national, index)
    for index, national in enumerate(_NATIONAL_FROM_INDEX_3)
    if national
)


def national_from_gen3(index):
    """Internal Generation III index -> national id.  Unused slots give 0."""
    if not 0 <= index < len(_NATIONAL_FROM_INDEX_3):
        raise RangeError("no such Generation III species index",
                         table='species3', index=index)
    return _NATIONAL_FROM_INDEX_3[index]


def gen3_from_national(species):
    """National id -> internal Generation III index."""
    if species == 0:
        return 0
    try:
        return _INDEX_3_FROM_NATIONAL[species]
    except KeyError:
        raise RangeError("species doesn't exist in Generation III",
                         table='species3', index=species)


def max_species_id(generation):
    return {
        1: MAX_SPECIES_ID_1,
        2: MAX_SPECIES_ID_2,
        3: MAX_SPECIES_ID_3,
        4: MAX_SPECIES_ID_4,
        5: MAX_SPECIES_ID_5,
        6: MAX_SPECIES_ID_6,
        7: MAX_SPECIES_ID_7,
    }.get(generation, MAX_SPECIES_ID_8)
