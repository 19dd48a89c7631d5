# encoding: utf8
"""Overworld correlation for Generation 8.

Creatures that spawn in the overworld are rolled from a xoroshiro128+
seeded with a 32-bit value, and the first thing rolled is the encryption
constant.  That makes the seed recoverable from the record alone, so we
can replay the whole generation and see whether the stored PID and
individual values are what the game would have produced.
"""
from enum import Enum
import logging

from pokelegality import formulae
from pokelegality.record import STATS
from pokelegality.rng import MASK32, XOROSHIRO_CONST, Xoroshiro128Plus

log = logging.getLogger(__name__)

UNSET = -1

# A slot declaring -1 flawless values could have rolled any of these
ANY_FLAWLESS = (0, 2, 3)


class Requirement(Enum):
    """Whether an encounter's mechanism uses overworld correlation."""
    MUST_HAVE = 'must have'
    MUST_NOT_HAVE = 'must not have'
    EITHER = 'either'

    def is_satisfied_by(self, consistent):
        if self is Requirement.MUST_HAVE:
            return consistent
        if self is Requirement.MUST_NOT_HAVE:
            return not consistent
        return True


class Shiny(Enum):
    RANDOM = 'random'
    NEVER = 'never'
    ALWAYS = 'always'
    FIXED_VALUE = 'fixed'


def get_original_seed(record):
    """Undo the first roll: EC = low 32 bits of (seed + constant)."""
    return (record.encryption_constant - (XOROSHIRO_CONST & MASK32)) & MASK32


def _expected_pid(rolled, record, shiny):
    tid, sid = record.tid, record.sid
    rolled_shiny = formulae.is_shiny(rolled, tid, sid)

    if shiny is Shiny.RANDOM:
        return rolled
    if shiny is Shiny.NEVER:
        want_shiny = False
    elif shiny is Shiny.ALWAYS:
        want_shiny = True
    else:
        # Whatever the record ended up as; the game forces either way
        want_shiny = record.is_shiny

    if want_shiny and not rolled_shiny:
        return formulae.get_shiny_pid(rolled, tid, sid)
    if rolled_shiny and not want_shiny:
        return formulae.force_not_shiny(rolled)
    return rolled


def check_flawless(flawless):
    """Flawless counts run 0 to 6, or -1 for any of `ANY_FLAWLESS`."""
    if not -1 <= flawless <= len(STATS):
        raise ValueError("flawless count runs -1 to {}, got {!r}".format(
            len(STATS), flawless))
    return flawless


def _roll_ivs(rng, flawless):
    ivs = [UNSET] * len(STATS)
    count = 0
    while count < flawless:
        index = rng.next_bounded(len(STATS))
        if ivs[index] == UNSET:
            ivs[index] = 31
            count += 1
    for index, iv in enumerate(ivs):
        if iv == UNSET:
            ivs[index] = rng.next_bounded(32)
    return ivs


def _roll_scalar(rng):
    return rng.next_bounded(0x81) + rng.next_bounded(0x80)


def _verify(record, seed, shiny, flawless):
    rng = Xoroshiro128Plus(seed)

    ec = rng.next_bounded(MASK32)
    if ec != record.encryption_constant:
        return False

    pid = _expected_pid(rng.next_bounded(MASK32), record, shiny)
    if pid != record.pid:
        return False

    rolled = _roll_ivs(rng, flawless)
    for stored, expected in zip(record.ivs, rolled):
        if stored != UNSET and stored != expected:
            return False

    if record.height_scalar is None and record.weight_scalar is None:
        return True
    height = _roll_scalar(rng)
    weight = _roll_scalar(rng)
    if record.height_scalar is not None and record.height_scalar != height:
        return False
    if record.weight_scalar is not None and record.weight_scalar != weight:
        return False
    return True


def validate_overworld_encounter(record, shiny=Shiny.FIXED_VALUE, flawless=0):
    """True iff the record's PID, IVs and (where stored) size scalars are
    exactly what an overworld spawn from its recovered seed would produce.
    """
    check_flawless(flawless)
    seed = get_original_seed(record)
    if flawless == -1:
        counts = ANY_FLAWLESS
    else:
        counts = (flawless,)
    for count in counts:
        if _verify(record, seed, shiny, count):
            log.debug("seed %08X reproduces %r with %d flawless",
                      seed, record, count)
            return True
    return False


def apply_overworld_details(record, seed, shiny=Shiny.RANDOM, flawless=0):
    """Generate into `record` exactly what the game would from `seed`.

    Mutates and returns the record; only ever hand this a copy.
    """
    check_flawless(flawless)
    if flawless == -1:
        flawless = 0
    rng = Xoroshiro128Plus(seed & MASK32)

    record.encryption_constant = rng.next_bounded(MASK32)
    record.pid = _expected_pid(rng.next_bounded(MASK32), record,
                               Shiny.RANDOM if shiny is Shiny.FIXED_VALUE else shiny)
    record.ivs = _roll_ivs(rng, flawless)
    record.height_scalar = _roll_scalar(rng)
    record.weight_scalar = _roll_scalar(rng)
    return record
