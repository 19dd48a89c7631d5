# encoding: utf8
"""xoroshiro128+, as used by the Generation 8 games to roll overworld
creatures.

The state mutates in place.  Nothing here copies a generator behind your
back; if you need a second, independent sequence, build one explicitly from
`state`.
"""

XOROSHIRO_CONST = 0x82A2B175229D6A5B

MASK64 = 0xFFFFFFFFFFFFFFFF
MASK32 = 0xFFFFFFFF


def rotl(x, k):
    return ((x << k) | (x >> (64 - k))) & MASK64


def get_bitmask(modulus):
    """Smallest all-ones mask covering `modulus - 1`."""
    return (1 << (modulus - 1).bit_length()) - 1


class Xoroshiro128Plus(object):
    __slots__ = ('s0', 's1')

    def __init__(self, seed, s1=None):
        """Seed the usual way (`s1` is then a fixed constant), or restore an
        exact `(s0, s1)` state.
        """
        self.s0 = seed & MASK64
        if s1 is None:
            s1 = XOROSHIRO_CONST
        self.s1 = s1 & MASK64

    @property
    def state(self):
        return self.s0, self.s1

    @property
    def full_state(self):
        return '{:016X}{:016X}'.format(self.s1, self.s0)

    def __repr__(self):
        return '<Xoroshiro128Plus {}>'.format(self.full_state)

    def next(self):
        s0 = self.s0
        s1 = self.s1
        result = (s0 + s1) & MASK64
        s1 ^= s0
        self.s0 = rotl(s0, 24) ^ s1 ^ ((s1 << 16) & MASK64)
        self.s1 = rotl(s1, 37)
        return result

    def prev(self):
        """Step backwards.  Returns what `next` returned for the state we
        land on, so `prev(); next()` is a no-op.
        """
        s1 = rotl(self.s1, 27)
        s0 = self.s0 ^ s1 ^ ((s1 << 16) & MASK64)
        s0 = rotl(s0, 40)
        s1 ^= s0
        self.s0 = s0
        self.s1 = s1
        return (s0 + s1) & MASK64

    def next_bounded(self, modulus=1 << 32):
        """A value in [0, modulus), by masking and rerolling.

        The games always pass 0xFFFFFFFF for full-width rolls, not 2**32;
        the difference matters, so callers replaying a game say which.
        """
        if modulus <= 0:
            raise ValueError("modulus must be positive, not {}".format(modulus))
        mask = get_bitmask(modulus)
        while True:
            result = self.next() & mask
            if result < modulus:
                return result
