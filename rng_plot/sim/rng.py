# rng_plot/sim/rng.py
"""
Sample generators compared by the plotter.

Every generator exposes the same two calls, `draw(sample_range)` for one
value in [0, sample_range) and `samples(sample_range, count)` for a whole
sequence, so the driver can walk them uniformly. Entropy-seeded
generators take a seed source: any callable mapping a bit width to a
non-negative integer of at most that many bits.
"""
from __future__ import annotations
import os
import random
from typing import Callable, Dict, Optional, Type

import numpy as np

SeedSource = Callable[[int], int]

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1
MAX_RANGE = (1 << 63) - 1  # samples are stored as int64


# ------------------------------------------------------------
# SEED SOURCES
# ------------------------------------------------------------
def entropy_seed(bits: int) -> int:
    return int.from_bytes(os.urandom((bits + 7) // 8), "little") & ((1 << bits) - 1)


def splitmix64(state: int):
    """Yield an endless splitmix64 stream starting from `state`."""
    while True:
        state = (state + 0x9E3779B97F4A7C15) & MASK64
        z = state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        yield z ^ (z >> 31)


class FixedSeed:
    """Deterministic seed source: expands one integer to any width via splitmix64."""
    def __init__(self, value: int):
        self.value = int(value) & MASK64

    def __call__(self, bits: int) -> int:
        words = (bits + 63) // 64
        stream = splitmix64(self.value)
        out = 0
        for i in range(words):
            out |= next(stream) << (64 * i)
        return out & ((1 << bits) - 1)


def _check_args(sample_range: int, count: int | None = None) -> None:
    if sample_range <= 0:
        raise ValueError(f"sample range must be > 0, got {sample_range}")
    if sample_range > MAX_RANGE:
        raise ValueError(f"sample range must be <= {MAX_RANGE}, got {sample_range}")
    if count is not None and count < 1:
        raise ValueError(f"sample count must be >= 1, got {count}")


def uniform_below(next_u64: Callable[[], int], bound: int) -> int:
    """Unbiased draw in [0, bound) by widening multiply with rejection."""
    threshold = ((1 << 64) - bound) % bound
    while True:
        m = next_u64() * bound
        if (m & MASK64) >= threshold:
            return m >> 64


# ------------------------------------------------------------
# GENERATORS
# ------------------------------------------------------------
class SampleGenerator:
    name = ""

    def __init__(self, seed_source: Optional[SeedSource] = None):
        self.seed_source = seed_source

    def draw(self, sample_range: int) -> int:
        raise NotImplementedError

    def samples(self, sample_range: int, count: int) -> np.ndarray:
        _check_args(sample_range, count)
        return np.fromiter((self.draw(sample_range) for _ in range(count)),
                           dtype=np.int64, count=count)


class SequenceRNG(SampleGenerator):
    """Not random at all: 0, 1, ..., range-1, 0, 1, ... as a baseline."""
    name = "sequence"

    def __init__(self, seed_source: Optional[SeedSource] = None):
        super().__init__(seed_source)
        self._i = 0

    def draw(self, sample_range: int) -> int:
        _check_args(sample_range)
        v = self._i % sample_range
        self._i += 1
        return v

    def samples(self, sample_range: int, count: int) -> np.ndarray:
        _check_args(sample_range, count)
        start = self._i
        self._i += count
        return np.arange(start, start + count, dtype=np.int64) % sample_range


class StandardRNG(SampleGenerator):
    """Python's own Mersenne Twister, auto-seeded unless a source is given."""
    name = "standard"

    def __init__(self, seed_source: Optional[SeedSource] = None):
        super().__init__(seed_source)
        self._r = random.Random(seed_source(64) if seed_source else None)

    def draw(self, sample_range: int) -> int:
        _check_args(sample_range)
        return self._r.randrange(sample_range)


class XorShiftRNG(SampleGenerator):
    """Marsaglia xorshift128 on four 32-bit words."""
    name = "xorshift"

    def __init__(self, seed_source: Optional[SeedSource] = None):
        super().__init__(seed_source)
        seed = (seed_source or entropy_seed)(128)
        words = [(seed >> (32 * i)) & MASK32 for i in range(4)]
        if not any(words):
            # all-zero state never leaves zero
            words = [0x0DDB1A5E, 0x5BAD5EED, 0x193A6754, 0x236A9B31]
        self.x, self.y, self.z, self.w = words

    def next_u32(self) -> int:
        t = self.x ^ ((self.x << 11) & MASK32)
        self.x, self.y, self.z = self.y, self.z, self.w
        self.w = (self.w ^ (self.w >> 19)) ^ (t ^ (t >> 8))
        return self.w

    def next_u64(self) -> int:
        lo = self.next_u32()
        hi = self.next_u32()
        return (hi << 32) | lo

    def draw(self, sample_range: int) -> int:
        _check_args(sample_range)
        return uniform_below(self.next_u64, sample_range)


def _rotl64(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & MASK64


class Xoshiro256PlusPlusRNG(SampleGenerator):
    """Blackman/Vigna xoshiro256++ on four 64-bit words."""
    name = "xoshiro256plusplus"

    def __init__(self, seed_source: Optional[SeedSource] = None):
        super().__init__(seed_source)
        seed = (seed_source or entropy_seed)(256)
        s = [(seed >> (64 * i)) & MASK64 for i in range(4)]
        if not any(s):
            stream = splitmix64(0)
            s = [next(stream) for _ in range(4)]
        self.s = s

    def next_u64(self) -> int:
        s = self.s
        result = (_rotl64((s[0] + s[3]) & MASK64, 23) + s[0]) & MASK64
        t = (s[1] << 17) & MASK64
        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = _rotl64(s[3], 45)
        return result

    def draw(self, sample_range: int) -> int:
        _check_args(sample_range)
        return uniform_below(self.next_u64, sample_range)


GENERATORS: Dict[str, Type[SampleGenerator]] = {
    cls.name: cls
    for cls in (SequenceRNG, StandardRNG, XorShiftRNG, Xoshiro256PlusPlusRNG)
}


def make_generator(name: str, seed_source: Optional[SeedSource] = None) -> SampleGenerator:
    try:
        cls = GENERATORS[name]
    except KeyError:
        raise ValueError(f"unknown generator: {name}") from None
    return cls(seed_source)
