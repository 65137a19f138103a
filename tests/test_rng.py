import numpy as np
import pytest

from rng_plot.sim.rng import (
    GENERATORS, FixedSeed, SequenceRNG, StandardRNG, XorShiftRNG,
    Xoshiro256PlusPlusRNG, entropy_seed, make_generator, uniform_below,
)


def words_seed(words, width):
    return lambda bits: sum(w << (width * i) for i, w in enumerate(words))


@pytest.mark.parametrize("rng_range,count", [(1, 5), (3, 10), (10, 10), (7, 100), (10000, 250)])
def test_sequence_is_index_mod_range(rng_range, count):
    out = SequenceRNG().samples(rng_range, count)
    assert len(out) == count
    assert list(out) == [i % rng_range for i in range(count)]


def test_sequence_draw_cycles():
    g = SequenceRNG()
    assert [g.draw(3) for _ in range(7)] == [0, 1, 2, 0, 1, 2, 0]


@pytest.mark.parametrize("name", list(GENERATORS))
def test_samples_within_range(name):
    g = make_generator(name, FixedSeed(123))
    out = g.samples(7, 500)
    assert out.dtype == np.int64
    assert len(out) == 500
    assert out.min() >= 0 and out.max() < 7


@pytest.mark.parametrize("name", list(GENERATORS))
def test_range_one_is_always_zero(name):
    assert not make_generator(name, FixedSeed(5)).samples(1, 50).any()


@pytest.mark.parametrize("name", list(GENERATORS))
def test_zero_range_rejected(name):
    with pytest.raises(ValueError):
        make_generator(name, FixedSeed(5)).samples(0, 10)


def test_zero_count_rejected():
    with pytest.raises(ValueError):
        StandardRNG().samples(10, 0)


def test_unknown_generator():
    with pytest.raises(ValueError):
        make_generator("mt19937")


def test_generator_order():
    assert list(GENERATORS) == ["sequence", "standard", "xorshift", "xoshiro256plusplus"]


def test_xorshift_known_state():
    g = XorShiftRNG(words_seed([1, 2, 3, 4], 32))
    assert g.next_u32() == 2061
    assert g.next_u32() == 6175


def test_xorshift_u64_is_low_word_first():
    a = XorShiftRNG(words_seed([1, 2, 3, 4], 32))
    assert a.next_u64() == (6175 << 32) | 2061


def test_xoshiro_known_state():
    g = Xoshiro256PlusPlusRNG(words_seed([1, 2, 3, 4], 64))
    assert g.next_u64() == 41943041
    assert g.next_u64() == 58720359


@pytest.mark.parametrize("cls", [XorShiftRNG, Xoshiro256PlusPlusRNG])
def test_all_zero_seed_does_not_stick(cls):
    g = cls(lambda bits: 0)
    assert any(g.next_u64() for _ in range(4))


@pytest.mark.parametrize("name", ["standard", "xorshift", "xoshiro256plusplus"])
def test_fixed_seed_is_reproducible(name):
    a = make_generator(name, FixedSeed(42)).samples(10000, 200)
    b = make_generator(name, FixedSeed(42)).samples(10000, 200)
    c = make_generator(name, FixedSeed(43)).samples(10000, 200)
    assert np.array_equal(a, b)
    assert not np.array_equal(a, c)


def test_fixed_seed_width():
    s = FixedSeed(9)
    assert 0 <= s(128) < 1 << 128
    assert s(64) == s(128) & ((1 << 64) - 1)


def test_entropy_seed_width():
    for bits in (32, 64, 128, 256):
        assert 0 <= entropy_seed(bits) < 1 << bits


def test_uniform_below_rejects_biased_zone():
    # bound 3: threshold = 2**64 % 3 == 1, so a product with low word 0 is redrawn
    draws = iter([0, 1 << 63])
    assert uniform_below(lambda: next(draws), 3) == 1


def test_sequence_samples_continue_from_draw():
    g = SequenceRNG()
    assert [g.draw(5) for _ in range(3)] == [0, 1, 2]
    assert list(g.samples(5, 4)) == [3, 4, 0, 1]
    assert g.draw(5) == 2
