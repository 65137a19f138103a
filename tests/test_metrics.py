import numpy as np
import pytest

from rng_plot.sim.metrics import fitness_series, summarize_run
from rng_plot.sim.rng import FixedSeed, XorShiftRNG


def test_worked_example():
    assert list(fitness_series([5, 5, 2, 8])) == [4, 4, 3, 4]


def test_first_element_is_start_value():
    # samples[0] is compared with itself, so the walk has not moved yet
    assert fitness_series([9, 1, 1])[0] == 4
    assert fitness_series([3])[0] == 1


def test_single_sample():
    assert list(fitness_series([7])) == [3]


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        fitness_series([])


def test_length_and_steps_follow_sign_of_difference():
    xs = XorShiftRNG(FixedSeed(3)).samples(20, 400)
    fs = fitness_series(xs)
    assert len(fs) == len(xs)
    assert fs[0] == xs.max() // 2
    steps = np.diff(fs)
    assert np.array_equal(steps, np.sign(np.diff(xs)))
    assert set(np.unique(steps)) <= {-1, 0, 1}


def test_deterministic():
    xs = [4, 9, 9, 1, 0, 3, 3, 8]
    assert np.array_equal(fitness_series(xs), fitness_series(xs))


def test_ties_never_move():
    assert list(fitness_series([6, 6, 6, 6])) == [3, 3, 3, 3]


def test_summarize_run():
    xs = np.array([5, 5, 2, 8])
    s = summarize_run("sequence", xs, fitness_series(xs), sample_range=10)
    assert s["generator"] == "sequence"
    assert s["range"] == 10
    assert s["count"] == 4
    assert s["min"] == 2 and s["max"] == 8
    assert s["mean"] == pytest.approx(5.0)
    assert s["final_fitness"] == 4
    assert s["fitness_min"] == 3 and s["fitness_max"] == 4
