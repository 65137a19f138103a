# rng_plot/sim/metrics.py
from __future__ import annotations
from typing import Dict, Sequence

import numpy as np


def fitness_series(samples: Sequence[int]) -> np.ndarray:
    """
    Signed random walk over the samples: +1 when a sample rises above the
    previous one, -1 when it falls, unchanged on ties. The walk starts at
    max(samples) // 2.

    The "previous" value is seeded with samples[0], so element 0 compares
    samples[0] with itself and always equals the starting value. Output
    length equals input length.
    """
    x = np.asarray(samples, dtype=np.int64)
    if x.size == 0:
        raise ValueError("fitness needs at least one sample")
    start = int(x.max()) // 2
    steps = np.sign(np.diff(x, prepend=x[0]))
    return start + np.cumsum(steps, dtype=np.int64)


def summarize_run(generator: str, samples: np.ndarray, fitness: np.ndarray,
                  sample_range: int | None = None) -> Dict[str, float]:
    return dict(
        generator=generator,
        range=sample_range if sample_range is not None else int(samples.max()) + 1,
        count=int(samples.size),
        mean=float(samples.mean()),
        min=int(samples.min()),
        max=int(samples.max()),
        final_fitness=int(fitness[-1]),
        fitness_min=int(fitness.min()),
        fitness_max=int(fitness.max()),
    )

