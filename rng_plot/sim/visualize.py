# rng_plot/sim/visualize.py
from __future__ import annotations
from typing import Sequence

import numpy as np

# Use non-interactive backend for headless operation
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .config import IMAGE, STYLE, ImageConfig, PlotStyleConfig
from .models import Chart, RenderError


def build_chart(samples: Sequence[int], fitness: Sequence[int],
                image: ImageConfig = IMAGE,
                style: PlotStyleConfig = STYLE) -> Chart:
    """
    Lay out the raw samples and the fitness walk on one set of axes.
    Axis ranges are fixed: x spans [0, len), y spans [0, max(samples)].
    Fitness points outside that window are clipped, not rescaled.
    """
    xs = np.asarray(samples)
    fs = np.asarray(fitness)
    if xs.size == 0 or fs.size == 0:
        raise RenderError("cannot chart an empty series")
    if xs.size != fs.size:
        raise RenderError(f"series length mismatch: {xs.size} samples vs {fs.size} fitness points")
    y_max = float(xs.max())
    if y_max <= 0:
        raise RenderError("degenerate y range: every sample is 0")

    t = np.arange(xs.size)
    fig, ax = plt.subplots(figsize=(image.width / image.dpi, image.height / image.dpi),
                           dpi=image.dpi)
    ax.scatter(t, xs, c=style.sample_color, marker=style.sample_marker,
               s=style.sample_size ** 2, linewidths=0)
    ax.scatter(t, fs, c=style.fitness_color, marker=style.fitness_marker,
               s=style.fitness_size ** 2, linewidths=0)
    ax.set_xlim(0, xs.size)
    ax.set_ylim(0, y_max)
    ax.set_xlabel(style.x_label)
    ax.set_ylabel(style.y_label)

    return Chart(figure=fig, x_range=(0.0, float(xs.size)), y_range=(0.0, y_max),
                 n_points=int(xs.size))


def close_chart(chart: Chart) -> None:
    plt.close(chart.figure)
