# rng_plot/sim/models.py
from __future__ import annotations
from dataclasses import dataclass
import io

import numpy as np


class RngPlotError(Exception):
    """Base class for failures the command line reports and exits on."""


class ConfigError(RngPlotError):
    """Bad run settings or an output location that cannot be resolved."""


class RenderError(RngPlotError):
    """Chart could not be built or rasterized."""


@dataclass
class Chart:
    """
    Vector description of one comparison chart.
    `figure` is a matplotlib Figure sized in inches; nothing is rasterized
    until the image writer asks for pixels.
    """
    figure: object
    x_range: tuple[float, float]
    y_range: tuple[float, float]
    n_points: int

    def to_svg(self) -> str:
        buf = io.StringIO()
        self.figure.savefig(buf, format="svg")
        return buf.getvalue()


@dataclass
class RunResult:
    generator: str
    png_path: str
    samples: np.ndarray
    fitness: np.ndarray
    svg_path: str | None = None
