# rng_plot/sim/config.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from .models import ConfigError

# fixed iteration order of the generator strategies
GENERATOR_ORDER: Tuple[str, ...] = (
    "sequence",
    "standard",
    "xorshift",
    "xoshiro256plusplus",
)

# ------------------------------------------------------------
# RUN SETTINGS
# ------------------------------------------------------------
@dataclass(frozen=False)  # mutable so the CLI can override per run
class RunConfig:
    sample_range: int = 10000
    count: int = 10000
    output_dir: str | None = None   # None -> user's home directory
    generators: Tuple[str, ...] = field(default_factory=lambda: GENERATOR_ORDER)
    write_svg: bool = False
    summary_csv: str | None = None
    seed: int | None = None         # fixed seed for entropy-seeded generators

    def validate(self) -> None:
        if self.sample_range <= 0:
            raise ConfigError(f"range must be > 0, got {self.sample_range}")
        if self.count < 1:
            raise ConfigError(f"count must be >= 1, got {self.count}")
        unknown = [g for g in self.generators if g not in GENERATOR_ORDER]
        if unknown:
            raise ConfigError(f"unknown generator(s): {', '.join(unknown)}")
        if not self.generators:
            raise ConfigError("no generators selected")

# ------------------------------------------------------------
# RASTER OUTPUT
# ------------------------------------------------------------
@dataclass(frozen=True)
class ImageConfig:
    width: int = 1920
    height: int = 1080
    dpi: int = 100

# ------------------------------------------------------------
# CHART STYLE (cosmetic; series only need to differ)
# ------------------------------------------------------------
@dataclass(frozen=True)
class PlotStyleConfig:
    sample_color: str = "#DD3355"
    sample_marker: str = "s"
    sample_size: float = 3.0
    fitness_color: str = "#35C788"
    fitness_marker: str = "o"
    fitness_size: float = 4.0
    x_label: str = "Time"
    y_label: str = "Value"

# ------------------------------------------------------------
# EXPORT SINGLETONS
# ------------------------------------------------------------
RUN = RunConfig()
IMAGE = ImageConfig()
STYLE = PlotStyleConfig()
