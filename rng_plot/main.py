# rng_plot/main.py
from __future__ import annotations
import argparse
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

from .sim.config import RUN, GENERATOR_ORDER, RunConfig
from .sim.rng import FixedSeed, SeedSource, make_generator
from .sim.models import ConfigError, RngPlotError, RunResult
from .sim.metrics import fitness_series, summarize_run
from .sim.visualize import build_chart, close_chart
from .output.image_writer import output_name, write_png, write_svg
from .output.csv_writer import SummaryCsvLogger


def home_dir() -> str:
    return str(Path.home())


def resolve_base_dir(output_dir: str | None = None) -> str:
    """Explicit output dir (created if missing), else the user's home directory."""
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
        return output_dir
    try:
        base = home_dir()
    except (RuntimeError, KeyError) as e:
        raise ConfigError(f"Unable to determine base directory: {e}") from e
    if not base or base == "~":
        raise ConfigError("Unable to determine base directory")
    return base


def plot_generator(name: str, base_dir: str, sample_range: int, count: int,
                   seed_source: Optional[SeedSource] = None,
                   svg: bool = False) -> RunResult:
    """generate -> fitness -> chart -> PNG for one generator strategy."""
    generator = make_generator(name, seed_source)
    samples = generator.samples(sample_range, count)
    fitness = fitness_series(samples)

    chart = build_chart(samples, fitness)
    try:
        png = write_png(chart, os.path.join(base_dir, output_name(name, sample_range, count)))
        svg_path = None
        if svg:
            svg_path = write_svg(chart, os.path.join(base_dir, output_name(name, sample_range, count, "svg")))
    finally:
        close_chart(chart)
    return RunResult(generator=name, png_path=png, samples=samples,
                     fitness=fitness, svg_path=svg_path)


def run(config: RunConfig = RUN,
        seed_factory: Callable[[str], Optional[SeedSource]] | None = None) -> List[RunResult]:
    """
    Run every selected generator in the fixed order. The first failure
    aborts the remaining generators; files already written are kept.
    """
    config.validate()
    base_dir = resolve_base_dir(config.output_dir)

    if seed_factory is None:
        seed_factory = (lambda name: FixedSeed(config.seed)) if config.seed is not None \
            else (lambda name: None)
    logger = SummaryCsvLogger(config.summary_csv) if config.summary_csv else None

    results: List[RunResult] = []
    for name in (g for g in GENERATOR_ORDER if g in config.generators):
        print(f"[INFO] {name}: range={config.sample_range} count={config.count}")
        res = plot_generator(name, base_dir, config.sample_range, config.count,
                             seed_source=seed_factory(name), svg=config.write_svg)
        print(f"[OK] Saved {res.png_path}")
        if res.svg_path:
            print(f"[OK] Saved {res.svg_path}")
        if logger:
            logger.append(summarize_run(name, res.samples, res.fitness, config.sample_range))
        results.append(res)
    return results


def parse_args(argv: List[str] | None = None) -> RunConfig:
    parser = argparse.ArgumentParser(
        description="Plot samples and a running up/down fitness walk for several PRNGs")
    parser.add_argument("--range", dest="sample_range", type=int, default=RUN.sample_range,
                        help="samples are drawn from [0, range); a chart needs range >= 2 "
                             "and enough samples that not all of them are 0")
    parser.add_argument("--count", type=int, default=RUN.count,
                        help="samples per generator (>= 1; very small counts with a small "
                             "range can draw only zeros, which cannot be charted)")
    parser.add_argument("--outdir", type=str, default=RUN.output_dir,
                        help="output directory (default: home directory)")
    parser.add_argument("--only", action="append", choices=GENERATOR_ORDER, default=None,
                        help="restrict to one generator; repeatable")
    parser.add_argument("--seed", type=int, default=RUN.seed,
                        help="fixed seed for the seeded generators")
    parser.add_argument("--svg", action="store_true", default=RUN.write_svg,
                        help="also write the vector chart")
    parser.add_argument("--csv", type=str, default=RUN.summary_csv,
                        help="append per-generator summary rows to this CSV")
    args = parser.parse_args(argv)

    return RunConfig(
        sample_range=args.sample_range,
        count=args.count,
        output_dir=args.outdir,
        generators=tuple(args.only) if args.only else GENERATOR_ORDER,
        write_svg=args.svg,
        summary_csv=args.csv,
        seed=args.seed,
    )


def main(argv: List[str] | None = None) -> int:
    config = parse_args(argv)
    try:
        run(config)
    except (RngPlotError, ValueError, OSError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
