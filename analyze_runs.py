#!/usr/bin/env python3
"""
Compare generators from the summary CSV written by `rng_plot.main --csv`.

Features:
  - --session latest|<id> filters to a single run (so one CSV can collect many runs)
  - Saves a timestamped cleaned CSV and a PNG comparison plot under --outdir
  - Plot:
      (1) final fitness per generator
      (2) fitness spread (min..max) per generator, with the start value
Usage examples:
  python analyze_runs.py --csv runs/summary.csv --outdir reports --session latest
"""
from __future__ import annotations
import argparse
import os
import sys
import time

import pandas as pd

# Use non-interactive backend for headless operation
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

NUMERIC = ("range", "count", "mean", "min", "max", "final_fitness", "fitness_min", "fitness_max")


# ------------------------- utilities -------------------------
def ensure_dir(p: str) -> None:
    os.makedirs(p, exist_ok=True)

def timestamp(tag: str | None = None) -> str:
    t = time.strftime("%Y%m%d_%H%M%S")
    return f"{t}__{tag}" if tag else t


# ------------------------- loading ---------------------------
def load_summary(path: str) -> pd.DataFrame:
    if not (path and os.path.exists(path)):
        print(
            "\n[ERROR] Summary CSV not found.\n"
            f"  Expected: {path}\n"
            "Hint: run `python -m rng_plot.main --csv <path>` first.\n",
            file=sys.stderr
        )
        sys.exit(1)
    return pd.read_csv(path)


def latest_session_id(df: pd.DataFrame) -> str | None:
    """Return the last session_id in file order (used by --session latest)."""
    if "session_id" not in df.columns or len(df) == 0:
        return None
    s = df["session_id"].dropna()
    return str(s.iloc[-1]) if len(s) else None


def clean_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Average numeric columns per generator (across sessions if several remain)."""
    df = df.copy()
    for col in NUMERIC:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    keep = [c for c in NUMERIC if c in df.columns]
    return df.groupby("generator", as_index=False, sort=False)[keep].mean()


# ------------------------- plotting --------------------------
def plot_comparison(summary: pd.DataFrame, outdir: str, tag: str | None) -> str:
    ensure_dir(outdir)
    fig, ax = plt.subplots(2, 1, figsize=(10, 8), sharex=True)
    names = list(summary["generator"])
    pos = range(len(names))

    ax[0].bar(pos, summary["final_fitness"], color="#35C788")
    ax[0].set_ylabel("Final fitness")
    ax[0].grid(alpha=0.25)

    start = summary["max"] // 2
    ax[1].vlines(pos, summary["fitness_min"], summary["fitness_max"],
                 color="#DD3355", linewidth=6, label="Fitness range")
    ax[1].scatter(pos, start, color="black", zorder=3, label="Start value")
    ax[1].set_ylabel("Fitness")
    ax[1].set_xticks(list(pos))
    ax[1].set_xticklabels(names)
    ax[1].legend(loc="best")
    ax[1].grid(alpha=0.25)

    fig.tight_layout()
    png = os.path.join(outdir, f"generator_comparison_{timestamp(tag)}.png")
    fig.savefig(png, dpi=160)
    plt.close(fig)
    print(f"[OK] Saved {png}")
    return png


def export_csv(df: pd.DataFrame, outdir: str, base: str, tag: str | None) -> str:
    ensure_dir(outdir)
    path = os.path.join(outdir, f"{base}_{timestamp(tag)}.csv")
    df.to_csv(path, index=False)
    print(f"[OK] Wrote {path}")
    return path


# ------------------------- main ------------------------------
def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--csv", type=str, default="runs/summary.csv",
                    help="Summary CSV written by rng_plot.main --csv")
    ap.add_argument("--outdir", type=str, default="reports",
                    help="Output directory for plots and exported CSVs")
    ap.add_argument("--tag", type=str, default="",
                    help="Optional label to append to filenames")
    ap.add_argument("--session", type=str, default="",
                    help="Session ID to analyze; use 'latest' for the most recent run.")
    args = ap.parse_args(argv)

    df = load_summary(args.csv)

    if args.session:
        sid = latest_session_id(df) if args.session == "latest" else args.session
        if sid:
            df = df[df["session_id"].astype(str) == sid].copy()
            print(f"[OK] Filtering analysis to session_id={sid}")
        else:
            print("[WARN] Could not resolve latest session_id; analyzing all data.")

    print(f"[INFO] Rows after filter: {len(df)}")
    if len(df) == 0:
        print("[ERROR] No rows to analyze.", file=sys.stderr)
        sys.exit(1)

    summary = clean_summary(df)
    export_csv(summary, args.outdir, base="generator_summary", tag=(args.tag or None))
    plot_comparison(summary, args.outdir, tag=(args.tag or None))

    print(f"\nDone. Outputs are in: {args.outdir}")

if __name__ == "__main__":
    main()
