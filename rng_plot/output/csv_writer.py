# rng_plot/output/csv_writer.py
from __future__ import annotations
import csv
import os
import uuid
from typing import Dict


class SummaryCsvLogger:
    """
    Append one row per generator run to a CSV file.
    Each process gets its own session_id so rows from many runs can share
    one file and still be told apart later (see analyze_runs.py).
    """
    header = [
        "session_id", "generator", "range", "count",
        "mean", "min", "max",
        "final_fitness", "fitness_min", "fitness_max",
    ]

    def __init__(self, path: str):
        self.path = path
        self.session_id = uuid.uuid4().hex[:8]

        d = os.path.dirname(self.path)
        if d:
            os.makedirs(d, exist_ok=True)
        if not os.path.exists(self.path):
            with open(self.path, "w", newline="") as f:
                csv.DictWriter(f, fieldnames=self.header).writeheader()

    def append(self, summary: Dict[str, float]) -> None:
        row = {"session_id": self.session_id}
        row.update({k: summary.get(k, "") for k in self.header[1:]})
        with open(self.path, "a", newline="") as f:
            csv.DictWriter(f, fieldnames=self.header).writerow(row)
