#!/usr/bin/env python3
"""
Summarize benchmark outputs under the given result root (default: result).

Scans immediate subdirectories, reads results.csv and config.json, and writes
one combined table to <root>/results_summary.csv.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pandas as pd


def load_json(p: Path) -> dict:
    if not p.exists():
        return {}
    with open(p, "r", encoding="utf-8") as f:
        return json.load(f)


def main(root: Path) -> int:
    frames = []
    for sub in sorted([p for p in root.iterdir() if p.is_dir()]):
        results_path = sub / "results.csv"
        if not results_path.exists():
            continue
        config = load_json(sub / "config.json")
        frame = pd.read_csv(results_path)
        frame.insert(0, "run_dir", str(sub))
        frame["seed"] = config.get("seed")
        frame["instrument"] = int(bool(config.get("instrument", False)))
        frames.append(frame)
    if not frames:
        print(f"No completed runs found under {root}")
        return 1
    summary = pd.concat(frames, ignore_index=True)
    out_csv = root / "results_summary.csv"
    summary.to_csv(out_csv, index=False)
    print(f"Wrote {out_csv} with {len(summary)} rows")
    return 0


if __name__ == "__main__":
    root_arg = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("result")
    sys.exit(main(root_arg))
