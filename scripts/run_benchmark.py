"""
Run the majority element checkers against fixed and random inputs.

Every scenario prints one line per checker with its result, followed by the
elapsed time in milliseconds. No arguments are required.

Usage
-----
# Default run (random inputs grow from 1000 to 512000 elements):
python -m scripts.run_benchmark

# Reproducible run, smaller inputs, with a CSV and a timing chart:
python -m scripts.run_benchmark --seed 42 --max-size 100000 \
    --out-csv reports/benchmark.csv --plot reports/benchmark.png

Settings can also come from the environment or a .env file
(MAJORITY_SEED, MAJORITY_MAX_SIZE, ... see majority/config.py).
"""
from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path

from dotenv import load_dotenv

from majority.benchmark import plot_timings, run_benchmark
from majority.config import Settings, load_settings
from majority.generators import InputGenerator


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Benchmark three majority element algorithms."
    )
    p.add_argument("--seed",               type=int, default=None,
                   help="Seed for the input generator (default: MAJORITY_SEED or OS entropy)")
    p.add_argument("--max-size",           type=int, default=None,
                   help="Random inputs grow while smaller than this")
    p.add_argument("--quadratic-max-size", type=int, default=None,
                   help="Skip the quadratic checker above this many elements")
    p.add_argument("--out-csv",            default="",
                   help="(optional) Write all timings to this CSV")
    p.add_argument("--plot",               default="",
                   help="(optional) Write a timing chart (PNG) for the random inputs")
    p.add_argument("--no-progress",        action="store_true",
                   help="Never show the progress bar")
    return p.parse_args(argv)


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {
        "seed":               args.seed,
        "max_size":           args.max_size,
        "quadratic_max_size": args.quadratic_max_size,
    }
    return dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v is not None})


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = _parse_args(argv)

    settings = _apply_overrides(load_settings(), args)
    generator = InputGenerator(seed=settings.seed, value_range=settings.value_range)

    frame = run_benchmark(generator, settings, show_progress=False if args.no_progress else None)

    if args.out_csv:
        out_csv = Path(args.out_csv)
        out_csv.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(out_csv, index=False)
        print("Wrote timings to:", out_csv.resolve())

    if args.plot:
        print("Wrote chart to:", plot_timings(frame, Path(args.plot)).resolve())


if __name__ == "__main__":
    main()
