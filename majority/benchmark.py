"""
Benchmark driver: runs every checker on fixed and random inputs and prints
one result line plus one timing line per checker.

Output per scenario:

    Linear (7 elements): True
    0.004 ms
    Linear HashMap implementation (7 elements): True
    0.003 ms
    Quadratic (7 elements): True
    0.006 ms
    <blank line>
"""
from __future__ import annotations

import time
from collections.abc import Iterator, Sequence
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
from tqdm import tqdm

from majority.checkers import CHECKERS, QUADRATIC, Checker
from majority.config import Settings
from majority.generators import InputGenerator

HEADER = "Testing Majority Element Algorithms"
RANDOM_PREFIX = "random"
COLUMNS = ["scenario", "algorithm", "n", "result", "elapsed_ms", "skipped"]


@dataclass(frozen=True)
class BenchmarkResult:
    scenario: str
    algorithm: str
    n: int
    result: bool | None  # None when skipped
    elapsed_ms: float
    skipped: bool = False


def time_checker(name: str, checker: Checker, sequence: Sequence[Any], scenario: str = "") -> BenchmarkResult:
    start = time.perf_counter()
    result = checker(sequence)
    elapsed_ms = (time.perf_counter() - start) * 1000
    return BenchmarkResult(scenario=scenario, algorithm=name, n=len(sequence), result=result, elapsed_ms=elapsed_ms)


def run_scenario(label: str, sequence: Sequence[Any], settings: Settings) -> list[BenchmarkResult]:
    """Run every registered checker on ``sequence`` and print the results."""
    n = len(sequence)
    results = []
    for name, checker in CHECKERS.items():
        if name == QUADRATIC and n > settings.quadratic_max_size:
            tqdm.write(f"{name} ({n} elements): skipped")
            results.append(BenchmarkResult(label, name, n, None, 0.0, skipped=True))
            continue

        r = time_checker(name, checker, sequence, scenario=label)
        tqdm.write(f"{name} ({n} elements): {r.result}")
        tqdm.write(f"{r.elapsed_ms:.3f} ms")
        results.append(r)

    tqdm.write("")
    return results


def growing_sizes(settings: Settings) -> list[int]:
    sizes = []
    n = settings.start_size
    while n < settings.max_size:
        sizes.append(n)
        n *= settings.growth
    return sizes


def default_scenarios(generator: InputGenerator, settings: Settings) -> Iterator[tuple[str, list]]:
    # Simple tests with ints
    yield "sample with majority", [1, 2, 1, 2, 1, 2, 1]
    yield "sample without majority", [1, 2, 1, 2, 1, 2, 3]

    # Arbitrary objects; equality is structural for tuples, identity for object()
    l = (True,)
    l2 = (True, False)
    a = [l, l2, l, l2, object()]
    yield "objects without majority", list(a)
    a[4] = l
    yield "objects with majority", list(a)

    yield "large with majority", generator.sequence_with_majority(settings.majority_size)

    for n in growing_sizes(settings):
        yield f"{RANDOM_PREFIX} n={n}", generator.random_sequence(n)


def scenario_count(settings: Settings) -> int:
    return 5 + len(growing_sizes(settings))


def results_frame(results: list[BenchmarkResult]) -> pd.DataFrame:
    return pd.DataFrame([asdict(r) for r in results], columns=COLUMNS)


def run_benchmark(generator: InputGenerator, settings: Settings, show_progress: bool | None = None) -> pd.DataFrame:
    """Print every default scenario and return all timings as a DataFrame.

    ``show_progress=None`` lets tqdm decide (bar only on a TTY).
    """
    tqdm.write(HEADER)
    tqdm.write("")

    disable = None if show_progress is None else not show_progress
    results: list[BenchmarkResult] = []
    for label, sequence in tqdm(default_scenarios(generator, settings), total=scenario_count(settings),
                                desc="Scenarios", disable=disable, leave=False):
        results.extend(run_scenario(label, sequence, settings))

    return results_frame(results)


def plot_timings(frame: pd.DataFrame, path: Path) -> Path:
    """Log-log chart of elapsed ms vs N for the random scenarios, one line per algorithm."""
    growth = frame[frame["scenario"].str.startswith(RANDOM_PREFIX) & ~frame["skipped"]]

    plt.figure()
    for name in CHECKERS:
        rows = growth[growth["algorithm"] == name].sort_values("n")
        if rows.empty:
            continue
        plt.loglog(rows["n"], rows["elapsed_ms"], marker="o", label=name)
    plt.title("Majority element checkers")
    plt.xlabel("Elements (N)")
    plt.ylabel("Elapsed (ms)")
    plt.legend()
    plt.tight_layout()

    path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(path, dpi=150)
    plt.close()
    return path
