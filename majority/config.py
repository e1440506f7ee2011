from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    seed: int | None
    value_range: int
    majority_size: int
    start_size: int
    max_size: int
    growth: int
    quadratic_max_size: int


def _int_env(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from None
    if value < minimum:
        raise RuntimeError(f"{name} must be >= {minimum}, got {value}.")
    return value


def load_settings() -> Settings:
    seed_raw = os.getenv("MAJORITY_SEED", "").strip()
    seed = _int_env("MAJORITY_SEED", 0, minimum=0) if seed_raw else None

    return Settings(
        seed=seed,
        value_range=_int_env("MAJORITY_VALUE_RANGE", 100),
        majority_size=_int_env("MAJORITY_SIZE", 1000),
        start_size=_int_env("MAJORITY_START_SIZE", 1000),
        max_size=_int_env("MAJORITY_MAX_SIZE", 1_000_000),
        growth=_int_env("MAJORITY_GROWTH", 2, minimum=2),
        quadratic_max_size=_int_env("MAJORITY_QUADRATIC_MAX_SIZE", 4000, minimum=0),
    )
