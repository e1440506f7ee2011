from __future__ import annotations

import numpy as np


class InputGenerator:
    """Random test inputs drawn from one numpy Generator owned by this instance.

    The generator is seeded once at construction and reused by every call.
    """

    def __init__(self, seed: int | None = None, value_range: int = 100):
        if value_range < 1:
            raise ValueError(f"value_range must be >= 1, got {value_range}")
        self.value_range = value_range
        self.rng = np.random.default_rng(seed)

    def random_sequence(self, n: int) -> list[int]:
        """n ints drawn uniformly from [0, value_range)."""
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        return self.rng.integers(0, self.value_range, size=n).tolist()

    def sequence_with_majority(self, n: int, value: int = 1) -> list[int]:
        """Random sequence in which ``value`` fills more than n // 2 positions.

        Every even index is overwritten with ``value``. For even n that only
        reaches n / 2, so the last index is overwritten as well.
        """
        a = self.random_sequence(n)
        for i in range(0, n, 2):
            a[i] = value
        if n and n % 2 == 0:
            a[-1] = value
        return a
