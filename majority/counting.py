"""Equality counting shared by the quadratic and voting checkers."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class InvalidElementError(TypeError):
    """Raised when a None element would be used as the left side of a comparison."""

    def __init__(self, index: int):
        super().__init__(f"element at index {index} is None and cannot be compared")
        self.index = index


def count_occurrences(sequence: Sequence[Any], target: Any) -> int:
    """Return how many elements of ``sequence`` compare equal to ``target``.

    O(N) time, O(1) extra space. Each element is the left operand of ``==``.
    """
    n = 0
    for i, element in enumerate(sequence):
        if element is None:
            raise InvalidElementError(i)
        if element == target:
            n += 1
    return n
