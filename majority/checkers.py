"""
Majority element checkers.

An element is a majority element if it occurs more than N // 2 times in a
sequence of length N. All three checkers take any sequence (or None) and
return a bool. None and empty sequences never have a majority.

| checker                        | time  | extra space |
|--------------------------------|-------|-------------|
| has_majority_quadratic         | O(N²) | O(1)        |
| has_majority_frequency_table   | O(N)  | O(N)        |
| has_majority_boyer_moore       | O(N)  | O(1)        |
"""
from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Optional, TypeVar

from majority.counting import InvalidElementError, count_occurrences

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

Checker = Callable[[Optional[Sequence]], bool]


def has_majority_quadratic(sequence: Sequence[T] | None) -> bool:
    """Count every element against the whole sequence; stop at the first majority."""
    if not sequence:
        return False

    half = len(sequence) // 2
    for x in sequence:
        if count_occurrences(sequence, x) > half:
            return True
    return False


def has_majority_frequency_table(sequence: Sequence[H] | None) -> bool:
    """Single pass over a dict of running counts.

    The threshold is only checked when an existing count is incremented, so
    a one-element sequence reports no majority.
    """
    if not sequence:
        return False

    half = len(sequence) // 2
    counts: dict[H, int] = {}
    for x in sequence:
        if x in counts:
            times = counts[x] + 1
            if times > half:
                return True
            counts[x] = times
        else:
            counts[x] = 1
    return False


def majority_candidate(sequence: Sequence[T] | None) -> T | None:
    """Return the element surviving a Boyer-Moore vote, or None if the sequence is empty.

    If the sequence has a majority element it is the returned candidate. The
    reverse does not hold; callers must verify with ``count_occurrences``.
    """
    if not sequence:
        return None

    candidate = None
    adopted_at = 0
    count = 0
    for i, x in enumerate(sequence):
        if count == 0:
            candidate = x
            adopted_at = i
            count = 1
        elif candidate is None:
            raise InvalidElementError(adopted_at)
        elif candidate == x:
            count += 1
        else:
            count -= 1
    return candidate


def has_majority_boyer_moore(sequence: Sequence[T] | None) -> bool:
    """Pick a candidate by voting, then confirm it with one counting pass."""
    if not sequence:
        return False

    candidate = majority_candidate(sequence)
    return count_occurrences(sequence, candidate) > len(sequence) // 2


def find_majority(sequence: Sequence[T] | None) -> T | None:
    """Return the majority element of ``sequence``, or None if there is none."""
    if has_majority_boyer_moore(sequence):
        return majority_candidate(sequence)
    return None


QUADRATIC = "Quadratic"

# Display names and order match the benchmark output.
CHECKERS: dict[str, Checker] = {
    "Linear": has_majority_boyer_moore,
    "Linear HashMap implementation": has_majority_frequency_table,
    QUADRATIC: has_majority_quadratic,
}
