from __future__ import annotations

from typing import Sequence

from .scan import validate_values


def min_abaverage_naive(values: Sequence[int]) -> tuple[float, tuple[int, int]]:
    """Brute-force O(n^2) reference: mean of every (i, j) window, first minimum wins."""
    frozen = validate_values(values)
    lowest = float("inf")
    bounds = (0, 1)
    for i in range(len(frozen)):
        running = frozen[i]
        for j in range(i + 1, len(frozen)):
            running += frozen[j]
            mean = running / (j - i + 1)
            if mean < lowest:
                lowest = mean
                bounds = (i, j)
    return lowest, bounds
