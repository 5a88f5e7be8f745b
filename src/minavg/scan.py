from __future__ import annotations

from typing import NamedTuple, Sequence

from .window import Peek, Range

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class InvalidInput(ValueError):
    """Raised when a sequence cannot be scanned for a minimum-average range."""


class ScanResult(NamedTuple):
    mean: float
    left: int
    right: int

    def as_pair(self) -> tuple[float, tuple[int, int]]:
        return self.mean, (self.left, self.right)


def validate_values(values: Sequence[int]) -> tuple[int, ...]:
    frozen = tuple(values)
    if len(frozen) < 2:
        raise InvalidInput(f"sequence too short: need at least 2 values, got {len(frozen)}")
    for index, value in enumerate(frozen):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"value at index {index} is not an int: {value!r}")
        if not (INT32_MIN <= value <= INT32_MAX):
            raise InvalidInput(f"value at index {index} is outside int32 range: {value}")
    return frozen


def find_min_average_range(values: Sequence[int]) -> ScanResult:
    """Single left-to-right scan for the length >= 2 window with the smallest mean.

    For each next element the working window is either extended by it,
    collapsed to the pair (last element, next element), or closed out and
    compared against the best window so far, with a fresh pair started from
    its right edge. Ties keep the window found first.
    """
    frozen = validate_values(values)

    working = Range.new(frozen, 0, 1)
    best = working.clone()

    while True:
        step = working.peek()
        if step is Peek.EXTEND_RANGE:
            working.extend()
        elif step is Peek.NEW_PAIR:
            working.reset_to_pair()
        elif step is Peek.NOTHING:
            if working.mean < best.mean:
                best = working.clone()
            working = Range.new(frozen, working.right, working.right + 1)
        else:
            if working.mean < best.mean:
                best = working.clone()
            break

    return ScanResult(mean=best.mean, left=best.left, right=best.right)


def min_abaverage_smart(values: Sequence[int]) -> tuple[float, tuple[int, int]]:
    return find_min_average_range(values).as_pair()
