from __future__ import annotations

import enum
from typing import Sequence


class Peek(enum.Enum):
    """What the scan should do with the element after the current window."""

    EXTEND_RANGE = "extend_range"
    NEW_PAIR = "new_pair"
    NOTHING = "nothing"
    END_OF_LIST = "end_of_list"


class Range:
    """Candidate window ``values[left..=right]`` with a running sum and cached mean.

    ``values`` is a read-only view of the caller's sequence; the window never
    copies or mutates it.
    """

    __slots__ = ("values", "left", "right", "sum", "mean")

    def __init__(self, values: Sequence[int], left: int, right: int, total: int) -> None:
        self.values = values
        self.left = left
        self.right = right
        self.sum = total
        self.mean = 0.0
        self._update_mean()

    @classmethod
    def new(cls, values: Sequence[int], left: int, right: int) -> Range:
        if not (0 <= left < right < len(values)):
            raise IndexError(f"invalid window ({left}, {right}) for length {len(values)}")
        return cls(values, left, right, sum(values[left : right + 1]))

    def __len__(self) -> int:
        return self.right - self.left + 1

    def __repr__(self) -> str:
        return f"Range(left={self.left}, right={self.right}, sum={self.sum}, mean={self.mean!r})"

    def _update_mean(self) -> None:
        self.mean = self.sum / (self.right - self.left + 1)

    def _require_next(self) -> None:
        if self.right + 1 >= len(self.values):
            raise IndexError("window already ends at the last element")

    def extend(self) -> None:
        """Grow the window right by one element."""
        self._require_next()
        self.right += 1
        self.sum += self.values[self.right]
        self._update_mean()

    def reset_to_pair(self) -> None:
        """Collapse to the pair (current last element, next element)."""
        self._require_next()
        self.left = self.right
        self.right += 1
        self.sum = self.values[self.left] + self.values[self.right]
        self._update_mean()

    def peek(self) -> Peek:
        if self.right == len(self.values) - 1:
            return Peek.END_OF_LIST

        nxt = self.values[self.right + 1]
        ext_mean = (self.sum + nxt) / (len(self) + 1)
        pair_mean = (self.values[self.right] + nxt) / 2

        if pair_mean < self.mean and pair_mean < ext_mean:
            return Peek.NEW_PAIR
        if ext_mean < self.mean and ext_mean < pair_mean:
            return Peek.EXTEND_RANGE
        return Peek.NOTHING

    def clone(self) -> Range:
        return Range(self.values, self.left, self.right, self.sum)

    def bounds(self) -> tuple[int, int]:
        return self.left, self.right
