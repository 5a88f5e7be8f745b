from __future__ import annotations

from .naive import min_abaverage_naive
from .scan import InvalidInput, ScanResult, find_min_average_range, min_abaverage_smart
from .window import Peek, Range

__all__ = [
    "InvalidInput",
    "Peek",
    "Range",
    "ScanResult",
    "find_min_average_range",
    "min_abaverage_naive",
    "min_abaverage_smart",
]
