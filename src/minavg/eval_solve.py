from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Sequence

from .config import section
from .naive import min_abaverage_naive
from .runtime import now_iso, timed
from .scan import find_min_average_range, validate_values
from .synthetic import generate_values, resolve_synthetic_spec


@dataclass(frozen=True)
class SolveSettings:
    length: int
    min_value: int
    max_value: int
    with_naive: bool
    values: tuple[int, ...] | None


def parse_values(text: str) -> list[int]:
    """Parse ``"5,7,-4"`` (commas and/or whitespace) into ints."""
    tokens = [token for token in text.replace(",", " ").split() if token]
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"--values must be integers separated by commas: {exc}") from exc


def resolve_solve_settings(
    config: dict[str, Any],
    length_override: int | None = None,
    with_naive_override: bool | None = None,
    values: Sequence[int] | None = None,
) -> SolveSettings:
    solve = section(config, "solve")
    spec = resolve_synthetic_spec(config)

    length = int(length_override or solve.get("length", 50000))
    if length < 2:
        raise ValueError("solve.length must be >= 2")
    with_naive = bool(solve.get("with_naive", False))
    if with_naive_override is not None:
        with_naive = with_naive_override

    return SolveSettings(
        length=length,
        min_value=spec.min_value,
        max_value=spec.max_value,
        with_naive=with_naive,
        values=tuple(values) if values is not None else None,
    )


def _method_records(
    method: str,
    sequence_id: str,
    length: int,
    mean: float,
    left: int,
    right: int,
    elapsed_s: float,
) -> list[dict[str, Any]]:
    base = {
        "record_type": "sample",
        "step": 0,
        "method": method,
        "length": length,
        "sequence_id": sequence_id,
    }
    return [
        {**base, "metric": "mean", "value": mean, "timestamp": now_iso()},
        {**base, "metric": "left", "value": left, "timestamp": now_iso()},
        {**base, "metric": "right", "value": right, "timestamp": now_iso()},
        {**base, "metric": "elapsed_s", "value": elapsed_s, "timestamp": now_iso()},
    ]


def run_solve(seed: int, settings: SolveSettings) -> dict[str, Any]:
    if settings.values is not None:
        values = list(validate_values(settings.values))
        source = "explicit"
    else:
        rng = random.Random(seed)
        values = generate_values(rng, settings.length, settings.min_value, settings.max_value)
        source = "random"
    sequence_id = f"{source}_{len(values)}"

    smart, smart_elapsed = timed(lambda: find_min_average_range(values))
    sample_records = _method_records(
        method="smart",
        sequence_id=sequence_id,
        length=len(values),
        mean=smart.mean,
        left=smart.left,
        right=smart.right,
        elapsed_s=smart_elapsed,
    )
    result: dict[str, Any] = {
        "smart": {
            "mean": smart.mean,
            "left": smart.left,
            "right": smart.right,
            "values": values[smart.left : smart.right + 1],
            "elapsed_s": smart_elapsed,
        },
    }

    if settings.with_naive:
        (naive_mean, (naive_left, naive_right)), naive_elapsed = timed(
            lambda: min_abaverage_naive(values)
        )
        sample_records.extend(
            _method_records(
                method="naive",
                sequence_id=sequence_id,
                length=len(values),
                mean=naive_mean,
                left=naive_left,
                right=naive_right,
                elapsed_s=naive_elapsed,
            )
        )
        result["naive"] = {
            "mean": naive_mean,
            "left": naive_left,
            "right": naive_right,
            "values": values[naive_left : naive_right + 1],
            "elapsed_s": naive_elapsed,
        }

    report = {
        "mode": "solve",
        "source": source,
        "length": len(values),
        **result,
    }
    return {
        "values": values,
        "smart": smart,
        "sample_records": sample_records,
        "report": report,
    }
