from __future__ import annotations

import random
import uuid
from dataclasses import dataclass
from typing import Any

from .config import section


@dataclass(frozen=True)
class SyntheticSpec:
    min_length: int
    max_length: int
    min_value: int
    max_value: int


def resolve_synthetic_spec(config: dict[str, Any]) -> SyntheticSpec:
    synthetic = section(section(config, "data"), "synthetic")
    spec = SyntheticSpec(
        min_length=int(synthetic.get("min_length", 5)),
        max_length=int(synthetic.get("max_length", 50)),
        min_value=int(synthetic.get("min_value", -5000)),
        max_value=int(synthetic.get("max_value", 5000)),
    )
    if spec.min_length < 2:
        raise ValueError("data.synthetic.min_length must be >= 2")
    if spec.max_length < spec.min_length:
        raise ValueError("data.synthetic.max_length must be >= min_length")
    if spec.max_value <= spec.min_value:
        raise ValueError("data.synthetic.max_value must be > min_value")
    return spec


def generate_values(rng: random.Random, length: int, min_value: int, max_value: int) -> list[int]:
    """Uniform integers in ``[min_value, max_value)``."""
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    return [rng.randrange(min_value, max_value) for _ in range(length)]


def generate_sequences(
    spec: SyntheticSpec,
    rng: random.Random,
    num_sequences: int,
) -> list[dict[str, Any]]:
    sequences: list[dict[str, Any]] = []
    for _ in range(num_sequences):
        length = rng.randint(spec.min_length, spec.max_length)
        # Inclusive upper bound so max_value itself can appear.
        values = generate_values(rng, length, spec.min_value, spec.max_value + 1)
        sequences.append(
            {
                "sequence_id": uuid.UUID(int=rng.getrandbits(128)).hex,
                "values": values,
            }
        )
    return sequences
