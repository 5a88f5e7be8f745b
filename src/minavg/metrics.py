from __future__ import annotations

import json
from pathlib import Path
from typing import Any

REQUIRED_METRIC_FIELDS = (
    "record_type",
    "run_id",
    "step",
    "metric",
    "value",
    "seed",
    "timestamp",
    "method",
    "length",
    "sequence_id",
)


class MetricsWriter:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, record: dict[str, Any]) -> None:
        missing = [field for field in REQUIRED_METRIC_FIELDS if field not in record]
        if missing:
            raise ValueError(f"Metric record missing required fields: {missing}")
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=True))
            f.write("\n")

    def write_all(self, records: list[dict[str, Any]], **common: Any) -> int:
        for record in records:
            self.write({**common, **record})
        return len(records)
