from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

MAX_PRINTED_VALUES = 20


def write_report(path: str | Path, report: dict[str, Any]) -> None:
    report_path = Path(path)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    with report_path.open("w", encoding="utf-8") as f:
        json.dump(report, f, ensure_ascii=True, indent=2)
        f.write("\n")


def format_values(values: Sequence[int], limit: int = MAX_PRINTED_VALUES) -> str:
    """Bracketed list, elided in the middle when longer than ``limit``."""
    if limit < 2 or len(values) <= limit:
        return "[" + ", ".join(str(v) for v in values) + "]"
    head = limit // 2
    tail = limit - head
    shown = [str(v) for v in values[:head]] + ["..."] + [str(v) for v in values[-tail:]]
    return "[" + ", ".join(shown) + f"] ({len(values)} values)"
