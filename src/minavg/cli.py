from __future__ import annotations

import argparse
import copy
from pathlib import Path
from typing import Any

from .config import DEFAULT_CONFIG_PATH, load_config, section, write_yaml
from .eval_crosscheck import resolve_crosscheck_settings, run_crosscheck
from .eval_solve import parse_values, resolve_solve_settings, run_solve
from .metrics import MetricsWriter
from .report import format_values, write_report
from .runtime import build_run_id, get_environment_metadata, get_git_metadata, now_iso
from .scan import InvalidInput


def _build_snapshot(
    config: dict[str, Any],
    run_id: str,
    start_time: str,
    git_sha: str,
    git_dirty: bool,
    env_meta: dict[str, str],
) -> dict[str, Any]:
    snapshot = copy.deepcopy(config)
    snapshot["run_id"] = run_id
    snapshot["start_time"] = start_time
    snapshot["git_sha"] = git_sha
    snapshot["git_dirty"] = git_dirty
    snapshot.update(env_meta)
    snapshot["metrics_schema_version"] = int(
        section(config, "metrics").get("schema_version", 1)
    )
    return snapshot


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Minimum-average range finder")
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--run-id",
        type=str,
        default=None,
        help="Optional fixed run id. If omitted, uses timestamp+shortsha",
    )
    parser.add_argument(
        "--mode",
        choices=("solve", "crosscheck"),
        default="solve",
        help="solve: one sequence. crosscheck: compare smart vs naive on random sequences.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed override for random sequence generation.",
    )
    parser.add_argument(
        "--output-root",
        type=Path,
        default=None,
        help="Override runtime.output_root.",
    )
    parser.add_argument(
        "--values",
        type=str,
        default=None,
        help="Solve mode: explicit comma-separated integers instead of a random list.",
    )
    parser.add_argument(
        "--length",
        type=int,
        default=None,
        help="Solve mode: random list length override.",
    )
    parser.add_argument(
        "--with-naive",
        action="store_true",
        help="Solve mode: also run and time the brute-force method.",
    )
    parser.add_argument(
        "--num-sequences",
        type=int,
        default=None,
        help="Crosscheck mode: number of random sequences.",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=None,
        help="Crosscheck mode: allowed absolute difference between means.",
    )
    parser.add_argument(
        "--report-path",
        type=Path,
        default=None,
        help="Optional explicit report output path.",
    )
    return parser.parse_args(argv)


def _resolve_seed(config: dict[str, Any], mode: str, override: int | None) -> int:
    if override is not None:
        return override
    return int(section(config, mode).get("seed", config.get("seed", 0)))


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)

    git_sha, git_dirty = get_git_metadata()
    run_id = build_run_id(git_sha=git_sha, explicit_run_id=args.run_id)
    start_time = now_iso()
    env_meta = get_environment_metadata()

    output_root = args.output_root or Path(
        section(config, "runtime").get("output_root", "outputs")
    )
    run_dir = output_root / run_id
    run_dir.mkdir(parents=True, exist_ok=True)
    metrics_path = run_dir / "metrics.jsonl"
    report_path = args.report_path or (run_dir / "report.json")

    seed = _resolve_seed(config, args.mode, args.seed)
    snapshot = _build_snapshot(
        config=config,
        run_id=run_id,
        start_time=start_time,
        git_sha=git_sha,
        git_dirty=git_dirty,
        env_meta=env_meta,
    )
    snapshot["mode"] = args.mode
    snapshot["effective_seed"] = seed
    write_yaml(run_dir / "config.yaml", snapshot)

    if args.mode == "solve":
        try:
            values = parse_values(args.values) if args.values is not None else None
            settings = resolve_solve_settings(
                config=config,
                length_override=args.length,
                with_naive_override=True if args.with_naive else None,
                values=values,
            )
            result = run_solve(seed=seed, settings=settings)
        except InvalidInput as exc:
            write_report(
                path=report_path,
                report={"run_id": run_id, "mode": "solve", "error": str(exc)},
            )
            print(f"run_id={run_id}")
            print(f"output_dir={run_dir}")
            print(f"error={exc}")
            print(f"report_path={report_path}")
            return 2
        smart = result["smart"]
        extra_prints: dict[str, Any] = {
            "length": len(result["values"]),
            "avg": smart.mean,
            "range_indices": f"({smart.left}, {smart.right})",
            "range_values": format_values(result["values"][smart.left : smart.right + 1]),
            "smart_elapsed_s": f"{result['report']['smart']['elapsed_s']:.6f}",
        }
        if "naive" in result["report"]:
            naive = result["report"]["naive"]
            extra_prints["naive_avg"] = naive["mean"]
            extra_prints["naive_range_indices"] = f"({naive['left']}, {naive['right']})"
            extra_prints["naive_elapsed_s"] = f"{naive['elapsed_s']:.6f}"
        exit_code = 0
    else:
        settings = resolve_crosscheck_settings(
            config=config,
            num_sequences_override=args.num_sequences,
            tolerance_override=args.tolerance,
        )
        result = run_crosscheck(seed=seed, settings=settings)
        report = result["report"]
        extra_prints = {
            "num_sequences": report["counts"]["sequences"],
            "num_divergent": report["counts"]["divergent"],
            "num_index_mismatch": report["counts"]["index_mismatch"],
            "gate_pass": result["gate_pass"],
        }
        exit_code = 0 if result["gate_pass"] else 2

    _write_metrics(
        metrics_path=metrics_path,
        run_id=run_id,
        seed=seed,
        result=result,
    )
    write_report(path=report_path, report={"run_id": run_id, "seed": seed, **result["report"]})

    print(f"run_id={run_id}")
    print(f"output_dir={run_dir}")
    for key, value in extra_prints.items():
        print(f"{key}={value}")
    print(f"report_path={report_path}")

    return exit_code


def _write_metrics(
    metrics_path: Path,
    run_id: str,
    seed: int,
    result: dict[str, Any],
) -> None:
    writer = MetricsWriter(metrics_path)
    writer.write_all(result["sample_records"], run_id=run_id, seed=seed)
    for step, (metric_name, metric_value) in enumerate(result.get("run_metrics", []), start=1):
        writer.write(
            {
                "record_type": "run",
                "run_id": run_id,
                "step": step,
                "metric": metric_name,
                "value": metric_value,
                "seed": seed,
                "timestamp": now_iso(),
                "method": "all",
                "length": 0,
                "sequence_id": "run",
            }
        )


if __name__ == "__main__":
    raise SystemExit(main())
