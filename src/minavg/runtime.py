from __future__ import annotations

import platform
import re
import socket
import subprocess
import time
from datetime import datetime, timezone
from typing import Callable, TypeVar

T = TypeVar("T")


def _run_git_command(args: list[str]) -> str | None:
    try:
        completed = subprocess.run(
            ["git", *args],
            check=True,
            capture_output=True,
            text=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None
    return completed.stdout.strip()


def get_git_metadata() -> tuple[str, bool]:
    git_sha = _run_git_command(["rev-parse", "--short", "HEAD"]) or "nogit"
    status = _run_git_command(["status", "--porcelain"]) or ""
    git_dirty = bool(status)
    return git_sha, git_dirty


def get_environment_metadata() -> dict[str, str]:
    return {
        "host": socket.gethostname(),
        "python_version": platform.python_version(),
        "python_implementation": platform.python_implementation(),
        "machine": platform.machine(),
    }


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def build_run_id(git_sha: str, explicit_run_id: str | None = None) -> str:
    if explicit_run_id:
        return explicit_run_id
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    suffix = git_sha or "nogit"
    suffix = re.sub(r"[^0-9A-Za-z_-]", "_", suffix)
    return f"{timestamp}_{suffix}"


def timed(fn: Callable[[], T]) -> tuple[T, float]:
    """Run ``fn`` and return its result with elapsed wall time in seconds."""
    start = time.perf_counter()
    result = fn()
    return result, time.perf_counter() - start
