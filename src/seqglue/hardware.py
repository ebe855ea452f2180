from __future__ import annotations
import os
from math import floor

try:
    import psutil  # type: ignore
except ImportError:  # pragma: no cover - missing psutil
    psutil = None

# each directional search holds its own copy of the read pool
_GB_PER_WORKER = 0.25
_MAX_WORKERS = 16


def _total_mem_gb() -> float:
    """Return total system memory in gigabytes.

    Falls back to 8 GB when psutil is unavailable.
    """
    total_bytes = 8 * 1024 ** 3
    if psutil is not None:
        try:
            total_bytes = psutil.virtual_memory().total
        except OSError:
            pass
    return total_bytes / (1024 ** 3)


def recommend_threads() -> int:
    """Suggest a safe worker count on this machine."""
    logical = os.cpu_count() or 1
    max_by_mem = floor(_total_mem_gb() / _GB_PER_WORKER)
    return max(1, min(logical, max_by_mem, _MAX_WORKERS))


def assembly_workers(requested: int | None = None) -> int:
    """Workers for one assembly: there are only two directions to run."""
    n = requested if requested is not None else recommend_threads()
    return max(1, min(n, 2))


def recommend_threads_cli() -> None:
    """CLI entry point: print ``recommend_threads()``."""
    print(recommend_threads())
