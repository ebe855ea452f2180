# src/seqglue/utility/progress.py

from __future__ import annotations
from contextlib import contextmanager
from tqdm import tqdm
from typing import Iterator


@contextmanager
def stage_bar(total: int, *, desc: str = "", unit: str = "") -> Iterator[tqdm]:
    """
    Context manager that yields a tqdm bar and closes it on exit.
    leave=False so a finished bar clears and only the latest one stays visible.
    """
    bar = tqdm(
        total=total, desc=desc, unit=unit, leave=False, ncols=80,
        bar_format="{l_bar}{bar}| {n_fmt}/{total_fmt} [elapsed: {elapsed}]",
    )
    try:
        yield bar
    finally:
        bar.close()


def tick(bar, inc: int = 1) -> None:
    """Call bar.update(inc) only if bar exposes that attribute."""
    if hasattr(bar, "update"):
        bar.update(inc)
