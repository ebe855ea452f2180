# src/seqglue/assembly/greedy_assembly.py
"""
greedy_assembly.py

Bidirectional greedy assembly and the glue step.

Usage:
    overlaps = assemble(reads)
    contig = glue(overlaps)

The result is *a* superstring of the reads, not necessarily the shortest one:
the greedy choice at each step is never revisited.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence as Seq

from seqglue.errors import AssemblyCancelled, GlueError
from seqglue.hardware import assembly_workers

from .chain import Direction, build_chain, sort_key
from .overlap import Overlap, Sequence

L = logging.getLogger(__name__)


def pick_start(sequences: Iterable[Sequence]) -> Sequence:
    """The least read by (name, bases); raises ValueError on an empty input."""
    return min(sequences, key=sort_key)


def _shared_reads(left: list[Overlap], right: list[Overlap]) -> set[Sequence]:
    # the start read sits on both chains by construction, so only look at the far ends
    left_reads = {ov.left for ov in left}
    right_reads = {ov.right for ov in right}
    return left_reads & right_reads


def assemble(
    sequences: Iterable[Sequence],
    *,
    parallel: bool = True,
    workers: int | None = None,
    cancel: threading.Event | None = None,
) -> list[Overlap]:
    """
    Order the reads into one overlap chain, read left to right.

    Parameters
    sequences : iterable of Sequence
        Reads to assemble. Duplicates (same name and bases) collapse into one.
    parallel : bool
        Run the left and right searches on two worker threads. The result
        is the same as the sequential run.
    workers : int | None
        Upper bound on worker threads; ``None`` asks
        :func:`seqglue.hardware.recommend_threads`. One worker means sequential.
    cancel : threading.Event | None
        If already set, no search is launched and AssemblyCancelled is
        raised. Running searches do not poll it.

    Returns
    list[Overlap]
        ``left_chain + right_chain``; empty for an empty input.
    """
    if cancel is not None and cancel.is_set():
        raise AssemblyCancelled("assembly cancelled before start")

    reads = set(sequences)
    if not reads:
        L.info("No reads to assemble")
        return []

    start = pick_start(reads)
    pool = frozenset(reads - {start})   # each search sorts its own private copy
    L.info("Assembling %d read(s) from start %s", len(reads), start.name)

    n_workers = assembly_workers(workers) if parallel else 1
    if n_workers > 1:
        with ThreadPoolExecutor(max_workers=n_workers, thread_name_prefix="seqglue") as ex:
            left_f = ex.submit(build_chain, start, pool, Direction.LEFT)
            right_f = ex.submit(build_chain, start, pool, Direction.RIGHT)
            left, right = left_f.result(), right_f.result()
    else:
        left = build_chain(start, pool, Direction.LEFT)
        right = build_chain(start, pool, Direction.RIGHT)

    if shared := _shared_reads(left, right):
        # both searches are free to pick the same read; it then shows up twice in the contig
        L.warning("%d read(s) used by both the left and right chain: %s",
                  len(shared), ", ".join(sorted(s.name for s in shared)))

    return left + right


def check_chain(overlaps: Seq[Overlap]) -> None:
    """Raise GlueError unless each overlap starts where the previous one ended."""
    for i in range(1, len(overlaps)):
        if overlaps[i].left != overlaps[i - 1].right:
            raise GlueError(
                f"chain broken: {overlaps[i - 1].right.name!r} is followed by {overlaps[i].left.name!r}",
                index=i,
            )


def glue(overlaps: Seq[Overlap], *, strict: bool = False) -> str:
    """
    Fold an ordered overlap chain into one superstring.

    Starts from the first overlap's left read; every overlap then drops its
    ``length`` trailing characters and appends its right read. An overlap
    longer than the string built so far raises GlueError instead of being
    clamped. With ``strict=True`` the chain links are checked first.
    """
    if not overlaps:
        return ""
    if strict:
        check_chain(overlaps)

    acc = overlaps[0].left.bases
    for i, ov in enumerate(overlaps):
        if ov.length < 0 or ov.length > len(acc):
            raise GlueError(
                f"overlap length {ov.length} does not fit the {len(acc)} glued bases",
                index=i,
                overlap_length=ov.length,
                accumulated_length=len(acc),
            )
        acc = acc[:len(acc) - ov.length] + ov.right.bases
    return acc


def is_valid_superstring(superstring: str, sequences: Iterable[Sequence]) -> bool:
    """True when every read occurs somewhere in ``superstring``."""
    return all(seq.bases in superstring for seq in sequences)
