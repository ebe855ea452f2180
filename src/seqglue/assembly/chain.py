# src/seqglue/assembly/chain.py

"""
Greedy chain building in one direction.

Starting from one read, the chain is extended step by step with the pool read
that has the longest gluable overlap with the current end of the chain. The
left and right searches are the same loop; they only differ in which side of
the pair the current read sits on and in where new overlaps are added.
"""

from __future__ import annotations
import logging
from collections import deque
from enum import Enum
from typing import Iterable

from .overlap import Overlap, Sequence, find_overlap

L = logging.getLogger(__name__)


class Direction(str, Enum):
    """Which end of the chain grows."""
    LEFT = "left"
    RIGHT = "right"


def sort_key(seq: Sequence) -> tuple[str, str]:
    """Deterministic order used for start selection and tie-breaks."""
    return seq.name, seq.bases


def _pair(current: Sequence, candidate: Sequence, direction: Direction) -> Overlap:
    if direction is Direction.RIGHT:
        return find_overlap(current, candidate)   # current's suffix, candidate's prefix
    return find_overlap(candidate, current)       # candidate's suffix, current's prefix


def _best_gluable(current: Sequence, pool: list[Sequence], direction: Direction) -> Overlap | None:
    """Longest gluable overlap against the pool; first in pool order wins ties."""
    best: Overlap | None = None
    for candidate in pool:
        ov = _pair(current, candidate, direction)
        if ov.is_gluable and (best is None or ov.length > best.length):
            best = ov
    return best


def build_chain(start: Sequence, pool: Iterable[Sequence], direction: Direction | str) -> list[Overlap]:
    """
    Grow a chain from ``start`` in one direction and return its overlaps
    ordered left to right.

    ``pool`` is copied (deduplicated, without ``start``, sorted by name then
    bases) so the caller's collection is never touched. Each step removes the
    chosen read from the private copy. The loop stops when no gluable overlap
    is left or the pool runs dry.
    """
    direction = Direction(direction)
    work = sorted(set(pool) - {start}, key=sort_key)
    chain: deque[Overlap] = deque()
    # append for RIGHT, prepend for LEFT; both leave the chain reading left to right
    add = chain.append if direction is Direction.RIGHT else chain.appendleft

    current = start
    while work:
        best = _best_gluable(current, work, direction)
        if best is None:
            break
        nxt = best.right if direction is Direction.RIGHT else best.left
        L.debug("%s step: %s -> %s (overlap %d)", direction.value, current.name, nxt.name, best.length)
        add(best)
        work.remove(nxt)
        current = nxt

    L.info("%s chain from %s: %d overlap(s), %d read(s) left in pool",
           direction.value, start.name, len(chain), len(work))
    return list(chain)
