# src/seqglue/assembly/overlap.py
"""
Reads, overlaps and the overlap scorer.

An overlap between ``left`` and ``right`` is the longest suffix of
``left.bases`` that is also a prefix of ``right.bases``:

    left  = XXXAGA
    right =    AGAXXX
    length = 3

Matching is exact and case-sensitive, no gaps or mismatches.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Sequence:
    """One read. Equal (and hashed) by name and bases together."""
    name: str
    bases: str

    def __len__(self) -> int:
        return len(self.bases)


@dataclass(frozen=True)
class Overlap:
    left: Sequence
    right: Sequence
    length: int

    @property
    def is_gluable(self) -> bool:
        return is_gluable(self)


def overlap_length(a: Sequence, b: Sequence) -> int:
    """Length of the longest suffix of ``a`` that is a prefix of ``b``."""
    x, y = a.bases, b.bases
    # a suffix longer than y can never be a prefix of y
    for k in range(min(len(x), len(y)), 0, -1):
        if y.startswith(x[len(x) - k:]):
            return k
    return 0


def is_gluable(overlap: Overlap) -> bool:
    """True when the overlap covers more than half of the shorter read."""
    shorter = min(len(overlap.left.bases), len(overlap.right.bases))
    return overlap.length > shorter // 2


def find_overlap(left: Sequence, right: Sequence) -> Overlap:
    return Overlap(left=left, right=right, length=overlap_length(left, right))
