"""Assembly helpers exposed for external callers."""

from .overlap import Overlap, Sequence, find_overlap, is_gluable, overlap_length
from .chain import Direction, build_chain
from .greedy_assembly import assemble, check_chain, glue, is_valid_superstring, pick_start

__all__ = [
    "Sequence",
    "Overlap",
    "overlap_length",
    "is_gluable",
    "find_overlap",
    "Direction",
    "build_chain",
    "pick_start",
    "assemble",
    "check_chain",
    "glue",
    "is_valid_superstring",
]
