"""
seqglue.pipeline
Thin wrappers that chain parse -> assemble -> glue -> validate.
``run_assembly`` returns an int exit-code (0 = success) & raises on fatal errors.
"""

from __future__ import annotations
from dataclasses import dataclass
from importlib import import_module
from pathlib import Path
from typing import Iterable, Union
import logging
import threading

from seqglue.assembly.greedy_assembly import (
    assemble,
    glue,
    is_valid_superstring,
    pick_start,
)
from seqglue.assembly.overlap import Overlap, Sequence
from seqglue.errors import GlueError
from seqglue.records import DEFAULT_DEMARCATOR, parse_file, write_contig
from seqglue.report import write_layout

__all__ = [
    "AssemblyResult",
    "assemble_sequences",
    "assemble_file",
    "run_assembly",
]

PathLike = Union[str, Path]
L = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssemblyResult:
    sequences: tuple[Sequence, ...]
    overlaps: tuple[Overlap, ...]
    superstring: str

    @property
    def length(self) -> int:
        return len(self.superstring)

    @property
    def valid(self) -> bool:
        """Every input read is a substring of the contig."""
        return is_valid_superstring(self.superstring, self.sequences)


def assemble_sequences(
    sequences: Iterable[Sequence],
    *,
    parallel: bool = True,
    workers: int | None = None,
    cancel: threading.Event | None = None,
) -> AssemblyResult:
    """Assemble, glue and check ``sequences``; one progress tick per stage."""
    seqs = tuple(sequences)

    # late-bind progress helper so pytest can monkey-patch it
    prog = import_module("seqglue.utility.progress")
    with prog.stage_bar(3, desc="assemble", unit="stage") as bar:
        overlaps = assemble(seqs, parallel=parallel, workers=workers, cancel=cancel)
        prog.tick(bar)

        try:
            superstring = glue(overlaps, strict=True)
        except GlueError as exc:
            L.error("Glue failed: %s", exc)
            raise
        if not overlaps and seqs:
            # nothing was gluable to the start read, so it stands alone
            superstring = pick_start(seqs).bases
        prog.tick(bar)

        result = AssemblyResult(sequences=seqs, overlaps=tuple(overlaps), superstring=superstring)
        if not result.valid:
            L.warning("Contig does not contain every read (greedy chains left some out)")
        prog.tick(bar)

    L.info("Contig length %d from %d read(s), valid=%s", result.length, len(seqs), result.valid)
    return result


def assemble_file(
    input_path: PathLike,
    *,
    demarcator: str = DEFAULT_DEMARCATOR,
    parallel: bool = True,
    workers: int | None = None,
) -> AssemblyResult:
    """:func:`parse_file` then :func:`assemble_sequences`."""
    return assemble_sequences(
        parse_file(input_path, demarcator),
        parallel=parallel,
        workers=workers,
    )


def run_assembly(
    input_path: PathLike,
    output_fasta: PathLike | None = None,
    *,
    layout_tsv: PathLike | None = None,
    demarcator: str = DEFAULT_DEMARCATOR,
    parallel: bool = True,
    workers: int | None = None,
    echo: bool = False,
) -> int:
    """Assemble ``input_path`` and write the contig and/or layout table.

    With ``echo=True`` the contig, its length and the validity flag are
    printed to stdout, followed by one line per file written.
    Returns 0 on success; ParseError / GlueError propagate to the caller.
    """
    result = assemble_file(input_path, demarcator=demarcator, parallel=parallel, workers=workers)
    if echo:
        print(result.superstring)
        print(f"\nTotal length: {result.length}")
        print(f"\nValid superstring?: {result.valid}\n")

    if output_fasta:
        write_contig(
            result.superstring,
            output_fasta,
            name=f"{Path(input_path).stem}_contig",
            description=f"length={result.length} reads={len(result.sequences)} valid={result.valid}",
        )
        if echo:
            print(f" ✓ contig : {output_fasta}")
    if layout_tsv:
        write_layout(result.overlaps, layout_tsv)
        if echo:
            print(f" ✓ layout : {layout_tsv}")
    L.info("Assembly finished → %s", output_fasta or "(not written)")
    return 0
