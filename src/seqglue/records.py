# src/seqglue/records.py
"""
Reading reads from FASTA-like text and writing the assembled contig.

A record starts at every line beginning with the demarcator (``>`` by
default); the rest of that line is the record name and every following line
up to the next demarcator line is glued on verbatim to form the bases.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from seqglue.assembly.overlap import Sequence
from seqglue.errors import ParseError

L = logging.getLogger(__name__)

PathLike = str | Path

DEFAULT_DEMARCATOR = ">"

# real line endings only; str.splitlines also breaks on \x0c, \x85, \u2028 and others
_EOL_RX = re.compile(r"\r\n|\r|\n")


def _physical_lines(text: str) -> list[str]:
    lines = _EOL_RX.split(text)
    if lines and lines[-1] == "":
        lines.pop()  # text ended with a line break
    return lines


def parse(text: str, demarcator: str = DEFAULT_DEMARCATOR) -> list[Sequence]:
    """
    Split ``text`` into reads, in file order.

    Lines before the first demarcator line are ignored. Only line endings are
    removed; any other character in a body line is part of the bases.
    Raises ParseError when there is no record at all or when a record has no
    bases.
    """
    if not demarcator:
        raise ValueError("demarcator must be a non-empty string")

    records: list[Sequence] = []
    name: str | None = None
    header_line = 0
    chunks: list[str] = []

    def _close() -> None:
        bases = "".join(chunks)
        if not bases:
            raise ParseError("record has no bases", record_name=name, line_number=header_line)
        records.append(Sequence(name=name, bases=bases))

    for lineno, line in enumerate(_physical_lines(text), start=1):
        if line.startswith(demarcator):
            if name is not None:
                _close()
            name = line[len(demarcator):]
            header_line = lineno
            chunks = []
        elif name is not None:
            chunks.append(line)
        # lines before the first header are preamble

    if name is None:
        raise ParseError(f"no records found (no line starts with {demarcator!r})")
    _close()

    L.debug("Parsed %d record(s)", len(records))
    return records


def parse_file(path: PathLike, demarcator: str = DEFAULT_DEMARCATOR) -> list[Sequence]:
    """Read ``path`` (UTF-8) and :func:`parse` it; errors carry the path."""
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    try:
        records = parse(text, demarcator)
    except ParseError as exc:
        L.error("Could not parse %s: %s", p, exc.reason)
        raise exc.with_path(p) from exc
    L.info("Read %d record(s) from %s", len(records), p)
    return records


def write_contig(superstring: str, out_fa: PathLike, *, name: str = "contig_1",
                 description: str = "") -> Path:
    """Write the superstring as a one-record FASTA file via Bio.SeqIO."""
    out_fa = Path(out_fa)
    out_fa.parent.mkdir(parents=True, exist_ok=True)
    rec = SeqRecord(Seq(superstring), id=name, description=description)
    SeqIO.write([rec], out_fa, "fasta")
    L.info("Contig (%d bp) written to %s", len(superstring), out_fa)
    return out_fa
