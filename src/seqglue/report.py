# --------- src/seqglue/report.py ----------------
"""Tabular layout of an assembled overlap chain (one row per junction)."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Sequence as Seq

import pandas as pd
import pandera as pa

from seqglue.assembly.overlap import Overlap

L = logging.getLogger(__name__)

COLS = ("left", "right", "length", "left_len", "right_len", "offset")

# offset = 0-based position of the right read inside the glued contig
schema = pa.DataFrameSchema(
    {
        "left":      pa.Column(str),
        "right":     pa.Column(str),
        "length":    pa.Column(int, pa.Check.ge(0)),
        "left_len":  pa.Column(int, pa.Check.gt(0)),
        "right_len": pa.Column(int, pa.Check.gt(0)),
        "offset":    pa.Column(int, pa.Check.ge(0)),
    },
    strict=True,
    ordered=True,
)


def overlaps_to_frame(overlaps: Seq[Overlap]) -> pd.DataFrame:
    """Build and validate the layout table for ``overlaps``."""
    rows = []
    end = len(overlaps[0].left.bases) if overlaps else 0
    for ov in overlaps:
        offset = end - ov.length
        rows.append((ov.left.name, ov.right.name, ov.length,
                     len(ov.left.bases), len(ov.right.bases), offset))
        end = offset + len(ov.right.bases)
    df = pd.DataFrame(rows, columns=list(COLS))
    if df.empty:
        df = df.astype({"left": str, "right": str, "length": int,
                        "left_len": int, "right_len": int, "offset": int})
    return validate(df)


def validate(df: pd.DataFrame) -> pd.DataFrame:
    """Raise SchemaError if columns or dtypes deviate; otherwise return df unchanged."""
    return schema.validate(df, lazy=True)


def write_layout(overlaps: Seq[Overlap], out_tsv: str | Path) -> Path:
    out_tsv = Path(out_tsv)
    out_tsv.parent.mkdir(parents=True, exist_ok=True)
    overlaps_to_frame(overlaps).to_csv(out_tsv, sep="\t", index=False)
    L.info("Layout (%d junction(s)) written to %s", len(overlaps), out_tsv)
    return out_tsv
