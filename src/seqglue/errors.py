# src/seqglue/errors.py
"""
Error types raised by seqglue.

``ParseError`` means the input file is bad, ``GlueError`` means an internal
chain invariant is broken. Both carry the details as attributes so a calling
harness can tell them apart without reading the message.
"""
from __future__ import annotations

from pathlib import Path


class SeqglueError(ValueError):
    """Base class for every seqglue error."""


class ParseError(SeqglueError):
    """Raised when a record file cannot be turned into reads."""

    def __init__(
        self,
        reason: str,
        *,
        record_name: str | None = None,
        line_number: int | None = None,
        path: str | Path | None = None,
    ) -> None:
        self.reason = reason
        self.record_name = record_name
        self.line_number = line_number
        self.path = Path(path) if path is not None else None
        super().__init__(self._format())

    def _format(self) -> str:
        where = []
        if self.path is not None:
            where.append(str(self.path))
        if self.line_number is not None:
            where.append(f"line {self.line_number}")
        if self.record_name is not None:
            where.append(f"record {self.record_name!r}")
        prefix = ", ".join(where)
        return f"{prefix}: {self.reason}" if prefix else self.reason

    def with_path(self, path: str | Path) -> "ParseError":
        """Copy of this error with the source file attached."""
        return ParseError(
            self.reason,
            record_name=self.record_name,
            line_number=self.line_number,
            path=path,
        )


class GlueError(SeqglueError):
    """Raised when an overlap chain cannot be folded into a superstring."""

    def __init__(
        self,
        reason: str,
        *,
        index: int,
        overlap_length: int | None = None,
        accumulated_length: int | None = None,
    ) -> None:
        self.reason = reason
        self.index = index
        self.overlap_length = overlap_length
        self.accumulated_length = accumulated_length
        super().__init__(f"overlap #{index}: {reason}")


class AssemblyCancelled(SeqglueError):
    """Raised when an assembly is cancelled before any search starts."""
