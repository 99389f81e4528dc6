# src/laslite/errors.py
from __future__ import annotations

from typing import Sequence


class LasParseError(RuntimeError):
    """Base class for laslite parse errors."""


class StructuralParseError(LasParseError):
    """
    Raised inside the primary pipeline when a stage cannot recover locally
    (e.g. the text carries no recognizable section markers).

    Never escapes run_primary(); it is converted into a ParseFailure outcome.
    """


class TerminalParseFailure(LasParseError):
    """
    Raised when no strategy could produce a Document:
      - primary and fallback pipelines both failed, or
      - the pipe-delimited dialect failed (it has no fallback).
    """

    def __init__(self, source_name: str, reasons: Sequence[str]) -> None:
        self.source_name = source_name
        self.reasons = tuple(r for r in reasons if r)
        detail = "; ".join(self.reasons) if self.reasons else "unknown error"
        super().__init__(f"Failed to parse LAS file {source_name!r}: {detail}")
