# src/laslite/pipelines/fallback.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from laslite.config.defaults import default_config
from laslite.config.schema import ParseConfig
from laslite.curves.schema import positional_curve_names, synthesize_curve_section
from laslite.io.data_table import append_row
from laslite.io.sections import is_skippable, normalize_newlines
from laslite.io.types import DataTable, Document, LasHeader
from laslite.pipelines.outcome import ParseFailure, ParseOutcome, ParseSuccess
from laslite.utils.numeric import parse_number

logger = logging.getLogger(__name__)

DATA_MARKER = "~A"


def locate_data_start(lines: Sequence[str]) -> Optional[int]:
    """
    Index of the first data line.

      1) the line after the first '~A...' marker, else
      2) the first non-blank, non-comment, non-marker line whose first token
         is numeric (that line itself).
    """
    for i, raw in enumerate(lines):
        if raw.strip().upper().startswith(DATA_MARKER):
            return i + 1

    for i, raw in enumerate(lines):
        s = raw.strip()
        if is_skippable(s) or s.startswith("~"):
            continue
        if parse_number(s.split()[0]) is not None:
            return i
    return None


def run_fallback(text: str, source_name: str, *, config: Optional[ParseConfig] = None) -> ParseOutcome:
    """
    Column-counting parse of raw text, used only after the primary pipeline
    failed. Headers are not interpreted; curve names are synthesized from the
    widest data line.
    """
    cfg = config or default_config()
    logger.info("Using fallback parser for %s", source_name)

    lines = normalize_newlines(text).split("\n")[: cfg.max_section_lines]
    start = locate_data_start(lines)
    if start is None:
        return ParseFailure(reason="no data lines found", stage="fallback")
    logger.debug("Fallback data section starts at line %d", start)

    data_lines: List[str] = []
    for raw in lines[start:]:
        s = raw.strip()
        if is_skippable(s) or s.startswith("~"):
            continue
        data_lines.append(s)

    max_cols = max((len(s.split()) for s in data_lines), default=0)
    names = positional_curve_names(max(1, max_cols))

    index: List[float] = []
    columns: Dict[str, List[float]] = {n: [] for n in names}
    skipped = 0
    for s in data_lines:
        tokens = s.split()
        idx = parse_number(tokens[0])
        if idx is None:
            skipped += 1
            continue
        index.append(idx)
        append_row(columns, names, tokens, idx)

    if skipped:
        logger.warning("Fallback skipped %d line(s) with a non-numeric leading token", skipped)
    logger.info("Fallback parsed %d rows from %s", len(index), source_name)

    return ParseSuccess(
        Document(
            header=LasHeader(curve=synthesize_curve_section(names)),
            data=DataTable.from_columns(index, columns),
            curve_names=tuple(names),
            index_unit=cfg.fallback_index_unit,
            source_name=source_name,
        )
    )
