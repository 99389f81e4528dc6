# src/laslite/io/data_table.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from laslite.curves.schema import infer_names_from_line, unique_curve_names
from laslite.io.sections import block_lines
from laslite.io.types import DataTable
from laslite.utils.numeric import NAN, number_or_nan, parse_number

logger = logging.getLogger(__name__)

MAX_DATA_LINES = 20_000


def append_row(
    columns: Dict[str, List[float]],
    names: Sequence[str],
    tokens: Sequence[str],
    index_value: float,
) -> None:
    """
    Append one row across every named column.

    Column 0 (the index curve) gets `index_value`; other columns get the parsed
    token or NaN, and NaN when the row is short. Surplus tokens are ignored.
    """
    n_tok = len(tokens)
    for j, name in enumerate(names):
        if j == 0:
            columns[name].append(index_value)
        elif j < n_tok:
            columns[name].append(number_or_nan(tokens[j]))
        else:
            columns[name].append(NAN)


def parse_data_table(
    block: Optional[str],
    curve_names: Sequence[str],
    *,
    max_lines: int = MAX_DATA_LINES,
) -> DataTable:
    """
    Parse an ~A block into a DataTable.

    - First whitespace token = index value; a non-numeric one drops the row.
    - Every curve column stays the same length as the index (NaN fill).
    - With no curve names, they are derived from the first data line.
    - A missing or row-less block still keys every given name (empty columns).
    """
    lines = block_lines(block, limit=max_lines)
    if not lines:
        # Named columns stay addressable even with no rows.
        return DataTable.from_columns([], {n: [] for n in unique_curve_names(curve_names)})

    names = unique_curve_names(curve_names) if curve_names else infer_names_from_line(lines[0])
    if not curve_names:
        logger.info("Derived %d curve names from the first data line", len(names))

    index: List[float] = []
    columns: Dict[str, List[float]] = {n: [] for n in names}
    dropped = 0

    for line in lines:
        tokens = line.split()
        idx = parse_number(tokens[0])
        if idx is None:
            dropped += 1
            logger.debug("Dropping data row with non-numeric index: %r", line)
            continue
        index.append(idx)
        append_row(columns, names, tokens, idx)

    if dropped:
        logger.warning("Dropped %d data row(s) with a non-numeric leading token", dropped)
    logger.info("Parsed %d data rows", len(index))
    return DataTable.from_columns(index, columns)


def mask_null_values(table: DataTable, null_value: Optional[float]) -> DataTable:
    """
    Replace values equal to the LAS NULL value (e.g. -999.25) with NaN.
    The index and the first (index) curve are left untouched.
    """
    if null_value is None or not table.curves:
        return table

    columns = {}
    for j, (name, values) in enumerate(table.curves.items()):
        columns[name] = values if j == 0 else np.where(values == null_value, np.nan, values)
    return DataTable.from_columns(table.index, columns)
