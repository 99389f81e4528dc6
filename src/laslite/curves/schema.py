# src/laslite/curves/schema.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from laslite.io.sections import block_lines
from laslite.io.types import DataTable, HeaderItem, HeaderSection

logger = logging.getLogger(__name__)

INDEX_CURVE_NAME = "DEPTH"

# Where the curve names came from, in priority order.
SOURCE_HEADER = "header"
SOURCE_DATA = "data"
SOURCE_SYNTHESIZED = "synthesized"
SOURCE_NONE = "none"


@dataclass(frozen=True)
class CurveSchema:
    names: Tuple[str, ...]
    source: str

    @property
    def from_header(self) -> bool:
        return self.source == SOURCE_HEADER


def positional_curve_names(n_columns: int) -> List[str]:
    """DEPTH, CURVE_1, CURVE_2, ... for `n_columns` columns."""
    return [INDEX_CURVE_NAME if i == 0 else f"CURVE_{i}" for i in range(max(0, int(n_columns)))]


def unique_curve_names(names: Sequence[str]) -> List[str]:
    """
    Make table keys unique while keeping order: repeats become NAME:2, NAME:3, ...
    """
    seen: Dict[str, int] = {}
    taken = set(names)
    out: List[str] = []
    for raw in names:
        if raw not in seen:
            seen[raw] = 1
            out.append(raw)
            continue
        k = seen[raw]
        cand = raw
        while cand in taken:
            k += 1
            cand = f"{raw}:{k}"
        seen[raw] = k
        taken.add(cand)
        logger.warning("Duplicate curve mnemonic %r renamed to %r", raw, cand)
        out.append(cand)
    return out


def infer_names_from_line(line: Optional[str]) -> List[str]:
    if not line:
        return []
    return positional_curve_names(len(line.split()))


def resolve_curve_names(curve_section: Optional[HeaderSection], data_block: Optional[str]) -> CurveSchema:
    """
    Curve names backing the data table, by priority:
      1) ~C item mnemonics (made unique)
      2) positional inference from the first data line of ~A
    An empty result is finished later by finalize_curve_names().
    """
    if curve_section is not None and len(curve_section) > 0:
        return CurveSchema(names=tuple(unique_curve_names(curve_section.mnemonics())), source=SOURCE_HEADER)

    first = next(iter(block_lines(data_block)), None)
    inferred = infer_names_from_line(first)
    if inferred:
        logger.info("No curve definitions; inferred %d curve names from data", len(inferred))
        return CurveSchema(names=tuple(inferred), source=SOURCE_DATA)

    return CurveSchema(names=(), source=SOURCE_NONE)


def finalize_curve_names(schema: CurveSchema, table: DataTable) -> Tuple[CurveSchema, DataTable]:
    """
    Last resort: no names resolved but the table has columns ->
    Curve_0..Curve_n, re-keying the columns in order so names and keys agree.
    """
    if schema.names or not table.curves:
        return schema, table

    names = [f"Curve_{i}" for i in range(len(table.curves))]
    logger.info("Synthesized %d curve names from table columns", len(names))
    columns = {new: table.curves[old] for new, old in zip(names, table.curves)}
    return (
        CurveSchema(names=tuple(names), source=SOURCE_SYNTHESIZED),
        DataTable.from_columns(table.index, columns),
    )


def synthesize_curve_section(names: Sequence[str]) -> HeaderSection:
    """Curve section standing in for a missing ~C block."""
    items = []
    for i, name in enumerate(names):
        items.append(
            HeaderItem(
                mnemonic=name,
                unit="",
                raw_data="",
                description="Depth" if i == 0 else f"Curve {i}",
                value=name,
            )
        )
    return HeaderSection(name="Curve", items=tuple(items))
