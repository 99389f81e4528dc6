# src/laslite/pipelines/pipe_dialect.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from laslite.config.defaults import default_config
from laslite.config.schema import ParseConfig
from laslite.curves.schema import unique_curve_names
from laslite.errors import TerminalParseFailure
from laslite.io.sections import normalize_newlines
from laslite.io.types import DataTable, Document, HeaderItem, HeaderSection, LasHeader
from laslite.utils.numeric import number_or_nan, parse_number

logger = logging.getLogger(__name__)

PIPE = "|"


def split_pipe_row(line: str) -> List[str]:
    return [v.strip() for v in line.strip().split(PIPE)]


def _curve_section(names: List[str]) -> HeaderSection:
    items = tuple(HeaderItem(mnemonic=n, unit="", raw_data="", description="", value=n) for n in names)
    return HeaderSection(name="Curve", items=items)


def _parse(text: str, source_name: str, cfg: ParseConfig) -> Document:
    lines = normalize_newlines(text).split("\n")
    headers = unique_curve_names([h for h in split_pipe_row(lines[0]) if h])
    if not headers:
        raise ValueError("header row has no column names")

    index: List[float] = []
    columns: Dict[str, List[float]] = {h: [] for h in headers}

    for line in lines[1 : cfg.max_data_lines]:
        if not line.strip():
            continue
        values = split_pipe_row(line)
        idx = parse_number(values[0])
        if len(values) < 2 or idx is None:
            logger.debug("Skipping pipe-delimited row: %r", line)
            continue
        index.append(idx)
        columns[headers[0]].append(idx)
        # Positional zip only: a short row leaves its trailing columns unpopulated.
        for j in range(1, min(len(values), len(headers))):
            columns[headers[j]].append(number_or_nan(values[j]))

    table = DataTable.from_columns(index, columns)
    if not table.is_aligned():
        logger.warning("%s: some pipe-delimited rows were short; columns have unequal lengths", source_name)

    return Document(
        header=LasHeader(curve=_curve_section(headers)),
        data=table,
        curve_names=tuple(headers),
        index_unit=cfg.pipe_index_unit,
        source_name=source_name,
    )


def parse_pipe_delimited(text: str, source_name: str, *, config: Optional[ParseConfig] = None) -> Document:
    """
    Parse the '|'-delimited dialect: a header row of column names, then rows
    whose first field is the index value.

    There is no fallback for this dialect; any failure is terminal.
    """
    cfg = config or default_config()
    try:
        return _parse(text, source_name, cfg)
    except Exception as e:
        logger.warning("Pipe-delimited parse of %s failed: %s", source_name, e)
        raise TerminalParseFailure(source_name, [str(e) or type(e).__name__]) from e
