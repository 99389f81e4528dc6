# src/laslite/pipelines/load.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from laslite.config.schema import ParseConfig
from laslite.errors import TerminalParseFailure
from laslite.io.dialect import DIALECT_LAS, DIALECT_PIPE, DIALECTS, detect_dialect
from laslite.io.las import read_las_text
from laslite.io.types import Document
from laslite.pipelines.fallback import run_fallback
from laslite.pipelines.outcome import ParseSuccess
from laslite.pipelines.pipe_dialect import parse_pipe_delimited
from laslite.pipelines.primary import run_primary

logger = logging.getLogger(__name__)


def parse_las_text(text: str, source_name: str, *, config: Optional[ParseConfig] = None) -> Document:
    """
    Parse LAS text: primary pipeline first, the fallback pipeline as a full
    replacement when it fails.

    Raises TerminalParseFailure when both fail.
    """
    primary = run_primary(text, source_name, config=config)
    if isinstance(primary, ParseSuccess):
        return primary.document

    logger.warning("Falling back to column-count parsing for %s (%s)", source_name, primary.reason)
    fallback = run_fallback(text, source_name, config=config)
    if isinstance(fallback, ParseSuccess):
        return fallback.document

    logger.error("Could not parse %s", source_name)
    raise TerminalParseFailure(source_name, [primary.reason, fallback.reason])


def parse_text(
    text: str,
    source_name: str,
    *,
    dialect: str = DIALECT_LAS,
    config: Optional[ParseConfig] = None,
) -> Document:
    """
    Dispatch on an explicitly chosen dialect ('las', 'pipe' or 'auto').
    """
    d = (dialect or DIALECT_LAS).strip().lower()
    if d == "auto":
        d = detect_dialect(text)
        logger.info("Detected %s dialect for %s", d, source_name)
    if d not in DIALECTS:
        raise ValueError(f"Unknown dialect {dialect!r}; expected one of {DIALECTS + ('auto',)}")
    if d == DIALECT_PIPE:
        return parse_pipe_delimited(text, source_name, config=config)
    return parse_las_text(text, source_name, config=config)


def load_las_file(
    path: Path,
    *,
    dialect: str = DIALECT_LAS,
    config: Optional[ParseConfig] = None,
    require_las_suffix: bool = True,
) -> Document:
    """Read `path` and parse it; the file name becomes the Document's source_name."""
    p = Path(path)
    text = read_las_text(p, require_las_suffix=require_las_suffix)
    return parse_text(text, p.name, dialect=dialect, config=config)
