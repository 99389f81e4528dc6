# src/laslite/__init__.py
from __future__ import annotations

from laslite.errors import LasParseError, StructuralParseError, TerminalParseFailure
from laslite.io.types import DataTable, Document, HeaderItem, HeaderSection, LasHeader
from laslite.pipelines import (
    ParseFailure,
    ParseSuccess,
    load_las_file,
    parse_las_text,
    parse_pipe_delimited,
    parse_text,
    run_fallback,
    run_primary,
)

__version__ = "0.1.0"

__all__ = [
    "DataTable",
    "Document",
    "HeaderItem",
    "HeaderSection",
    "LasHeader",
    "LasParseError",
    "ParseFailure",
    "ParseSuccess",
    "StructuralParseError",
    "TerminalParseFailure",
    "load_las_file",
    "parse_las_text",
    "parse_pipe_delimited",
    "parse_text",
    "run_fallback",
    "run_primary",
]
