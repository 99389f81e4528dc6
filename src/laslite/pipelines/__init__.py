# src/laslite/pipelines/__init__.py
"""
Parsing strategies.

primary -> fallback is the default chain (see load.parse_las_text);
pipe_dialect is a separate entry point and never part of that chain.
"""

from __future__ import annotations

from .fallback import run_fallback
from .load import load_las_file, parse_las_text, parse_text
from .outcome import ParseFailure, ParseOutcome, ParseSuccess
from .pipe_dialect import parse_pipe_delimited
from .primary import run_primary

__all__ = [
    "ParseFailure",
    "ParseOutcome",
    "ParseSuccess",
    "load_las_file",
    "parse_las_text",
    "parse_pipe_delimited",
    "parse_text",
    "run_fallback",
    "run_primary",
]
