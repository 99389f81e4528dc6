# src/laslite/io/dialect.py
from __future__ import annotations

from laslite.io.sections import normalize_newlines

DIALECT_LAS = "las"
DIALECT_PIPE = "pipe"
DIALECTS = (DIALECT_LAS, DIALECT_PIPE)

PIPE_CHAR = "|"


def _first_nonempty_line(text: str) -> str:
    for line in text.split("\n"):
        s = line.strip()
        if s:
            return s
    return ""


def detect_dialect(text: str) -> str:
    """
    'pipe' when the first non-empty line carries '|' and no line starts a '~'
    section; otherwise 'las'.
    """
    txt = normalize_newlines(text)
    if PIPE_CHAR not in _first_nonempty_line(txt):
        return DIALECT_LAS
    if any(line.lstrip().startswith("~") for line in txt.split("\n")):
        return DIALECT_LAS
    return DIALECT_PIPE
