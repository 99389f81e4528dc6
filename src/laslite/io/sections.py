# src/laslite/io/sections.py
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

MAX_SECTION_LINES = 50_000

# Logical section -> accepted tag spellings (short form first).
SECTION_TAGS: Dict[str, tuple] = {
    "version": ("~V", "~VERSION"),
    "well": ("~W", "~WELL"),
    "curve": ("~C", "~CURVE"),
    "parameter": ("~P", "~PARAMETER"),
    "other": ("~O", "~OTHER"),
    "data": ("~A", "~ASCII"),
}


def normalize_newlines(text: str) -> str:
    return (text or "").replace("\r\n", "\n").replace("\r", "\n")


def is_skippable(line: str) -> bool:
    """Blank or '#' comment (expects a stripped line)."""
    return not line or line.startswith("#")


def split_sections(text: str, *, max_lines: int = MAX_SECTION_LINES) -> Dict[str, str]:
    """
    Split raw LAS text into top-level blocks keyed by the uppercased first
    token of each '~' marker line (e.g. '~W', '~WELL', '~A').

    - Only the first `max_lines` physical lines are considered (truncation).
    - Blank lines and '#' comments are dropped.
    - Each block starts with its own (stripped) marker line.
    - Lines before the first marker are ignored.

    Short and long tag spellings are NOT merged here; use pick_section().
    """
    lines = normalize_newlines(text).split("\n")
    if len(lines) > max_lines:
        logger.warning("Input has %d lines; only the first %d are parsed", len(lines), max_lines)
        lines = lines[:max_lines]

    sections: Dict[str, str] = {}
    current: Optional[str] = None
    buf: List[str] = []

    for raw in lines:
        line = raw.strip()
        if is_skippable(line):
            continue
        if line.startswith("~"):
            if current is not None:
                sections[current] = "\n".join(buf) + "\n"
            current = line.split()[0].upper()
            buf = [line]
        elif current is not None:
            buf.append(line)

    if current is not None:
        sections[current] = "\n".join(buf) + "\n"

    logger.debug("Found sections: %s", list(sections))
    return sections


def pick_section(sections: Mapping[str, str], *tags: str) -> Optional[str]:
    """Return the first block present under any of `tags` (probe order = argument order)."""
    for tag in tags:
        block = sections.get(tag.upper())
        if block:
            return block
    return None


def pick_logical(sections: Mapping[str, str], logical: str) -> Optional[str]:
    return pick_section(sections, *SECTION_TAGS[logical])


def has_known_section(sections: Mapping[str, str]) -> bool:
    return any(pick_logical(sections, name) is not None for name in SECTION_TAGS)


def block_lines(block: Optional[str], *, limit: Optional[int] = None) -> List[str]:
    """
    Content lines of a block: marker line skipped, blanks and comments dropped,
    each line stripped.

    `limit` caps the raw lines considered, counting the marker line.
    """
    if not block:
        return []
    raw = block.split("\n")
    if limit is not None:
        raw = raw[:limit]
    out: List[str] = []
    for ln in raw[1:]:
        s = ln.strip()
        if not is_skippable(s):
            out.append(s)
    return out
