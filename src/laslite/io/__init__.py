# src/laslite/io/__init__.py
from __future__ import annotations

from .header import parse_header_line, parse_header_section
from .sections import SECTION_TAGS, pick_section, split_sections
from .types import DataTable, Document, HeaderItem, HeaderSection, HeaderValue, LasHeader

__all__ = [
    "DataTable",
    "Document",
    "HeaderItem",
    "HeaderSection",
    "HeaderValue",
    "LasHeader",
    "SECTION_TAGS",
    "parse_header_line",
    "parse_header_section",
    "pick_section",
    "split_sections",
]
