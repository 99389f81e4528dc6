# src/laslite/io/header.py
from __future__ import annotations

import logging
import re
from typing import List, Optional

from laslite.io.sections import block_lines
from laslite.io.types import HeaderItem, HeaderSection, HeaderValue, empty_section
from laslite.utils.numeric import parse_number

logger = logging.getLogger(__name__)

_WS_RE = re.compile(r"\s")


def header_value(raw_data: str) -> HeaderValue:
    v = parse_number(raw_data)
    return raw_data if v is None else v


def parse_header_line(line: str) -> Optional[HeaderItem]:
    """
    Parse one header line with two positional grammars:

      dotted:   MNEM.UNIT  DATA : DESCRIPTION   ('.' at pos > 0, ':' after it)
      undotted: MNEM  DATA : DESCRIPTION        (':' at pos > 0, unit = '')

    The first '.' and the first ':' decide; nothing else is disambiguated.
    Returns None when neither grammar applies.
    """
    s = (line or "").strip()
    dot = s.find(".")
    colon = s.find(":")

    if dot > 0 and colon > dot:
        mnemonic = s[:dot].strip()
        ws = _WS_RE.search(s, dot + 1)
        unit_end = ws.start() if ws is not None and ws.start() < colon else colon
        unit = s[dot + 1 : unit_end].strip()
        data = s[unit_end:colon].strip()
    elif colon > 0:
        head = s[:colon].strip()
        parts = head.split(None, 1)
        mnemonic = parts[0] if parts else ""
        unit = ""
        data = parts[1].strip() if len(parts) > 1 else ""
    else:
        return None

    description = s[colon + 1 :].strip()
    return HeaderItem(
        mnemonic=mnemonic,
        unit=unit,
        raw_data=data,
        description=description,
        value=header_value(data),
    )


def parse_header_section(block: Optional[str], name: str) -> HeaderSection:
    """
    Parse a header block (~V, ~W, ~C, ~P, ~O) into a HeaderSection.

    Missing/empty blocks give an empty section. Lines matching neither grammar
    are dropped with a warning.
    """
    if not block:
        return empty_section(name)

    items: List[HeaderItem] = []
    for line in block_lines(block):
        item = parse_header_line(line)
        if item is None:
            logger.warning("%s section: dropping unparsable header line %r", name, line)
            continue
        items.append(item)

    return HeaderSection(name=name, items=tuple(items))
