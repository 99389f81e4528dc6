# src/laslite/io/las.py
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from laslite.io.types import HeaderSection
from laslite.utils.numeric import parse_number

logger = logging.getLogger(__name__)

LAS_SUFFIX = ".las"

_WRAP_VALUE_RE = re.compile(r"^\s*(YES|NO|TRUE|FALSE|0|1|Y|N)\b", re.IGNORECASE)


def read_las_text(path: Path, *, require_las_suffix: bool = True) -> str:
    """
    Read a LAS file as text.

    - UTF-8 with optional BOM; undecodable bytes are replaced, never fatal.
    - By default refuses files without a .las suffix (case-insensitive).
    """
    p = Path(path)
    if require_las_suffix and p.suffix.lower() != LAS_SUFFIX:
        raise ValueError(f"Not a .las file: {p.name}")
    if not p.exists():
        raise FileNotFoundError(p)
    blob = p.read_bytes()
    return blob.decode("utf-8-sig", errors="replace")


def is_wrapped(version: Optional[HeaderSection]) -> Optional[bool]:
    """
    WRAP flag from the ~V section.

    Returns:
      - True if WRAP=YES
      - False if WRAP=NO
      - None if absent or unreadable
    """
    if version is None:
        return None
    for item in version.items:
        if item.mnemonic.strip().upper() != "WRAP":
            continue
        m = _WRAP_VALUE_RE.match(item.raw_data)
        if not m:
            return None
        return m.group(1).upper() in {"YES", "TRUE", "1", "Y"}
    return None


def null_value(well: Optional[HeaderSection]) -> Optional[float]:
    """Numeric NULL sentinel declared in ~W (e.g. -999.25), if any."""
    if well is None:
        return None
    for item in well.items:
        if item.mnemonic.strip().upper() == "NULL":
            return parse_number(item.raw_data)
    return None
