# src/laslite/curves/units.py
from __future__ import annotations

from typing import Optional

from laslite.io.types import HeaderSection

DEFAULT_INDEX_UNIT = "ft"


def resolve_index_unit(well_section: Optional[HeaderSection], default: str = DEFAULT_INDEX_UNIT) -> str:
    """
    Unit of the index (depth) curve from the ~W section.

    The first item whose lowercased mnemonic contains 'dep' (DEPT, DEPTH, ...)
    decides: its unit when non-empty, otherwise `default`. Later matches are
    not consulted.
    """
    if well_section is None:
        return default
    for item in well_section.items:
        if "dep" in item.mnemonic.lower():
            return item.unit or default
    return default
