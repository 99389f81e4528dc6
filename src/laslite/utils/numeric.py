# src/laslite/utils/numeric.py
from __future__ import annotations

import math
from typing import Optional

NAN = float("nan")


def parse_number(token: Optional[str]) -> Optional[float]:
    """
    Strict float parsing for LAS tokens.

    Returns None for empty, non-numeric or non-finite input ("nan", "inf"),
    so callers can decide between dropping a row and writing the NaN sentinel.
    """
    s = (token or "").strip()
    if not s:
        return None
    try:
        v = float(s)
    except ValueError:
        return None
    if not math.isfinite(v):
        return None
    return v


def number_or_nan(token: Optional[str]) -> float:
    v = parse_number(token)
    return NAN if v is None else v
