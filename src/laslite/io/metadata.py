# src/laslite/io/metadata.py
from __future__ import annotations

from typing import Dict, List, Sequence

from laslite.io.types import Document, HeaderItem

# Well items shown in a metadata summary.
WELL_SUMMARY_MNEMONICS: Sequence[str] = ("WELL", "COMP", "LOC", "SRVC", "DATE", "API")

DEFAULT_SELECTION_SIZE = 4


def well_metadata(doc: Document) -> Dict[str, HeaderItem]:
    """
    Mnemonic -> item for the ~W section. Repeated mnemonics: last one wins.
    """
    return doc.header.well.by_mnemonic()


def well_summary(doc: Document, mnemonics: Sequence[str] = WELL_SUMMARY_MNEMONICS) -> Dict[str, HeaderItem]:
    wanted = set(mnemonics)
    return {k: v for k, v in well_metadata(doc).items() if k in wanted}


def default_curve_selection(doc: Document, n: int = DEFAULT_SELECTION_SIZE) -> List[str]:
    """The index curve plus the next few, in column order."""
    return list(doc.curve_names[: max(0, int(n))])
