# src/laslite/io/frame.py
from __future__ import annotations

from pathlib import Path

import pandas as pd

from laslite.io.types import Document


def to_dataframe(doc: Document) -> pd.DataFrame:
    """
    Curves as DataFrame columns, indexed by the index column.

    Ragged pipe-dialect columns are NaN-padded at the end.
    """
    index_name = doc.curve_names[0] if doc.curve_names else "INDEX"
    n = doc.data.n_rows
    cols = {}
    for name in doc.curve_names:
        values = doc.data.curves.get(name)
        s = pd.Series(values if values is not None else [], dtype="float64")
        cols[name] = s.reindex(range(n)).to_numpy()
    index = pd.Index(doc.data.index, name=index_name, dtype="float64")
    return pd.DataFrame(cols, columns=list(doc.curve_names), index=index)


def write_table_csv(doc: Document, path: Path) -> Path:
    """Write the data table as CSV (curve columns only; the index curve is column 0)."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    to_dataframe(doc).to_csv(p, index=False, na_rep="")
    return p
