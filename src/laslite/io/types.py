# src/laslite/io/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

import numpy as np

# Closed value variant for header items: a finite float, or the raw string.
HeaderValue = Union[float, str]

SECTION_NAMES: Tuple[str, ...] = ("Version", "Well", "Curve", "Parameter", "Other")


# =============================================================================
# Header
# =============================================================================

@dataclass(frozen=True)
class HeaderItem:
    mnemonic: str
    unit: str
    raw_data: str
    description: str
    value: HeaderValue

    @property
    def is_numeric(self) -> bool:
        return isinstance(self.value, float)


@dataclass(frozen=True)
class HeaderSection:
    name: str
    items: Tuple[HeaderItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def mnemonics(self) -> List[str]:
        return [it.mnemonic for it in self.items]

    def by_mnemonic(self) -> Dict[str, HeaderItem]:
        """
        Mnemonic -> item view, LAST occurrence wins.

        Header blocks may repeat a mnemonic; `items` keeps every occurrence in
        source order, while this mapping silently keeps only the last one
        (key position is that of the first occurrence).
        """
        out: Dict[str, HeaderItem] = {}
        for it in self.items:
            out[it.mnemonic] = it
        return out


def empty_section(name: str) -> HeaderSection:
    return HeaderSection(name=name, items=())


@dataclass(frozen=True)
class LasHeader:
    version: HeaderSection = field(default_factory=lambda: empty_section("Version"))
    well: HeaderSection = field(default_factory=lambda: empty_section("Well"))
    curve: HeaderSection = field(default_factory=lambda: empty_section("Curve"))
    parameter: HeaderSection = field(default_factory=lambda: empty_section("Parameter"))
    other: HeaderSection = field(default_factory=lambda: empty_section("Other"))

    def sections(self) -> Tuple[HeaderSection, ...]:
        return (self.version, self.well, self.curve, self.parameter, self.other)


# =============================================================================
# Data
# =============================================================================

def frozen_array(values: Iterable[float]) -> np.ndarray:
    # np.array copies, so callers keep no writable alias.
    arr = np.array(list(values), dtype="float64").reshape(-1)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class DataTable:
    """
    Index column plus named curve columns (read-only float64 arrays).

    `curves` preserves first-seen column order. Missing or unparsable values
    are NaN, never absent.
    """

    index: np.ndarray
    curves: Mapping[str, np.ndarray]

    @classmethod
    def from_columns(cls, index: Sequence[float], columns: Mapping[str, Sequence[float]]) -> "DataTable":
        curves = {name: frozen_array(vals) for name, vals in columns.items()}
        return cls(index=frozen_array(index), curves=MappingProxyType(curves))

    @classmethod
    def empty(cls) -> "DataTable":
        return cls.from_columns([], {})

    @property
    def n_rows(self) -> int:
        return int(self.index.size)

    def is_aligned(self) -> bool:
        n = self.n_rows
        return all(int(v.size) == n for v in self.curves.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataTable):
            return NotImplemented
        if list(self.curves) != list(other.curves):
            return False
        if not np.array_equal(self.index, other.index, equal_nan=True):
            return False
        return all(
            np.array_equal(v, other.curves[k], equal_nan=True) for k, v in self.curves.items()
        )


@dataclass(frozen=True)
class Document:
    header: LasHeader
    data: DataTable
    curve_names: Tuple[str, ...]
    index_unit: str
    source_name: str
